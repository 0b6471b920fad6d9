"""manopt — one declarative option set, parsed from argv and rendered as
both ``--help`` text and a roff manual page.
"""

from manopt.version import __version__

__all__: list[str] = ["__version__"]
