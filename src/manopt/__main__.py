"""Allow ``python -m manopt`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m manopt`` behaves identically to the ``manopt``
console script.
"""

from __future__ import annotations

from manopt.cli.app import cli

if __name__ == "__main__":
    cli()
