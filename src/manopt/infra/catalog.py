"""Message catalogs backed by :mod:`gettext`.

Catalogs use the standard layout::

    <locale_dir>/<language>/LC_MESSAGES/<domain>.mo

Lookups fall back to the untranslated key whenever no catalog matches,
so an unbound or partially translated build still reads correctly.
"""

from __future__ import annotations

import gettext
from collections.abc import Sequence
from pathlib import Path

from manopt.exceptions import LocaleBindError


class GettextTranslator:
    """Concrete :class:`~manopt.core.protocols.Translator`.

    Parameters
    ----------
    domain:
        Catalog name (the ``.mo`` file stem).
    languages:
        Explicit language list.  ``None`` consults ``LANGUAGE``,
        ``LC_ALL``, ``LC_MESSAGES`` and ``LANG`` as gettext does.
    """

    def __init__(
        self,
        domain: str,
        *,
        languages: Sequence[str] | None = None,
    ) -> None:
        self._domain: str = domain
        self._languages: list[str] | None = list(languages) if languages else None
        self._translations: gettext.NullTranslations = gettext.NullTranslations()
        self.locale_dir: str | None = None
        """Directory bound by the most recent :meth:`bind` call."""

    def bind(self, locale_dir: str | None) -> None:
        """Load the catalog for the current language from *locale_dir*.

        Raises
        ------
        LocaleBindError
            If *locale_dir* is given but is not a directory.
        """
        if locale_dir is not None and not Path(locale_dir).is_dir():
            raise LocaleBindError(
                f"Locale directory not found: {locale_dir}",
                hint=f"Expected <dir>/<language>/LC_MESSAGES/{self._domain}.mo",
            )
        self._translations = gettext.translation(
            self._domain,
            localedir=locale_dir,
            languages=self._languages,
            fallback=True,
        )
        self.locale_dir = locale_dir

    def translate(self, key: str) -> str:
        return self._translations.gettext(key)
