"""Translator protocol and its two implementations.

The store only depends on ``Translator``. ``NullTranslator`` is the
identity; ``CatalogTranslator`` consults YAML catalogs with a
fallback locale before returning the source text unchanged.
"""

from __future__ import annotations

from typing import Protocol

from core.constants import DEFAULT_FALLBACK_LOCALE, DEFAULT_LOCALE, TRANSLATION_DOMAIN
from core.errors import CnCodesTranslationError
from translation.catalog_loader import YamlCatalogLoader, normalize_locale


class Translator(Protocol):
    """Deterministic source-text to locale-text capability."""

    def translate(
        self,
        source_text: str,
        locale: str | None = None,
        domain: str = TRANSLATION_DOMAIN,
    ) -> str:
        """Return the translation, or ``source_text`` when none exists."""

    def get_available_locales(self, domain: str = TRANSLATION_DOMAIN) -> set[str]:
        """Return the locales with a catalog for a domain."""


class NullTranslator:
    """Translator that returns the original text unchanged."""

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        self.locale = locale

    def translate(
        self,
        source_text: str,
        locale: str | None = None,
        domain: str = TRANSLATION_DOMAIN,
    ) -> str:
        return source_text

    def get_available_locales(self, domain: str = TRANSLATION_DOMAIN) -> set[str]:
        return {DEFAULT_LOCALE}


class CatalogTranslator:
    """Translator backed by per-locale YAML message catalogs.

    Lookup order is the requested locale, then the fallback locale,
    then the source text itself.
    """

    def __init__(
        self,
        loader: YamlCatalogLoader,
        default_locale: str = DEFAULT_LOCALE,
        fallback_locale: str = DEFAULT_FALLBACK_LOCALE,
    ) -> None:
        """Create a catalog translator.

        Args:
            loader: Catalog loader with its own per-locale cache.
            default_locale: Locale used when ``translate`` gets none.
            fallback_locale: Locale consulted on a miss.

        Raises:
            CnCodesTranslationError: If a locale is blank.
        """
        self._loader = loader
        self._locale = _require_locale(default_locale)
        self._fallback_locale = _require_locale(fallback_locale)

    @property
    def locale(self) -> str:
        return self._locale

    @locale.setter
    def locale(self, value: str) -> None:
        self._locale = _require_locale(value)

    @property
    def fallback_locale(self) -> str:
        return self._fallback_locale

    @fallback_locale.setter
    def fallback_locale(self, value: str) -> None:
        self._fallback_locale = _require_locale(value)

    def translate(
        self,
        source_text: str,
        locale: str | None = None,
        domain: str = TRANSLATION_DOMAIN,
    ) -> str:
        """Translate one English source string.

        Args:
            source_text: English source string, used as catalog key.
            locale: Target locale; the default locale when None.
            domain: Catalog domain.

        Returns:
            Translated text, or ``source_text`` when no catalog has it.
        """
        target_locale = locale or self._locale
        translations = self._loader.load(target_locale, domain)
        if source_text in translations:
            return translations[source_text]
        if normalize_locale(target_locale) != normalize_locale(self._fallback_locale):
            translations = self._loader.load(self._fallback_locale, domain)
            if source_text in translations:
                return translations[source_text]
        return source_text

    def get_available_locales(self, domain: str = TRANSLATION_DOMAIN) -> set[str]:
        return self._loader.get_available_locales(domain)


def _require_locale(value: str) -> str:
    if not value or not value.strip():
        raise CnCodesTranslationError(
            "Locale must be a non-empty string such as 'de' or 'fr_FR'."
        )
    return value
