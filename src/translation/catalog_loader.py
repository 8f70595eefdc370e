"""YAML message catalog loading.

Catalogs live at ``<base_path>/<domain>.<locale>.yaml`` and hold a
flat mapping from English source text to translated text.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from core.constants import CATALOG_FILE_SUFFIX, TRANSLATION_DOMAIN
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


class YamlCatalogLoader:
    """Load and cache message catalogs per (locale, domain)."""

    def __init__(self, base_path: Path) -> None:
        """Bind the loader to a catalog directory.

        Args:
            base_path: Directory holding ``<domain>.<locale>.yaml`` files.
        """
        self._base_path = Path(base_path)
        self._catalogs: dict[tuple[str, str], dict[str, str]] = {}
        self._catalog_files: dict[str, dict[str, Path]] = {}

    def load(self, locale: str, domain: str = TRANSLATION_DOMAIN) -> dict[str, str]:
        """Return the catalog for a locale, loading it on first use.

        Args:
            locale: Locale in any common spelling (``DE``, ``de_DE``, ``de-DE``).
            domain: Catalog domain.

        Returns:
            Source to translation mapping, empty when no catalog exists.
        """
        cache_key = (normalize_locale(locale), domain)
        if cache_key not in self._catalogs:
            self._catalogs[cache_key] = self._read_catalog(*cache_key)
        return self._catalogs[cache_key]

    def supports(self, locale: str, domain: str = TRANSLATION_DOMAIN) -> bool:
        return normalize_locale(locale) in self.get_available_locales(domain)

    def get_available_locales(self, domain: str = TRANSLATION_DOMAIN) -> set[str]:
        """Return locales with a catalog file for a domain.

        Args:
            domain: Catalog domain.

        Returns:
            Normalized locale codes, empty for unknown domains.
        """
        return set(self._files_for(domain))

    def _files_for(self, domain: str) -> dict[str, Path]:
        """Map each normalized locale of a domain onto its catalog file.

        An exactly named file such as ``cnCodes.de.yaml`` wins over
        regional spellings such as ``cnCodes.de_DE.yaml``.
        """
        if domain not in self._catalog_files:
            files: dict[str, Path] = {}
            if self._base_path.is_dir():
                for path in sorted(self._base_path.glob(f"{domain}.*{CATALOG_FILE_SUFFIX}")):
                    raw_locale = path.name[len(domain) + 1 : -len(CATALOG_FILE_SUFFIX)]
                    if not raw_locale:
                        continue
                    locale = normalize_locale(raw_locale)
                    if locale not in files or raw_locale == locale:
                        files[locale] = path
            self._catalog_files[domain] = files
        return self._catalog_files[domain]

    def _read_catalog(self, locale: str, domain: str) -> dict[str, str]:
        catalog_path = self._files_for(domain).get(locale)
        if catalog_path is None or not catalog_path.is_file():
            return {}
        try:
            with catalog_path.open("r", encoding="utf-8") as catalog_file:
                payload = yaml.safe_load(catalog_file)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as error:
            _LOGGER.warning("catalog_skipped", path=str(catalog_path), reason=str(error))
            return {}
        if not isinstance(payload, dict):
            _LOGGER.warning(
                "catalog_skipped",
                path=str(catalog_path),
                reason=f"expected mapping, got {type(payload).__name__}",
            )
            return {}
        catalog = {
            str(source): str(target)
            for source, target in payload.items()
            if source is not None and target is not None
        }
        _LOGGER.debug("catalog_loaded", locale=locale, domain=domain, entries=len(catalog))
        return catalog


def normalize_locale(locale: str) -> str:
    """Reduce a locale spelling to its lower-case language code.

    Args:
        locale: Locale such as ``DE``, ``de_DE`` or ``de-DE``.

    Returns:
        Language code, e.g. ``de``.
    """
    return locale.strip().replace("-", "_").split("_", 1)[0].lower()
