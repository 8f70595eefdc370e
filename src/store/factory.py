"""SDK entry point building collection facades from config."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any

from core.config import CnCodesConfig
from store.code_mappings import CnCodesMappings
from store.nomenclature import CnChapters, CnCodes, CnHeadings, CnSections, CnSubheadings
from translation.catalog_loader import YamlCatalogLoader
from translation.translator import CatalogTranslator, Translator


class CnCodesFactory:
    """Primary SDK entry point for CN lookups.

    Every ``get_*`` call returns a fresh, empty collection; callers
    keep the instance they want to share loaded state through.
    """

    def __init__(
        self,
        config: CnCodesConfig | None = None,
        translator: Translator | None = None,
    ) -> None:
        """Create the factory.

        Args:
            config: Optional runtime configuration, read from env when omitted.
            translator: Optional translator; one is built from the
                configured locale and catalogs when omitted.
        """
        self._config = config or CnCodesConfig.from_env()
        self._translator = translator or _build_translator(self._config)

    @property
    def config(self) -> CnCodesConfig:
        return self._config

    @property
    def translator(self) -> Translator | None:
        return self._translator

    def get_sections(self) -> CnSections:
        return CnSections(self._config.data_root, **self._collection_kwargs())

    def get_chapters(self) -> CnChapters:
        return CnChapters(self._config.data_root, **self._collection_kwargs())

    def get_headings(self) -> CnHeadings:
        return CnHeadings(self._config.data_root, **self._collection_kwargs())

    def get_subheadings(self) -> CnSubheadings:
        return CnSubheadings(self._config.data_root, **self._collection_kwargs())

    def get_codes(self) -> CnCodes:
        return CnCodes(self._config.data_root, **self._collection_kwargs())

    def get_mappings(self) -> CnCodesMappings:
        return CnCodesMappings(self._config.data_root)

    def with_data_root(self, data_root: str) -> "CnCodesFactory":
        """Clone the factory with a different snapshot directory.

        Args:
            data_root: New data root path.

        Returns:
            New factory sharing this factory's translator.
        """
        resolved_root = Path(data_root).expanduser().resolve()
        updated_config = replace(self._config, data_root=resolved_root)
        return CnCodesFactory(updated_config, self._translator)

    def _collection_kwargs(self) -> dict[str, Any]:
        return {
            "translator": self._translator,
            "locale": self._config.locale,
            "default_version": self._config.default_version,
        }


def _build_translator(config: CnCodesConfig) -> Translator | None:
    """Build a catalog translator when a display locale is configured."""
    if config.locale is None:
        return None
    loader = YamlCatalogLoader(config.translations_root)
    return CatalogTranslator(
        loader,
        default_locale=config.locale,
        fallback_locale=config.fallback_locale,
    )
