"""Public SDK surface for cncodes.

This module provides a stable import path for library users.
It re-exports the factory, collection facades, and entity types.
"""

from __future__ import annotations

from core.config import CnCodesConfig
from core.errors import (
    CnCodesConfigError,
    CnCodesError,
    CnCodesStoreError,
    CnCodesTranslationError,
    CnCodesUnknownIndexError,
)
from core.types import (
    Chapter,
    CnCode,
    CnVersion,
    Heading,
    LoadPhase,
    MappedCode,
    Section,
    Subheading,
)
from store.code_mappings import CnCodesMappings
from store.factory import CnCodesFactory
from store.nomenclature import CnChapters, CnCodes, CnHeadings, CnSections, CnSubheadings
from store.versioned_store import VersionedStore
from translation.catalog_loader import YamlCatalogLoader
from translation.translator import CatalogTranslator, NullTranslator, Translator

__all__ = [
    "CatalogTranslator",
    "Chapter",
    "CnChapters",
    "CnCode",
    "CnCodes",
    "CnCodesConfig",
    "CnCodesConfigError",
    "CnCodesError",
    "CnCodesFactory",
    "CnCodesMappings",
    "CnCodesStoreError",
    "CnCodesTranslationError",
    "CnCodesUnknownIndexError",
    "CnHeadings",
    "CnSections",
    "CnSubheadings",
    "CnVersion",
    "Heading",
    "LoadPhase",
    "MappedCode",
    "NullTranslator",
    "Section",
    "Subheading",
    "Translator",
    "VersionedStore",
    "YamlCatalogLoader",
]
