"""Core constants used across cncodes modules.

This module centralizes file naming, version tags, and defaults.
Keeping values here avoids magic literals in store and CLI code.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path("resources")
TRANSLATIONS_DIR_NAME = "translations"
SNAPSHOT_FILE_SUFFIX = ".json"
SNAPSHOT_VERSION_PATTERN = r"_(\d+)\.json$"
MAPPING_FILE_NAME = "cnCodesMapping.json"
SECTIONS_FILE_STEM = "cnSections"
CHAPTERS_FILE_STEM = "cnChapters"
HEADINGS_FILE_STEM = "cnHeadings"
SUBHEADINGS_FILE_STEM = "cnSubheadings"
CODES_FILE_STEM = "cnCodes"
VERSION_FIELD = "version"
NAME_FIELD = "name"
VERSION_2023 = 2023
VERSION_2024 = 2024
VERSION_2025 = 2025
VERSION_2026 = 2026
DEFAULT_VERSION = VERSION_2024
TRANSLATION_DOMAIN = "cnCodes"
DEFAULT_LOCALE = "en"
DEFAULT_FALLBACK_LOCALE = "en"
CATALOG_FILE_SUFFIX = ".yaml"
