"""Shared typed models.

This module defines the immutable entity types for each CN level
plus the small value types used by the store and mapping lookups.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Union

from core.constants import VERSION_2023, VERSION_2024, VERSION_2025, VERSION_2026

Record = Mapping[str, object]
IndexDefinition = Mapping[str, tuple[str, ...]]
IndexKey = tuple[str, ...]


class CnVersion:
    """Known CN dataset release years."""

    VERSION_2023 = VERSION_2023
    VERSION_2024 = VERSION_2024
    VERSION_2025 = VERSION_2025
    VERSION_2026 = VERSION_2026


class LoadPhase(Enum):
    """Forward-only load progress of one collection store."""

    EMPTY = "empty"
    PARTIALLY_LOADED = "partially_loaded"
    FULLY_LOADED = "fully_loaded"


@dataclass(frozen=True)
class Section:
    """CN section, e.g. ``I`` (live animals; animal products).

    Attributes:
        code: Normalized section code.
        raw_code: Code as printed in the nomenclature.
        version: Dataset release year.
        name: English display name.
        translated_name: Locale name when a translator produced one.
    """

    code: str
    raw_code: str
    version: int
    name: str
    translated_name: str | None = None

    @property
    def local_name(self) -> str:
        """Return the translated name, falling back to the English name."""
        return self.translated_name if self.translated_name is not None else self.name


@dataclass(frozen=True)
class Chapter:
    """CN chapter, two digits, e.g. ``01``.

    Attributes:
        code: Normalized chapter code.
        raw_code: Code as printed in the nomenclature.
        version: Dataset release year.
        section: Parent section code.
        name: English display name.
        translated_name: Locale name when a translator produced one.
    """

    code: str
    raw_code: str
    version: int
    section: str
    name: str
    translated_name: str | None = None

    @property
    def local_name(self) -> str:
        """Return the translated name, falling back to the English name."""
        return self.translated_name if self.translated_name is not None else self.name


@dataclass(frozen=True)
class Heading:
    """CN heading, four digits, e.g. ``0101``.

    Attributes:
        code: Normalized heading code.
        raw_code: Code as printed in the nomenclature.
        version: Dataset release year.
        section: Parent section code.
        chapter: Parent chapter code.
        name: English display name.
        translated_name: Locale name when a translator produced one.
    """

    code: str
    raw_code: str
    version: int
    section: str
    chapter: str
    name: str
    translated_name: str | None = None

    @property
    def local_name(self) -> str:
        """Return the translated name, falling back to the English name."""
        return self.translated_name if self.translated_name is not None else self.name


@dataclass(frozen=True)
class Subheading:
    """HS subheading, six digits, e.g. ``010221`` (raw ``0102 21``).

    Attributes:
        code: Normalized subheading code.
        raw_code: Code as printed in the nomenclature.
        version: Dataset release year.
        section: Parent section code.
        chapter: Parent chapter code.
        heading: Parent heading code.
        name: English display name.
        translated_name: Locale name when a translator produced one.
    """

    code: str
    raw_code: str
    version: int
    section: str
    chapter: str
    heading: str
    name: str
    translated_name: str | None = None

    @property
    def local_name(self) -> str:
        """Return the translated name, falling back to the English name."""
        return self.translated_name if self.translated_name is not None else self.name


@dataclass(frozen=True)
class CnCode:
    """Eight-digit CN code, e.g. ``01012100`` (raw ``0101 21 00``).

    Attributes:
        code: Normalized CN code.
        raw_code: Code as printed in the nomenclature.
        version: Dataset release year.
        section: Parent section code.
        chapter: Parent chapter code.
        heading: Parent heading code.
        subheading: Parent subheading code.
        name: English display name.
        supplementary_unit: Optional supplementary unit, e.g. ``PST``.
        translated_name: Locale name when a translator produced one.
    """

    code: str
    raw_code: str
    version: int
    section: str
    chapter: str
    heading: str
    subheading: str
    name: str
    supplementary_unit: str | None = None
    translated_name: str | None = None

    @property
    def local_name(self) -> str:
        """Return the translated name, falling back to the English name."""
        return self.translated_name if self.translated_name is not None else self.name


Entity = Union[Section, Chapter, Heading, Subheading, CnCode]


@dataclass(frozen=True)
class MappedCode:
    """One target of a cross-version code mapping.

    Attributes:
        code: Target CN code.
        version: Target dataset version.
    """

    code: str
    version: int
