"""Typed collection facades, one per CN level.

Each facade supplies a static index table and entity mapper to a
shared ``VersionedStore`` and exposes typed lookup methods on top.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ClassVar, Generic, Iterator, TypeVar

from core.constants import (
    CHAPTERS_FILE_STEM,
    CODES_FILE_STEM,
    DEFAULT_VERSION,
    HEADINGS_FILE_STEM,
    SECTIONS_FILE_STEM,
    SUBHEADINGS_FILE_STEM,
)
from core.types import Chapter, CnCode, Heading, IndexDefinition, Record, Section, Subheading
from store.hydration import (
    chapter_from_record,
    cn_code_from_record,
    heading_from_record,
    section_from_record,
    subheading_from_record,
)
from store.record_cursor import RecordCursor
from store.versioned_store import VersionedStore
from translation.translator import Translator

EntityT = TypeVar("EntityT")


class _Collection(Generic[EntityT]):
    """Shared delegation to the underlying versioned store."""

    FILE_STEM: ClassVar[str]
    INDEXES: ClassVar[IndexDefinition]

    def __init__(
        self,
        base_dir: Path,
        mapper: Callable[[Record, str | None], EntityT],
        translator: Translator | None = None,
        locale: str | None = None,
        default_version: int = DEFAULT_VERSION,
    ) -> None:
        self._default_version = default_version
        self._store: VersionedStore[EntityT] = VersionedStore(
            base_dir,
            self.FILE_STEM,
            mapper,
            self.INDEXES,
            translator=translator,
            locale=locale,
        )

    @property
    def store(self) -> VersionedStore[EntityT]:
        return self._store

    def get_by_code_and_version(self, code: str, version: int | None = None) -> EntityT | None:
        """Return the entry for a code at one version, or None."""
        return self._first("code", [code, self._version(version)])

    def get_all_by_version(self, version: int | None = None) -> list[EntityT]:
        return self._store.all(self._version(version))

    def find_by(self, index_name: str, value: object) -> list[EntityT]:
        return self._store.find_by(index_name, value)

    def load_all(self) -> None:
        self._store.load_all()

    def load_version(self, version: int) -> None:
        self._store.load_version(version)

    def available_versions(self) -> list[int]:
        return self._store.available_versions()

    def count(self) -> int:
        return self._store.count()

    def enumerate(self) -> RecordCursor[EntityT]:
        return self._store.enumerate()

    def to_list(self) -> list[EntityT]:
        return self._store.to_list()

    def __len__(self) -> int:
        return self._store.count()

    def __iter__(self) -> Iterator[EntityT]:
        return iter(self._store)

    def _first(self, index_name: str, value: object) -> EntityT | None:
        entries = self._store.find_by(index_name, value)
        return entries[0] if entries else None

    def _version(self, version: int | None) -> int:
        return self._default_version if version is None else version


class CnSections(_Collection[Section]):
    """CN sections (I to XXI)."""

    FILE_STEM = SECTIONS_FILE_STEM
    INDEXES = {
        "code": ("code", "version"),
        "version": ("version",),
    }

    def __init__(
        self,
        base_dir: Path,
        translator: Translator | None = None,
        locale: str | None = None,
        default_version: int = DEFAULT_VERSION,
    ) -> None:
        super().__init__(base_dir, section_from_record, translator, locale, default_version)


class CnChapters(_Collection[Chapter]):
    """CN chapters (01 to 99)."""

    FILE_STEM = CHAPTERS_FILE_STEM
    INDEXES = {
        "code": ("code", "version"),
        "version": ("version",),
        "section": ("section", "version"),
    }

    def __init__(
        self,
        base_dir: Path,
        translator: Translator | None = None,
        locale: str | None = None,
        default_version: int = DEFAULT_VERSION,
    ) -> None:
        super().__init__(base_dir, chapter_from_record, translator, locale, default_version)

    def get_all_by_section_and_version(
        self, section: str, version: int | None = None
    ) -> list[Chapter]:
        return self._store.find_by("section", [section, self._version(version)])


class CnHeadings(_Collection[Heading]):
    """CN four-digit headings."""

    FILE_STEM = HEADINGS_FILE_STEM
    INDEXES = {
        "code": ("code", "version"),
        "rawCode": ("rawCode", "version"),
        "version": ("version",),
        "chapter": ("chapter", "version"),
    }

    def __init__(
        self,
        base_dir: Path,
        translator: Translator | None = None,
        locale: str | None = None,
        default_version: int = DEFAULT_VERSION,
    ) -> None:
        super().__init__(base_dir, heading_from_record, translator, locale, default_version)

    def get_by_raw_code_and_version(
        self, raw_code: str, version: int | None = None
    ) -> Heading | None:
        return self._first("rawCode", [raw_code, self._version(version)])

    def get_all_by_chapter_and_version(
        self, chapter: str, version: int | None = None
    ) -> list[Heading]:
        return self._store.find_by("chapter", [chapter, self._version(version)])


class CnSubheadings(_Collection[Subheading]):
    """HS six-digit subheadings."""

    FILE_STEM = SUBHEADINGS_FILE_STEM
    INDEXES = {
        "code": ("code", "version"),
        "rawCode": ("rawCode", "version"),
        "version": ("version",),
        "heading": ("heading", "version"),
    }

    def __init__(
        self,
        base_dir: Path,
        translator: Translator | None = None,
        locale: str | None = None,
        default_version: int = DEFAULT_VERSION,
    ) -> None:
        super().__init__(base_dir, subheading_from_record, translator, locale, default_version)

    def get_by_raw_code_and_version(
        self, raw_code: str, version: int | None = None
    ) -> Subheading | None:
        return self._first("rawCode", [raw_code, self._version(version)])

    def get_all_by_heading_and_version(
        self, heading: str, version: int | None = None
    ) -> list[Subheading]:
        return self._store.find_by("heading", [heading, self._version(version)])


class CnCodes(_Collection[CnCode]):
    """CN eight-digit codes."""

    FILE_STEM = CODES_FILE_STEM
    INDEXES = {
        "code": ("code", "version"),
        "rawCode": ("rawCode", "version"),
        "version": ("version",),
        "heading": ("heading", "version"),
        "subheading": ("subheading", "version"),
    }

    def __init__(
        self,
        base_dir: Path,
        translator: Translator | None = None,
        locale: str | None = None,
        default_version: int = DEFAULT_VERSION,
    ) -> None:
        super().__init__(base_dir, cn_code_from_record, translator, locale, default_version)

    def get_by_raw_code_and_version(
        self, raw_code: str, version: int | None = None
    ) -> CnCode | None:
        """Return the code printed as e.g. ``0101 21 00`` at one version."""
        return self._first("rawCode", [raw_code, self._version(version)])

    def get_all_by_heading_and_version(
        self, heading: str, version: int | None = None
    ) -> list[CnCode]:
        return self._store.find_by("heading", [heading, self._version(version)])

    def get_all_by_subheading_and_version(
        self, subheading: str, version: int | None = None
    ) -> list[CnCode]:
        return self._store.find_by("subheading", [subheading, self._version(version)])
