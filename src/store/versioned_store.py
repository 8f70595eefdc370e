"""Versioned, lazily-loaded, multi-index record store.

This module owns the in-memory record set of one CN collection. It
loads per-version snapshots on demand, feeds each merged batch to the
index engine, and exposes enumeration over everything loaded.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Generic, Iterator, TypeVar

from core.constants import VERSION_FIELD
from core.errors import CnCodesUnknownIndexError
from core.logging_config import get_logger
from core.types import IndexDefinition, LoadPhase, Record
from store.hydration import EntityHydrator
from store.index_engine import IndexEngine
from store.record_cursor import RecordCursor
from store.snapshot_source import SnapshotSource, read_snapshot_records
from translation.translator import Translator

EntityT = TypeVar("EntityT")

_LOGGER = get_logger(__name__)


class VersionedStore(Generic[EntityT]):
    """Lazy per-version store for one collection.

    Versions are loaded at most once and never unloaded. A lookup whose
    value pins a version loads only that version; anything else forces
    a full load. Not safe for concurrent loading from several threads.
    """

    def __init__(
        self,
        base_dir: Path,
        file_stem: str,
        mapper: Callable[[Record, str | None], EntityT],
        index_definition: IndexDefinition,
        translator: Translator | None = None,
        locale: str | None = None,
    ) -> None:
        """Create an empty store.

        Args:
            base_dir: Directory holding snapshot files.
            file_stem: Collection file stem, e.g. ``cnCodes``.
            mapper: Field mapping function for the entity type.
            index_definition: Index name to ordered record field names.
            translator: Optional translation capability for names.
            locale: Optional locale passed to the translator.
        """
        self._source = SnapshotSource(base_dir, file_stem)
        self._hydrator: EntityHydrator[EntityT] = EntityHydrator(mapper, translator, locale)
        self._index: IndexEngine[EntityT] = IndexEngine(index_definition)
        self._records: list[Record] = []
        self._loaded_versions: set[int] = set()
        self._all_loaded = False

    @property
    def file_stem(self) -> str:
        return self._source.file_stem

    @property
    def loaded_versions(self) -> frozenset[int]:
        return frozenset(self._loaded_versions)

    @property
    def is_fully_loaded(self) -> bool:
        return self._all_loaded

    @property
    def phase(self) -> LoadPhase:
        if self._all_loaded:
            return LoadPhase.FULLY_LOADED
        if self._loaded_versions:
            return LoadPhase.PARTIALLY_LOADED
        return LoadPhase.EMPTY

    def find_by(self, index_name: str, value: object) -> list[EntityT]:
        """Return entities whose indexed fields match a lookup value.

        Args:
            index_name: Declared index name.
            value: Scalar for single-field indexes, else a sequence
                ordered like the index fields.

        Returns:
            Matching entities in load order, empty when none match.

        Raises:
            CnCodesUnknownIndexError: If the index was never declared.
        """
        if not self._index.has_index(index_name):
            raise CnCodesUnknownIndexError(
                f"Unknown index '{index_name}' for collection '{self.file_stem}'. "
                f"Declared indexes: {', '.join(sorted(self._index.definition)) or 'none'}."
            )
        version = self._pinned_version(index_name, value)
        if version is None:
            self.load_all()
        else:
            self.load_version(version)
        return self._index.lookup(index_name, value)

    def all(self, version: int) -> list[EntityT]:
        """Return every entity of one version."""
        return self.find_by(VERSION_FIELD, version)

    def load_version(self, version: int) -> None:
        """Load one version's snapshot if it is not loaded yet.

        A missing or malformed file still marks the version as loaded.

        Args:
            version: Dataset version.
        """
        if version in self._loaded_versions:
            return
        self._merge(version, self._source.read_version(version))

    def load_all(self) -> None:
        """Load every discoverable snapshot not loaded yet."""
        if self._all_loaded:
            return
        for version, path in self._source.discover():
            if version in self._loaded_versions:
                continue
            self._merge(version, read_snapshot_records(path))
        self._all_loaded = True

    def count(self) -> int:
        """Return the total record count across all versions."""
        self.load_all()
        return len(self._records)

    def enumerate(self) -> RecordCursor[EntityT]:
        """Return a cursor over the fully loaded record set."""
        self.load_all()
        cursor: RecordCursor[EntityT] = RecordCursor(
            self._records, self._hydrator.hydrate, self.load_all
        )
        cursor.rewind()
        return cursor

    def to_list(self) -> list[EntityT]:
        return list(self)

    def available_versions(self) -> list[int]:
        """Return versions with a snapshot file on disk, without loading."""
        return sorted({version for version, _ in self._source.discover()})

    def __iter__(self) -> Iterator[EntityT]:
        return iter(self.enumerate())

    def __len__(self) -> int:
        return self.count()

    def _merge(self, version: int, records: list[Record]) -> None:
        self._records.extend(records)
        self._index.add_batch(records, self._hydrator.hydrate)
        self._loaded_versions.add(version)
        _LOGGER.debug(
            "snapshot_loaded",
            collection=self.file_stem,
            version=version,
            record_count=len(records),
        )

    def _pinned_version(self, index_name: str, value: object) -> int | None:
        """Infer the single version a lookup value restricts itself to.

        Args:
            index_name: Declared index name.
            value: Lookup value.

        Returns:
            The pinned version, or None when the lookup spans versions.
        """
        fields = self._index.fields_of(index_name)
        if VERSION_FIELD not in fields:
            return None
        position = fields.index(VERSION_FIELD)
        if isinstance(value, (list, tuple)):
            candidate = value[position] if position < len(value) else None
        elif len(fields) == 1:
            candidate = value
        else:
            return None
        if isinstance(candidate, int) and not isinstance(candidate, bool):
            return candidate
        return None
