"""Restartable cursor over a store's merged record list."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, Sequence, TypeVar

from core.errors import CnCodesStoreError
from core.types import Record

EntityT = TypeVar("EntityT")


class RecordCursor(Generic[EntityT]):
    """Position cursor that hydrates the record under it on demand.

    ``rewind`` runs the full-load hook before resetting, so traversal
    always covers every version. The record list is shared with the
    owning store; do not load more versions while a traversal is open.
    """

    def __init__(
        self,
        records: Sequence[Record],
        hydrate: Callable[[Record], EntityT],
        ensure_loaded: Callable[[], None],
    ) -> None:
        self._records = records
        self._hydrate = hydrate
        self._ensure_loaded = ensure_loaded
        self._position = 0

    def rewind(self) -> None:
        self._ensure_loaded()
        self._position = 0

    def valid(self) -> bool:
        return 0 <= self._position < len(self._records)

    def key(self) -> int | None:
        return self._position if self.valid() else None

    def next(self) -> None:
        self._position += 1

    def current(self) -> EntityT:
        """Hydrate and return the entity at the current position.

        Raises:
            CnCodesStoreError: If the cursor is past the last record.
        """
        if not self.valid():
            raise CnCodesStoreError(
                f"Cursor position {self._position} is outside the record set "
                f"of size {len(self._records)}. Call rewind() before reading."
            )
        return self._hydrate(self._records[self._position])

    def __iter__(self) -> Iterator[EntityT]:
        self.rewind()
        while self.valid():
            yield self.current()
            self.next()
