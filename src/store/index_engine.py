"""Additive composite-key indexes over hydrated entities.

Keys are tuples of canonical strings, one per indexed field, so a
field value containing any separator character cannot collide with a
neighbouring field.
"""

from __future__ import annotations

from typing import Callable, Generic, Sequence, TypeVar

from core.types import IndexDefinition, IndexKey, Record

EntityT = TypeVar("EntityT")


class IndexEngine(Generic[EntityT]):
    """Maintain named indexes from composite key to entity buckets.

    Buckets keep record load order. Entries are never removed or
    reordered once inserted.
    """

    def __init__(self, definition: IndexDefinition) -> None:
        """Create empty indexes for a static definition table.

        Args:
            definition: Index name to ordered record field names.
        """
        self._definition = {name: tuple(fields) for name, fields in definition.items()}
        self._buckets: dict[str, dict[IndexKey, list[EntityT]]] = {
            name: {} for name in self._definition
        }

    @property
    def definition(self) -> dict[str, tuple[str, ...]]:
        return dict(self._definition)

    def has_index(self, index_name: str) -> bool:
        return index_name in self._definition

    def fields_of(self, index_name: str) -> tuple[str, ...]:
        return self._definition[index_name]

    def add_batch(
        self,
        records: Sequence[Record],
        hydrate: Callable[[Record], EntityT],
    ) -> None:
        """Index a newly merged batch of records.

        Each record is hydrated once and the same entity is appended
        to every index. No declared indexes means no hydration at all.

        Args:
            records: Raw records in load order.
            hydrate: Record to entity conversion.
        """
        if not self._definition:
            return
        for record in records:
            entity = hydrate(record)
            for index_name, fields in self._definition.items():
                key = record_key(record, fields)
                self._buckets[index_name].setdefault(key, []).append(entity)

    def lookup(self, index_name: str, value: object) -> list[EntityT]:
        """Return a copy of the bucket matching a lookup value.

        Args:
            index_name: Declared index name.
            value: Scalar for single-field indexes, else a sequence
                ordered like the index fields.

        Returns:
            Matching entities, empty when the key is absent.
        """
        key = lookup_key(value)
        return list(self._buckets[index_name].get(key, ()))

    def key_count(self, index_name: str) -> int:
        return len(self._buckets[index_name])


def canonical_value(value: object) -> str:
    """Render a field value in the canonical string form used by keys.

    Args:
        value: Scalar or optional scalar from a record or a lookup.

    Returns:
        Decimal text for numbers, ``1``/``0`` for booleans, empty for None.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def record_key(record: Record, fields: Sequence[str]) -> IndexKey:
    """Build the composite key of a record for an index field list."""
    return tuple(canonical_value(record.get(field)) for field in fields)


def lookup_key(value: object) -> IndexKey:
    """Build the composite key for a caller-supplied lookup value."""
    if isinstance(value, (list, tuple)):
        return tuple(canonical_value(item) for item in value)
    return (canonical_value(value),)
