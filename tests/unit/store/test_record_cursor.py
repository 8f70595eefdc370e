"""Unit tests for the restartable record cursor."""

from __future__ import annotations

import pytest

from core.errors import CnCodesStoreError
from store.record_cursor import RecordCursor


def _cursor(records: list[dict], loads: list[int]) -> RecordCursor[str]:
    return RecordCursor(records, lambda record: str(record["code"]), lambda: loads.append(1))


def test_manual_traversal_visits_every_record() -> None:
    """valid/current/next should walk the list in order."""
    cursor = _cursor([{"code": "01"}, {"code": "02"}], [])
    cursor.rewind()
    seen = []

    while cursor.valid():
        seen.append(cursor.current())
        cursor.next()

    assert seen == ["01", "02"] and cursor.key() is None


def test_rewind_runs_full_load_hook() -> None:
    """Each rewind should request a full load before resetting."""
    loads: list[int] = []
    cursor = _cursor([{"code": "01"}], loads)

    list(cursor)
    list(cursor)

    assert len(loads) == 2


def test_rewind_resets_position() -> None:
    """Restarting should produce the same sequence again."""
    cursor = _cursor([{"code": "01"}, {"code": "02"}], [])

    first = list(cursor)
    second = list(cursor)

    assert first == second == ["01", "02"]


def test_current_past_end_raises() -> None:
    """Reading beyond the record set should fail loudly."""
    cursor = _cursor([], [])
    cursor.rewind()

    with pytest.raises(CnCodesStoreError):
        cursor.current()

    assert cursor.valid() is False
