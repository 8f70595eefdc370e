"""Unit tests for composite-key index maintenance."""

from __future__ import annotations

from store.index_engine import IndexEngine, canonical_value, lookup_key, record_key


def _identity(record):
    return dict(record)


def test_add_batch_appends_to_existing_buckets() -> None:
    """Later batches should extend buckets without reordering them."""
    engine: IndexEngine[dict] = IndexEngine({"version": ("version",)})
    engine.add_batch([{"code": "01", "version": 2025}], _identity)

    engine.add_batch([{"code": "02", "version": 2025}], _identity)

    assert [entry["code"] for entry in engine.lookup("version", 2025)] == ["01", "02"]


def test_lookup_accepts_scalar_and_sequence_values() -> None:
    """Scalars and one-element sequences should address the same key."""
    engine: IndexEngine[dict] = IndexEngine({"version": ("version",)})
    engine.add_batch([{"code": "01", "version": 2026}], _identity)

    assert engine.lookup("version", 2026) == engine.lookup("version", [2026])


def test_integer_and_text_values_share_canonical_form() -> None:
    """Integers should index under their decimal text."""
    engine: IndexEngine[dict] = IndexEngine({"code": ("code", "version")})
    engine.add_batch([{"code": "01", "version": 2026}], _identity)

    matches = engine.lookup("code", ("01", "2026"))

    assert len(matches) == 1


def test_lookup_returns_copy_of_bucket() -> None:
    """Mutating a lookup result should not alter the index."""
    engine: IndexEngine[dict] = IndexEngine({"version": ("version",)})
    engine.add_batch([{"code": "01", "version": 2026}], _identity)

    engine.lookup("version", 2026).clear()

    assert len(engine.lookup("version", 2026)) == 1


def test_empty_definition_skips_hydration() -> None:
    """Without indexes no record should be hydrated."""
    calls: list[object] = []
    engine: IndexEngine[dict] = IndexEngine({})

    engine.add_batch([{"code": "01"}], lambda record: calls.append(record) or {})

    assert calls == []


def test_one_entity_is_shared_across_indexes() -> None:
    """Each record should hydrate once per batch, not once per index."""
    calls: list[object] = []
    engine: IndexEngine[dict] = IndexEngine(
        {"code": ("code", "version"), "version": ("version",)}
    )

    engine.add_batch([{"code": "01", "version": 2026}], lambda record: calls.append(record) or {})

    assert len(calls) == 1 and engine.key_count("code") == 1


def test_canonical_value_renders_scalars() -> None:
    """Canonical form should be stable for every scalar kind."""
    rendered = [canonical_value(value) for value in (2026, "I", None, True, False)]

    assert rendered == ["2026", "I", "", "1", "0"]


def test_record_key_treats_missing_fields_as_empty() -> None:
    """Records lacking an indexed field should index under an empty part."""
    assert record_key({"code": "01"}, ("code", "version")) == ("01", "")
    assert lookup_key(["01", None]) == ("01", "")
