"""Unit tests for record hydration and locale substitution."""

from __future__ import annotations

import pytest

import store.hydration
from store.hydration import (
    EntityHydrator,
    chapter_from_record,
    cn_code_from_record,
    section_from_record,
    subheading_from_record,
)
from translation.translator import NullTranslator

_CODE_RECORD = {
    "code": "01012100",
    "rawCode": "0101 21 00",
    "version": 2026,
    "section": "I",
    "chapter": "01",
    "heading": "0101",
    "subheading": "010121",
    "name": "Pure-bred breeding animals",
    "supplementaryUnit": "PST",
}


class _CountingTranslator:
    def __init__(self, table: dict[str, str]) -> None:
        self.table = table
        self.calls = 0

    def translate(self, source_text, locale=None, domain="cnCodes"):
        self.calls += 1
        return self.table.get(source_text, source_text)

    def get_available_locales(self, domain="cnCodes"):
        return {"de"}


def test_cn_code_mapping_copies_every_field() -> None:
    """The code mapper should carry all snapshot fields."""
    code = cn_code_from_record(_CODE_RECORD)

    assert (code.code, code.raw_code, code.version) == ("01012100", "0101 21 00", 2026)
    assert (code.section, code.chapter, code.heading, code.subheading) == (
        "I",
        "01",
        "0101",
        "010121",
    )
    assert code.supplementary_unit == "PST"


def test_null_supplementary_unit_stays_none() -> None:
    """A null supplementary unit should not become the text 'None'."""
    code = cn_code_from_record({**_CODE_RECORD, "supplementaryUnit": None})

    assert code.supplementary_unit is None


def test_local_name_falls_back_without_translator() -> None:
    """Without a translator the local name is the English name."""
    hydrator = EntityHydrator(section_from_record)

    section = hydrator.hydrate({"code": "I", "rawCode": "I", "version": 2026, "name": "X"})

    assert section.translated_name is None and section.local_name == section.name


def test_local_name_falls_back_when_translation_missing() -> None:
    """A translator without an entry should leave the name unchanged."""
    hydrator = EntityHydrator(chapter_from_record, NullTranslator())

    chapter = hydrator.hydrate({"code": "01", "version": 2026, "name": "LIVE ANIMALS"})

    assert chapter.local_name == chapter.name == "LIVE ANIMALS"


def test_translator_sets_local_name() -> None:
    """A translator hit should populate the local name."""
    translator = _CountingTranslator({"Pure-bred breeding animals": "Reinrassige Zuchttiere"})
    hydrator = EntityHydrator(subheading_from_record, translator, locale="de")

    subheading = hydrator.hydrate({**_CODE_RECORD, "code": "010121"})

    assert subheading.local_name == "Reinrassige Zuchttiere"
    assert subheading.name == "Pure-bred breeding animals"


def test_record_without_name_skips_translator() -> None:
    """Records lacking a name should not reach the translator."""
    translator = _CountingTranslator({})
    hydrator = EntityHydrator(section_from_record, translator)

    section = hydrator.hydrate({"code": "I", "version": 2026})

    assert translator.calls == 0 and section.translated_name is None


def test_hydration_is_not_cached() -> None:
    """Each hydration should consult the translator again."""
    translator = _CountingTranslator({})
    hydrator = EntityHydrator(cn_code_from_record, translator)

    hydrator.hydrate(_CODE_RECORD)
    hydrator.hydrate(_CODE_RECORD)

    assert translator.calls == 2


class _RecordingLogger:
    def __init__(self) -> None:
        self.warnings: list[tuple[str, dict]] = []

    def warning(self, event: str, **fields: object) -> None:
        self.warnings.append((event, fields))


def test_non_numeric_version_is_zeroed_with_warning(monkeypatch: pytest.MonkeyPatch) -> None:
    """An unparseable version should hydrate as 0 and be reported."""
    logger = _RecordingLogger()
    monkeypatch.setattr(store.hydration, "_LOGGER", logger)

    section = section_from_record({"code": "I", "version": "twenty"})

    assert section.version == 0
    assert logger.warnings == [
        ("record_field_invalid", {"field": "version", "value": "'twenty'", "code": "I"})
    ]


def test_numeric_version_text_is_parsed_silently(monkeypatch: pytest.MonkeyPatch) -> None:
    """Version text holding digits should hydrate without a warning."""
    logger = _RecordingLogger()
    monkeypatch.setattr(store.hydration, "_LOGGER", logger)

    section = section_from_record({"code": "I", "version": "2026"})

    assert section.version == 2026 and logger.warnings == []
