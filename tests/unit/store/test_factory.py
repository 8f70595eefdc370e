"""Unit tests for the SDK factory."""

from __future__ import annotations

from dataclasses import replace

from core.config import CnCodesConfig
from store.factory import CnCodesFactory
from tests.fixture_paths import fixture_path
from translation.translator import CatalogTranslator, NullTranslator


def _config(locale: str | None = None) -> CnCodesConfig:
    return replace(
        CnCodesConfig.from_env(),
        data_root=fixture_path("snapshots"),
        translations_root=fixture_path("translations"),
        locale=locale,
        default_version=2026,
    )


def test_factory_without_locale_has_no_translator() -> None:
    """Translations should stay off unless a locale is configured."""
    factory = CnCodesFactory(_config())

    chapter = factory.get_chapters().get_by_code_and_version("01")

    assert factory.translator is None
    assert chapter is not None and chapter.local_name == "LIVE ANIMALS"


def test_factory_builds_catalog_translator_from_locale() -> None:
    """A configured locale should yield translated names."""
    factory = CnCodesFactory(_config(locale="fr"))

    chapter = factory.get_chapters().get_by_code_and_version("01")

    assert isinstance(factory.translator, CatalogTranslator)
    assert chapter is not None and chapter.local_name == "ANIMAUX VIVANTS"


def test_explicit_translator_wins_over_config() -> None:
    """A caller-supplied translator should be used as-is."""
    translator = NullTranslator()
    factory = CnCodesFactory(_config(locale="de"), translator)

    section = factory.get_sections().get_by_code_and_version("I")

    assert factory.translator is translator
    assert section is not None and section.local_name == section.name


def test_each_getter_returns_fresh_collection() -> None:
    """Collections should not share load state between calls."""
    factory = CnCodesFactory(_config())
    first = factory.get_codes()
    first.load_all()

    second = factory.get_codes()

    assert first.store.is_fully_loaded and not second.store.is_fully_loaded


def test_with_data_root_switches_directory(tmp_path) -> None:
    """Cloning with a new data root should read from that directory."""
    factory = CnCodesFactory(_config()).with_data_root(str(tmp_path))

    assert factory.get_subheadings().count() == 0
    assert factory.get_mappings().get_mapping("01012990", 2025) == []
