"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import CnCodesConfig
from core.constants import DEFAULT_VERSION
from core.errors import CnCodesConfigError


def test_from_env_reads_data_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve data root and derive the catalog directory."""
    monkeypatch.setenv("CNCODES_DATA_ROOT", "./.tmp-cncodes")
    monkeypatch.delenv("CNCODES_TRANSLATIONS_DIR", raising=False)

    config = CnCodesConfig.from_env()

    assert config.data_root.name == ".tmp-cncodes"
    assert config.translations_root == config.data_root / "translations"


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables should fall back to documented defaults."""
    for name in ("CNCODES_LOCALE", "CNCODES_FALLBACK_LOCALE", "CNCODES_DEFAULT_VERSION"):
        monkeypatch.delenv(name, raising=False)

    config = CnCodesConfig.from_env()

    assert config.locale is None and config.fallback_locale == "en"
    assert config.default_version == DEFAULT_VERSION


def test_from_env_reads_locale_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Locale variables should flow into the config."""
    monkeypatch.setenv("CNCODES_LOCALE", "de")
    monkeypatch.setenv("CNCODES_FALLBACK_LOCALE", "fr")
    monkeypatch.setenv("CNCODES_TRANSLATIONS_DIR", "/tmp/cn-catalogs")

    config = CnCodesConfig.from_env()

    assert (config.locale, config.fallback_locale) == ("de", "fr")
    assert config.translations_root.name == "cn-catalogs"


def test_from_env_raises_for_invalid_default_version(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a non-numeric default version."""
    monkeypatch.setenv("CNCODES_DEFAULT_VERSION", "latest")

    with pytest.raises(CnCodesConfigError):
        CnCodesConfig.from_env()
