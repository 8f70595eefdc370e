"""Runtime configuration model for cncodes.

This module owns all environment variable parsing and validation.
The store never reads the environment; the factory and CLI pass
a typed config object down instead.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_DATA_ROOT,
    DEFAULT_FALLBACK_LOCALE,
    DEFAULT_VERSION,
    TRANSLATIONS_DIR_NAME,
)
from core.errors import CnCodesConfigError


@dataclass(frozen=True)
class CnCodesConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Directory holding the per-version JSON snapshots.
        translations_root: Directory holding YAML message catalogs.
        locale: Optional display locale; translations are off when unset.
        fallback_locale: Locale consulted when the target has no entry.
        default_version: Dataset version used when a caller omits one.
    """

    data_root: Path
    translations_root: Path
    locale: str | None
    fallback_locale: str
    default_version: int

    @classmethod
    def from_env(cls) -> "CnCodesConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            CnCodesConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("CNCODES_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        data_root = Path(data_root_value).expanduser().resolve()
        translations_value = os.getenv("CNCODES_TRANSLATIONS_DIR")
        if translations_value:
            translations_root = Path(translations_value).expanduser().resolve()
        else:
            translations_root = data_root / TRANSLATIONS_DIR_NAME
        locale = os.getenv("CNCODES_LOCALE") or None
        fallback_locale = os.getenv("CNCODES_FALLBACK_LOCALE") or DEFAULT_FALLBACK_LOCALE
        default_version = _parse_default_version(
            os.getenv("CNCODES_DEFAULT_VERSION", str(DEFAULT_VERSION))
        )
        return cls(
            data_root=data_root,
            translations_root=translations_root,
            locale=locale,
            fallback_locale=fallback_locale,
            default_version=default_version,
        )


def _parse_default_version(raw_value: str) -> int:
    """Parse the default dataset version environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed integer version.

    Raises:
        CnCodesConfigError: If value cannot be parsed into int.
    """
    try:
        return int(raw_value)
    except ValueError as error:
        raise CnCodesConfigError(
            "Invalid CNCODES_DEFAULT_VERSION value: "
            f"expected integer year, got '{raw_value}'. "
            "Set CNCODES_DEFAULT_VERSION to a dataset year such as 2024."
        ) from error
