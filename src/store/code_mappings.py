"""Many-to-many CN code mapping across dataset versions.

The mapping file is a flat JSON array of ``from_code``/``from_version``
/``to_code``/``to_version`` rows, scanned linearly per lookup.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import MAPPING_FILE_NAME
from core.logging_config import get_logger
from core.types import MappedCode, Record
from store.snapshot_source import read_snapshot_records

_LOGGER = get_logger(__name__)


class CnCodesMappings:
    """Cross-version mapping lookup, loaded once per instance."""

    def __init__(self, base_dir: Path) -> None:
        self._mapping_path = Path(base_dir) / MAPPING_FILE_NAME
        self._rows: list[Record] | None = None

    def get_mapping(self, code: str, from_version: int) -> list[MappedCode]:
        """Return every target a code maps to from one version.

        Args:
            code: Source CN code.
            from_version: Source dataset version.

        Returns:
            Mapping targets in file order, empty when none exist.
        """
        results: list[MappedCode] = []
        for row in self._load_rows():
            if row.get("from_code") != code or row.get("from_version") != from_version:
                continue
            try:
                results.append(
                    MappedCode(code=str(row["to_code"]), version=int(row["to_version"]))
                )
            except (KeyError, TypeError, ValueError):
                _LOGGER.warning("mapping_row_skipped", from_code=code, from_version=from_version)
        return results

    def _load_rows(self) -> list[Record]:
        if self._rows is None:
            self._rows = read_snapshot_records(self._mapping_path)
        return self._rows
