"""Snapshot file discovery and lenient decoding.

This module maps (collection, version) pairs onto JSON snapshot files
and decodes them. A missing or malformed file reads as zero records so
one corrupt release never blocks queries against the others.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

from core.constants import SNAPSHOT_FILE_SUFFIX, SNAPSHOT_VERSION_PATTERN
from core.logging_config import get_logger
from core.types import Record

_LOGGER = get_logger(__name__)
_VERSION_RE = re.compile(SNAPSHOT_VERSION_PATTERN)


class SnapshotSource:
    """Directory of per-version snapshot files for one collection.

    Files live at ``<base_dir>/<file_stem>_<version>.json``.
    """

    def __init__(self, base_dir: Path, file_stem: str) -> None:
        """Bind a source to a directory and collection file stem.

        Args:
            base_dir: Directory holding snapshot files.
            file_stem: Collection file stem, e.g. ``cnCodes``.
        """
        self._base_dir = Path(base_dir)
        self._file_stem = file_stem

    @property
    def file_stem(self) -> str:
        return self._file_stem

    def snapshot_path(self, version: int) -> Path:
        """Return the snapshot path for one version.

        Args:
            version: Dataset version.

        Returns:
            Expected snapshot file path, which may not exist.
        """
        return self._base_dir / f"{self._file_stem}_{version}{SNAPSHOT_FILE_SUFFIX}"

    def discover(self) -> list[tuple[int, Path]]:
        """List snapshot files on disk with their parsed versions.

        Returns:
            ``(version, path)`` pairs in sorted path order.
        """
        if not self._base_dir.is_dir():
            return []
        discovered: list[tuple[int, Path]] = []
        pattern = f"{self._file_stem}_*{SNAPSHOT_FILE_SUFFIX}"
        for path in sorted(self._base_dir.glob(pattern)):
            # the glob also matches cnCodes_draft.json and cnCodes_02026.json
            match = _VERSION_RE.search(path.name)
            if match is None:
                continue
            version = int(match.group(1))
            if path != self.snapshot_path(version):
                continue
            discovered.append((version, path))
        return discovered

    def read_version(self, version: int) -> list[Record]:
        """Read the records of one version.

        Args:
            version: Dataset version.

        Returns:
            Decoded records, empty when the file is missing or malformed.
        """
        return read_snapshot_records(self.snapshot_path(version))


def read_snapshot_records(snapshot_path: Path) -> list[Record]:
    """Decode one snapshot file into raw records.

    Args:
        snapshot_path: JSON snapshot path.

    Returns:
        Records in file order; empty when the file is absent, cannot be
        decoded, or is not a JSON array.
    """
    if not snapshot_path.is_file():
        return []
    try:
        with snapshot_path.open("r", encoding="utf-8") as snapshot_file:
            payload = json.load(snapshot_file)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
        _LOGGER.warning(
            "snapshot_skipped",
            path=str(snapshot_path),
            reason=f"undecodable: {error}",
        )
        return []
    if not isinstance(payload, list):
        _LOGGER.warning(
            "snapshot_skipped",
            path=str(snapshot_path),
            reason=f"expected JSON array, got {type(payload).__name__}",
        )
        return []
    records = [item for item in payload if isinstance(item, dict)]
    if len(records) != len(payload):
        _LOGGER.warning(
            "snapshot_entries_dropped",
            path=str(snapshot_path),
            dropped=len(payload) - len(records),
        )
    return records
