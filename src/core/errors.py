"""cncodes exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Data conditions degrade to empty results; these cover the loud cases.
"""

from __future__ import annotations


class CnCodesError(Exception):
    """Base exception for all cncodes failures."""


class CnCodesConfigError(CnCodesError):
    """Raised for invalid runtime or collection configuration."""


class CnCodesUnknownIndexError(CnCodesConfigError):
    """Raised when a lookup names an index the collection never declared."""


class CnCodesStoreError(CnCodesError):
    """Raised for misuse of the versioned store and its cursors."""


class CnCodesTranslationError(CnCodesError):
    """Raised for invalid translation locale or domain arguments."""
