"""Versioned storage and lookup layer.

This package loads per-version CN snapshots lazily, indexes them by
declared field combinations, and exposes one facade per CN level.
"""
