"""Translation capability for locale-aware display names.

This package maps English CN names onto locale strings using
per-locale YAML message catalogs produced by the release tooling.
"""
