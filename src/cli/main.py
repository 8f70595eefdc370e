"""cncodes CLI entry points.
This module exposes read-only lookup commands over the CN snapshots.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import CnCodesConfig
from core.constants import TRANSLATIONS_DIR_NAME
from core.types import CnCode, Entity
from store.factory import CnCodesFactory
from store.nomenclature import CnCodes, CnHeadings, CnSubheadings

COLLECTION_CHOICES = ("sections", "chapters", "headings", "subheadings", "codes")


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="cncodes", description="CN nomenclature lookups")
    parser.add_argument("--data-root", help="Override CNCODES_DATA_ROOT for this command")
    parser.add_argument("--translations-dir", help="Override CNCODES_TRANSLATIONS_DIR")
    parser.add_argument("--locale", help="Display locale for names, e.g. de")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_lookup_command(subparsers)
    _add_list_command(subparsers)
    _add_count_command(subparsers)
    _add_versions_command(subparsers)
    _add_mapping_command(subparsers)
    _add_locales_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the cncodes CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    factory = _build_factory(args.data_root, args.translations_dir, args.locale)
    if args.command == "lookup":
        return _run_lookup_command(factory, args)
    if args.command == "list":
        return _run_list_command(factory, args)
    if args.command == "count":
        return _run_count_command(factory, args)
    if args.command == "versions":
        return _run_versions_command(factory, args)
    if args.command == "mapping":
        return _run_mapping_command(factory, args)
    if args.command == "locales":
        return _run_locales_command(factory)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_factory(
    data_root: str | None,
    translations_dir: str | None,
    locale: str | None,
) -> CnCodesFactory:
    """Build SDK factory with optional path and locale overrides.

    Args:
        data_root: Optional snapshot directory override.
        translations_dir: Optional catalog directory override.
        locale: Optional display locale override.

    Returns:
        Configured factory.
    """
    config = CnCodesConfig.from_env()
    if data_root:
        resolved_root = Path(data_root).expanduser().resolve()
        config = replace(
            config,
            data_root=resolved_root,
            translations_root=resolved_root / TRANSLATIONS_DIR_NAME,
        )
    if translations_dir:
        config = replace(config, translations_root=Path(translations_dir).expanduser().resolve())
    if locale:
        config = replace(config, locale=locale)
    return CnCodesFactory(config)


def _collection(factory: CnCodesFactory, name: str) -> Any:
    """Return the facade for a collection choice."""
    builders = {
        "sections": factory.get_sections,
        "chapters": factory.get_chapters,
        "headings": factory.get_headings,
        "subheadings": factory.get_subheadings,
        "codes": factory.get_codes,
    }
    return builders[name]()


def _format_entity(entity: Entity) -> str:
    columns = [entity.code, entity.raw_code, str(entity.version), entity.local_name]
    if isinstance(entity, CnCode):
        columns.append(entity.supplementary_unit or "-")
    return "\t".join(columns)


def _run_lookup_command(factory: CnCodesFactory, args: argparse.Namespace) -> int:
    """Handle lookup command.

    Args:
        factory: SDK factory.
        args: Parsed CLI args.

    Returns:
        Exit code, 1 when nothing matches.
    """
    collection = _collection(factory, args.collection)
    if args.raw:
        if not isinstance(collection, (CnHeadings, CnSubheadings, CnCodes)):
            print(
                f"Raw-code lookup is not available for {args.collection}; "
                "use headings, subheadings, or codes.",
                file=sys.stderr,
            )
            return 2
        entity = collection.get_by_raw_code_and_version(args.code, args.version)
    else:
        entity = collection.get_by_code_and_version(args.code, args.version)
    if entity is None:
        print(f"No {args.collection} entry for code '{args.code}'.", file=sys.stderr)
        return 1
    print(_format_entity(entity))
    return 0


def _run_list_command(factory: CnCodesFactory, args: argparse.Namespace) -> int:
    """Handle list command."""
    collection = _collection(factory, args.collection)
    for entity in collection.get_all_by_version(args.version):
        print(_format_entity(entity))
    return 0


def _run_count_command(factory: CnCodesFactory, args: argparse.Namespace) -> int:
    """Handle count command."""
    print(_collection(factory, args.collection).count())
    return 0


def _run_versions_command(factory: CnCodesFactory, args: argparse.Namespace) -> int:
    """Handle versions command."""
    for version in _collection(factory, args.collection).available_versions():
        print(version)
    return 0


def _run_mapping_command(factory: CnCodesFactory, args: argparse.Namespace) -> int:
    """Handle mapping command.

    Args:
        factory: SDK factory.
        args: Parsed CLI args.

    Returns:
        Exit code, 1 when the code has no mapping.
    """
    from_version = args.from_version or factory.config.default_version
    targets = factory.get_mappings().get_mapping(args.code, from_version)
    if not targets:
        print(f"No mapping for code '{args.code}' from {from_version}.", file=sys.stderr)
        return 1
    for target in targets:
        print(f"{target.code}\t{target.version}")
    return 0


def _run_locales_command(factory: CnCodesFactory) -> int:
    """Handle locales command."""
    translator = factory.translator
    locales = translator.get_available_locales() if translator is not None else {"en"}
    for locale in sorted(locales):
        print(locale)
    return 0


def _add_lookup_command(subparsers: Any) -> None:
    """Register lookup subcommand."""
    parser = subparsers.add_parser("lookup", help="Look up one entry by code and version")
    parser.add_argument("collection", choices=COLLECTION_CHOICES, help="CN level")
    parser.add_argument("code", help="Normalized code, or raw code with --raw")
    parser.add_argument("--version", type=int, help="Dataset version year")
    parser.add_argument("--raw", action="store_true", help="Match the printed raw code")


def _add_list_command(subparsers: Any) -> None:
    """Register list subcommand."""
    parser = subparsers.add_parser("list", help="List all entries of one version")
    parser.add_argument("collection", choices=COLLECTION_CHOICES, help="CN level")
    parser.add_argument("--version", type=int, help="Dataset version year")


def _add_count_command(subparsers: Any) -> None:
    """Register count subcommand."""
    parser = subparsers.add_parser("count", help="Count entries across all versions")
    parser.add_argument("collection", choices=COLLECTION_CHOICES, help="CN level")


def _add_versions_command(subparsers: Any) -> None:
    """Register versions subcommand."""
    parser = subparsers.add_parser("versions", help="List versions with snapshot files")
    parser.add_argument("collection", choices=COLLECTION_CHOICES, help="CN level")


def _add_mapping_command(subparsers: Any) -> None:
    """Register mapping subcommand."""
    parser = subparsers.add_parser("mapping", help="Map a code onto other versions")
    parser.add_argument("code", help="Source CN code")
    parser.add_argument("--from-version", type=int, help="Source dataset version")


def _add_locales_command(subparsers: Any) -> None:
    """Register locales subcommand."""
    subparsers.add_parser("locales", help="List locales with message catalogs")
