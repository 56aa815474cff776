# incant/cli.py
"""
Command-line interface for building, validating and decoding against
dialect lexicons.

    incant dialects
    incant validate --dialect v1
    incant decode --dialect v1 MASA
    echo MASA | incant decode --dialect v1 -
    incant table --dialect v2 --rows AEIOU

Output is JSON on stdout; logs go to stderr. Exit code 1 on a domain fault.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from incant.adapters.persistence.filesystem_repo import FileSystemLexiconRepository
from incant.core.domain.exceptions import DecodeError, DomainError
from incant.core.lexicon.source import render_markdown_table
from incant.core.use_cases.build_dialect import BuildDialect
from incant.core.use_cases.decode_spell import DecodeSpell
from incant.services.dialect_registry import DialectRegistry
from incant.shared.config import settings
from incant.shared.logging_config import configure_logging


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="incant",
        description="Phoneme stream decoder and lexicon validator.",
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help=f"Dialect data directory (default: {settings.DATA_PATH}).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override INCANT_LOG_LEVEL for this run.",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command", required=True)

    subparsers.add_parser("dialects", help="List dialects found in the data directory.")

    val = subparsers.add_parser("validate", help="Build a dialect and run the ambiguity gate.")
    target = val.add_mutually_exclusive_group(required=True)
    target.add_argument("--dialect", help="Dialect id (e.g. 'v1').")
    target.add_argument("--all", action="store_true", help="Validate every dialect.")

    dec = subparsers.add_parser("decode", help="Decode a phoneme stream into a program.")
    dec.add_argument("--dialect", required=True, help="Dialect id. There is no default.")
    dec.add_argument(
        "stream",
        nargs="?",
        default="-",
        help="Phoneme letters, e.g. 'MASA'. If omitted or '-', read from stdin.",
    )
    dec.add_argument("--units", action="store_true", help="Include the decoded units and their spans.")

    tab = subparsers.add_parser("table", help="Print a dialect table as markdown.")
    tab.add_argument("--dialect", required=True, help="Dialect id.")
    tab.add_argument("--rows", default=None, help="Vowel row order, e.g. 'EIAUO'.")

    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _repository(args: argparse.Namespace) -> FileSystemLexiconRepository:
    return FileSystemLexiconRepository(args.data_dir or settings.DATA_PATH)


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _read_stream(arg: str) -> str:
    raw = sys.stdin.read() if arg == "-" else arg
    return raw.strip()


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_dialects(args: argparse.Namespace) -> int:
    _print_json(_repository(args).list_dialects())
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    repo = _repository(args)
    ids: List[str] = repo.list_dialects() if args.all else [args.dialect]

    report: List[Dict[str, Any]] = []
    exit_code = 0
    for dialect_id in ids:
        try:
            dialect = BuildDialect(repo).execute(dialect_id)
        except DomainError as e:
            entry: Dict[str, Any] = {"dialect": dialect_id, "status": "error", "error": type(e).__name__, "message": e.message}
            if hasattr(e, "words") and hasattr(e, "alt_split"):
                entry["words"] = list(e.words)
                entry["alt_split"] = list(e.alt_split)
            report.append(entry)
            exit_code = 1
            continue
        report.append({
            "dialect": dialect_id,
            "status": "ok",
            "entries": len(dialect.lexicon),
            "words": len(dialect.dictionary),
        })

    _print_json(report)
    return exit_code


def _cmd_decode(args: argparse.Namespace) -> int:
    registry = DialectRegistry(_repository(args))
    try:
        registry.load(args.dialect)
    except DomainError as e:
        _print_json({"status": "error", "error": type(e).__name__, "message": e.message})
        return 1

    use_case = DecodeSpell(registry)
    stream = _read_stream(args.stream)
    try:
        units = use_case.decode_units(args.dialect, stream)
    except DecodeError as e:
        _print_json({"status": "error", "kind": e.kind, "position": e.position, "message": e.message})
        return 1

    program = use_case.emit(args.dialect, units)
    output: Dict[str, Any] = program.model_dump(mode="json")
    output["total_cost"] = program.total_cost
    if args.units:
        output["units"] = [
            {"word": u.word.id, "meaning": u.meaning, "start": u.start, "end": u.end}
            for u in units
        ]
    _print_json(output)
    return 0


def _cmd_table(args: argparse.Namespace) -> int:
    try:
        table = _repository(args).load_table(args.dialect)
    except DomainError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    vowels = list(args.rows.upper()) if args.rows else None
    sys.stdout.write(render_markdown_table(table, vowels=vowels, corner=args.dialect))
    return 0


_COMMANDS = {
    "dialects": _cmd_dialects,
    "validate": _cmd_validate,
    "decode": _cmd_decode,
    "table": _cmd_table,
}


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging(log_format="console", level=args.log_level)

    raise SystemExit(_COMMANDS[args.command](args))


if __name__ == "__main__":
    main()
