from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pubsuffix.config import (
    REPORTS_DIR,
    get_ascii_idna_option,
    get_service_host,
    get_service_port,
    get_unicode_idna_option,
)
from pubsuffix.data.batch import describe_suffix, inspect_file
from pubsuffix.errors import PubSuffixError
from pubsuffix.logging_utils import configure_logging
from pubsuffix.models.public_suffix import from_section, section_from_name

SECTION_CHOICES = ["icann", "private", "unknown"]


def cmd_inspect(args: argparse.Namespace) -> int:
    try:
        suffix = from_section(
            args.value,
            section_from_name(args.section),
            args.ascii_option,
            args.unicode_option,
        )
        payload = {"value": args.value, **describe_suffix(suffix), "labels": list(suffix.labels)}
    except PubSuffixError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


def cmd_inspect_file(args: argparse.Namespace) -> int:
    output = Path(args.output) if args.output else (REPORTS_DIR / "suffix_report.csv")
    result = inspect_file(
        Path(args.input),
        output,
        section=section_from_name(args.section),
        column=args.column,
        ascii_option=args.ascii_option,
        unicode_option=args.unicode_option,
    )
    print(f"Inspected {result.row_count} values ({result.error_count} errors) -> {result.report_csv_path}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    from pubsuffix.service.run import serve

    serve(args.host, args.port)
    return 0


def _add_idna_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--section", choices=SECTION_CHOICES, default="unknown")
    parser.add_argument("--ascii-option", type=int, default=get_ascii_idna_option())
    parser.add_argument("--unicode-option", type=int, default=get_unicode_idna_option())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pubsuffix")
    sub = parser.add_subparsers(dest="command", required=True)

    i = sub.add_parser("inspect")
    i.add_argument("value")
    _add_idna_options(i)
    i.set_defaults(func=cmd_inspect)

    f = sub.add_parser("inspect-file")
    f.add_argument("input")
    f.add_argument("--output", default=None)
    f.add_argument("--column", default=None)
    _add_idna_options(f)
    f.set_defaults(func=cmd_inspect_file)

    s = sub.add_parser("serve")
    s.add_argument("--host", default=get_service_host())
    s.add_argument("--port", type=int, default=get_service_port())
    s.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
