# -*- coding: utf-8 -*-
"""Origin → Adaptive Card command-line converter.

Usage:
    python -m pns_relay.cli input.json > adaptive_payload.json
    python -m pns_relay.cli --stdin < raw.txt > adaptive_payload.json

Input that is not a JSON object is run through the loose-text parser.
"""

from __future__ import annotations

import argparse
import json
import sys

from pns_relay.card import RenderOptions, convert


def _read_input(args: argparse.Namespace) -> str | None:
    if args.stdin:
        try:
            return sys.stdin.read()
        except (OSError, UnicodeDecodeError):
            return ""
    if not args.input:
        return None
    with open(args.input, "r", encoding="utf-8") as f:
        return f.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pns_relay.cli", description="Convert an origin document into an Adaptive Card message")
    parser.add_argument("input", nargs="?", help="Input file (JSON or key: value lines)")
    parser.add_argument("--stdin", action="store_true", help="Read input from stdin instead of a file")
    parser.add_argument("--title", help="Card title (default: PNS / Subscription PNS)")
    parser.add_argument("--version", help="Adaptive Card schema version (default: 1.5)")
    parser.add_argument("--indent", help="NBSP count per indent level (default: 5)")
    parser.add_argument("--truncate", help="Cut longer string values and append '...' (default: 0, off)")
    parser.add_argument("--single", action="store_true", help="Pack all lines into one TextRun")
    parser.add_argument("--no-mono", action="store_true", help="Disable Monospace font")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    raw = _read_input(args)
    if raw is None:
        sys.stderr.write("Usage: python -m pns_relay.cli <input.json> [options]\n")
        return 1

    options = RenderOptions.from_flags(
        indent=args.indent,
        truncate=args.truncate,
        title=args.title,
        version=args.version,
        single=args.single,
        no_mono=args.no_mono,
    )
    envelope = convert(raw, options)
    sys.stdout.write(json.dumps(envelope.to_dict(), ensure_ascii=False, indent=2))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
