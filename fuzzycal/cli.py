#!/usr/bin/env python3
"""
CLI for fuzzycal.

Usage:
  python -m fuzzycal [--mode auto|expr|base] [--json] [--verbose] TEXT...

Examples:
  python -m fuzzycal "(2+3*4)/5"
  python -m fuzzycal --mode base "FF -> dec"
  python -m fuzzycal --json 16#FF
  python -m fuzzycal -0b1010
  python -m fuzzycal --json -- -0b1010    (after "--" everything is text)

Prints one "Description: label" line per result. With --json prints a payload
validated against the result contracts. Exit code 1 on invalid or ignored input.
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys

from fuzzycal.core.contracts import validate_conversion_result, validate_result_items
from fuzzycal.core.errors import FuzzyCalError
from fuzzycal.core.math.base_converter import NumeralConverter
from fuzzycal.core.math.result_formatter import conversion_items
from fuzzycal.dispatch.classifier import InputKind, SelectionClassifier

logger = logging.getLogger(__name__)

_MODES = {"expr": InputKind.EXPRESSION, "base": InputKind.NUMERAL}

# -0b1010, -(2+3), -.5: argparse принял бы их за опции
_SIGNED_TEXT_RE = re.compile(r"^-[0-9.(]")
_FLAGS = frozenset({"--json", "-v", "--verbose", "-h", "--help"})


def _split_signed_text(argv: list[str]) -> list[str]:
    """Опции вперёд, затем "--" и текст, если текст начинается со знака минус."""
    if "--" in argv or not any(_SIGNED_TEXT_RE.match(tok) for tok in argv):
        return argv

    options: list[str] = []
    text: list[str] = []
    tokens = iter(argv)
    for tok in tokens:
        if tok == "--mode":
            options.append(tok)
            value = next(tokens, None)
            if value is not None:
                options.append(value)
        elif tok.startswith("--mode=") or tok in _FLAGS:
            options.append(tok)
        else:
            text.append(tok)
    return options + ["--"] + text


def _payload(kind: InputKind, text: str, items, conversion=None) -> dict:
    item_dicts = [item.model_dump() for item in items]
    validate_result_items(item_dicts)
    payload = {"kind": kind.value, "input": text, "items": item_dicts}
    if conversion is not None:
        conversion_dict = conversion.to_payload()
        validate_conversion_result(conversion_dict)
        payload["conversion"] = conversion_dict
    return payload


def run(text: str, mode: str = "auto", as_json: bool = False) -> int:
    classifier = SelectionClassifier()

    if mode == "auto":
        classification = classifier.classify(text)
        kind = classification.kind
        if kind == InputKind.IGNORED:
            print(f"error: cannot classify input ({classification.reason})", file=sys.stderr)
            return 1
    else:
        kind = _MODES[mode]

    text = text.strip()
    conversion = None
    try:
        if kind == InputKind.NUMERAL:
            conversion = NumeralConverter().convert(text)
            items = conversion_items(conversion)
        else:
            items = classifier.run(kind, text)
    except FuzzyCalError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logger.debug("%s %r -> %d items", kind.value, text, len(items))

    if as_json:
        print(json.dumps(_payload(kind, text, items, conversion), ensure_ascii=False, indent=2))
    else:
        for item in items:
            print(f"{item.description}: {item.label}")
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="fuzzycal",
        description="Evaluate a math expression or convert a numeral between bases.",
    )
    ap.add_argument("text", nargs="+", help="Expression or numeral (joined with spaces)")
    ap.add_argument(
        "--mode",
        choices=("auto", "expr", "base"),
        default="auto",
        help="Force expression evaluation or base conversion (default: auto-detect)",
    )
    ap.add_argument("--json", action="store_true", help="Print a JSON payload")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(_split_signed_text(sys.argv[1:] if argv is None else list(argv)))

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    return run(" ".join(args.text), mode=args.mode, as_json=args.json)


if __name__ == "__main__":
    raise SystemExit(main())
