from __future__ import annotations

import argparse
import json
import sys

from dicecore.config import configure_logging, settings
from dicecore.dice import roll, roll_with_seed
from dicecore.engine import seed_from_hex
from dicecore.errors import DiceError


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dicecore", description="Roll AdX[+/-C] dice notation.")
    p.add_argument("expression", help='dice notation, e.g. "2d6+3" or "d20"')
    p.add_argument("--seed", default=None, help="64 hex digits for a reproducible roll")
    p.add_argument("--json", dest="print_json", action="store_true", help="print JSON")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    configure_logging(verbose=args.verbose)

    seed_text = args.seed if args.seed is not None else settings.default_seed
    try:
        seed = seed_from_hex(seed_text) if seed_text else None
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        result = roll(args.expression) if seed is None else roll_with_seed(args.expression, seed)
    except DiceError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.print_json:
        payload = {"expression": args.expression, **result.to_dict()}
        print(json.dumps(payload, ensure_ascii=False))
    else:
        print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
