from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from ..exact import ConversionError, exact_from
from ..kinds import INT_KINDS
from ..layout import FORMATS


def parse_value(s: str):
    """Parse an integer literal (decimal or 0x/0o/0b) exactly, else a float."""
    s = s.strip()
    try:
        return int(s, 0)
    except ValueError:
        pass
    if s.lower().startswith(('0x', '-0x', '+0x')):
        return float.fromhex(s)
    return float(s)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description='Convert float values exactly to a fixed-width integer kind')
    ap.add_argument('values', nargs='+', help='Values to convert (e.g. 3.0, -128, inf, nan, 0x1.8p3)')
    ap.add_argument('--to', required=True, choices=list(INT_KINDS), help='Target integer kind')
    ap.add_argument('--format', choices=list(FORMATS), default='f64', help='Source float format (default: f64)')
    ap.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    failures = 0
    for s in args.values:
        try:
            value = parse_value(s)
        except ValueError as e:
            ap.error(f"invalid value {s!r}: {e}")
        logging.debug(f"Converting {value!r} ({args.format}) to {args.to}")
        try:
            n = exact_from(args.to, value, args.format)
        except ConversionError as e:
            failures += 1
            print(f"{s} -> {e.kind}")
            continue
        print(f"{s} -> {n}")
    if failures:
        logging.info(f"{failures} of {len(args.values)} values did not convert exactly")
    return 1 if failures else 0


if __name__ == '__main__':
    raise SystemExit(main())
