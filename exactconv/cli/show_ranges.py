from __future__ import annotations

import argparse
import logging
import math
from typing import List, Optional

from ..exact import float_bounds
from ..kinds import INT_KINDS
from ..layout import FORMATS


def format_bound(x: float) -> str:
    if math.isinf(x):
        return 'inf' if x > 0 else '-inf'
    return str(int(x))


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description='Print the half-open float ranges accepted for each integer kind')
    ap.add_argument('--format', choices=[*FORMATS, 'all'], default='f32', help='Source float format (default: f32)')
    ap.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    names = list(FORMATS) if args.format == 'all' else [args.format]
    print('Ranges float -> int')
    print()
    for name in names:
        fl = FORMATS[name]
        for kind in INT_KINDS.values():
            lo, hi = float_bounds(kind, fl)
            logging.debug(f"{fl.name} => {kind.name}: lo={lo!r} hi={hi!r}")
            print(f"{fl.name} => {kind.name:<5}: [{format_bound(lo)},{format_bound(hi)})")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
