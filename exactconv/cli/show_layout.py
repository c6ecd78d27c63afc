from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from ..layout import FORMATS, format_mask


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description='Print the bit layout constants of the binary float formats')
    ap.add_argument('--format', choices=[*FORMATS, 'all'], default='all', help='Float format to show (default: all)')
    ap.add_argument('--hex', action='store_true', help='Print masks in hex instead of binary')
    ap.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    names = list(FORMATS) if args.format == 'all' else [args.format]
    for name in names:
        fl = FORMATS[name]
        logging.debug(f"Layout {fl}")
        print(fl.describe())
        if args.hex:
            width = fl.bits // 4
            print(f"EXP_MASK = 0x{fl.exp_mask:0{width}X}")
            print(f"SIG_MASK = 0x{fl.sig_mask:0{width}X}")
        else:
            print(f"EXP_MASK = {format_mask(fl.exp_mask, fl)}")
            print(f"SIG_MASK = {format_mask(fl.sig_mask, fl)}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
