from __future__ import annotations

import math
import struct


def pack_f32(x: float) -> int:
    return struct.unpack('<I', struct.pack('<f', float(x)))[0]


def unpack_f32(u: int) -> float:
    return struct.unpack('<f', struct.pack('<I', int(u) & 0xFFFFFFFF))[0]


def pack_f64(x: float) -> int:
    return struct.unpack('<Q', struct.pack('<d', float(x)))[0]


def unpack_f64(u: int) -> float:
    return struct.unpack('<d', struct.pack('<Q', int(u) & 0xFFFFFFFFFFFFFFFF))[0]


def round_f32(x: float) -> float:
    """Round a Python float to the nearest float32 value.

    Magnitudes past the float32 range become a signed infinity, as a cast
    to float32 would produce; struct refuses to pack those.
    """
    try:
        return unpack_f32(pack_f32(x))
    except OverflowError:
        return math.copysign(math.inf, x)


def narrow(value, bits: int = 64) -> float:
    """Cast `value` to the `bits`-wide float format, as `x as f32` would.

    Accepts int or float (not bool). Values between format values round to
    nearest; magnitudes past the format range become a signed infinity.
    NaN and infinities pass through.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f'expected int or float, got {type(value).__name__}')
    if bits not in (32, 64):
        raise ValueError(f'unsupported float width {bits}')
    try:
        x = float(value)
    except OverflowError:
        # ints too large for a double
        x = math.inf if value > 0 else -math.inf
    if bits == 32:
        x = round_f32(x)
    return x
