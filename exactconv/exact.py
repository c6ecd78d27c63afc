from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

from .float_utils import narrow, round_f32
from .kinds import INT_KINDS, IntKind, int_kind
from .layout import FORMATS, FloatLayout, layout

# Exact float -> fixed-width integer conversion.
#
# A value converts only when it lies in the target's half-open range
# [lo, hi) and has no fractional part. The bounds are powers of two
# evaluated in the source format, so f32 -> u128 has hi = +inf.
# NaN fails both comparisons and is reported as an overflow, as are
# both infinities.


class ExactError:
    OVERFLOW = 'overflow'  # outside the target's range (also NaN, +/-inf)
    INEXACT = 'inexact'    # in range but has a fractional part


class ConversionError(ValueError):
    kind = ''

    def __init__(self, value, target: IntKind, fmt: FloatLayout):
        self.value = value
        self.target = target
        self.fmt = fmt
        super().__init__(f"{value!r} ({fmt.name}) cannot be converted exactly to {target.name}: {self.kind}")


class ConversionOverflow(ConversionError, OverflowError):
    kind = ExactError.OVERFLOW


class InexactConversion(ConversionError):
    kind = ExactError.INEXACT


_ERRORS = {
    ExactError.OVERFLOW: ConversionOverflow,
    ExactError.INEXACT: InexactConversion,
}


def float_bounds(kind: Union[str, IntKind], fmt: Union[str, FloatLayout] = 'f64') -> Tuple[float, float]:
    """Half-open range [lo, hi) of `kind`, evaluated in the source float format."""
    k = int_kind(kind)
    fl = layout(fmt)
    if k.signed:
        hi = 2.0 ** (k.bits - 1)
        lo = -hi
    else:
        lo = 0.0
        hi = 2.0 ** k.bits
    if fl.bits == 32:
        lo, hi = round_f32(lo), round_f32(hi)
    return lo, hi


@dataclass(frozen=True)
class ExactConverter:
    """Checked conversion from one float format to one integer kind."""
    fmt: FloatLayout
    kind: IntKind
    lo: float
    hi: float

    @classmethod
    def build(cls, kind: IntKind, fmt: FloatLayout) -> "ExactConverter":
        lo, hi = float_bounds(kind, fmt)
        return cls(fmt=fmt, kind=kind, lo=lo, hi=hi)

    def classify(self, x: float) -> Optional[str]:
        if not (self.lo <= x < self.hi):
            return ExactError.OVERFLOW
        if math.trunc(x) != x:
            return ExactError.INEXACT
        return None

    def check(self, value) -> Optional[str]:
        return self.classify(narrow(value, self.fmt.bits))

    def __call__(self, value) -> int:
        x = narrow(value, self.fmt.bits)
        err = self.classify(x)
        if err is not None:
            raise _ERRORS[err](value, self.kind, self.fmt)
        return int(x)


# One converter per (format, kind) pair, built at import.
CONVERTERS: Dict[Tuple[str, str], ExactConverter] = {
    (fl.name, k.name): ExactConverter.build(k, fl)
    for fl in FORMATS.values()
    for k in INT_KINDS.values()
}


def converter(kind: Union[str, IntKind], fmt: Union[str, FloatLayout] = 'f64') -> ExactConverter:
    k = int_kind(kind)
    fl = layout(fmt)
    conv = CONVERTERS.get((fl.name, k.name))
    if conv is None or conv.kind != k or conv.fmt != fl:
        # kinds/layouts built outside the registry
        conv = ExactConverter.build(k, fl)
    return conv


def exact_from(kind: Union[str, IntKind], value, fmt: Union[str, FloatLayout] = 'f64') -> int:
    """Convert `value` to an int of `kind`, or raise.

    Raises ConversionOverflow when the value is outside the range of `kind`
    (NaN and infinities included) and InexactConversion when it is in range
    but not integral. TypeError comes from values that are not numbers;
    other values are first cast to the source format.
    """
    return converter(kind, fmt)(value)


def exact_into(value, kind: Union[str, IntKind], fmt: Union[str, FloatLayout] = 'f64') -> int:
    return exact_from(kind, value, fmt)


def check_exact(value, kind: Union[str, IntKind], fmt: Union[str, FloatLayout] = 'f64') -> Optional[str]:
    """Return None if `value` converts exactly, else the ExactError tag."""
    return converter(kind, fmt).check(value)
