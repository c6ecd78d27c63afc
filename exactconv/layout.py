from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Union

from .float_utils import narrow, pack_f32, pack_f64

# Binary interchange formats, bit layout MSB to LSB:
#   f32: [31]=sign, [30:23]=exp (8 bits), [22:0]=significand (23 bits)
#   f64: [63]=sign, [62:52]=exp (11 bits), [51:0]=significand (52 bits)
# Masks are positions inside the unsigned integer of the format width.


@dataclass(frozen=True)
class FloatLayout:
    name: str
    bits: int
    exp_bits: int
    sig_bits: int
    exp_bias: int
    exp_mask: int
    sig_mask: int
    sign_mask: int

    def describe(self) -> str:
        return (f"BITS = {self.bits}  EXP_BITS = {self.exp_bits}  "
                f"SIG_BITS = {self.sig_bits}  EXP_BIAS = {self.exp_bias}")


def make_layout(name: str, exp_bits: int, sig_bits: int) -> FloatLayout:
    bits = 1 + exp_bits + sig_bits
    return FloatLayout(
        name=name,
        bits=bits,
        exp_bits=exp_bits,
        sig_bits=sig_bits,
        exp_bias=(1 << (exp_bits - 1)) - 1,
        exp_mask=((1 << exp_bits) - 1) << sig_bits,
        sig_mask=(1 << sig_bits) - 1,
        sign_mask=1 << (bits - 1),
    )


F32 = make_layout('f32', 8, 23)
F64 = make_layout('f64', 11, 52)

FORMATS: Dict[str, FloatLayout] = {F32.name: F32, F64.name: F64}


def layout(fmt: Union[str, FloatLayout]) -> FloatLayout:
    if isinstance(fmt, FloatLayout):
        return fmt
    try:
        return FORMATS[fmt]
    except KeyError:
        raise ValueError(f"unknown float format {fmt!r} (expected one of {', '.join(FORMATS)})") from None


def to_bits(value, fmt: Union[str, FloatLayout]) -> int:
    fl = layout(fmt)
    x = narrow(value, fl.bits)
    return pack_f32(x) if fl.bits == 32 else pack_f64(x)


def split_fields(value, fmt: Union[str, FloatLayout]) -> Tuple[int, int, int]:
    """Split a float into (sign, biased exponent, significand) using the layout masks."""
    fl = layout(fmt)
    u = to_bits(value, fl)
    sign = 1 if u & fl.sign_mask else 0
    exp = (u & fl.exp_mask) >> fl.sig_bits
    sig = u & fl.sig_mask
    return sign, exp, sig


def format_mask(mask: int, fmt: Union[str, FloatLayout]) -> str:
    return format(mask, f"0{layout(fmt).bits}b")
