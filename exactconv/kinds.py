from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Dict, Union

# Width of the host's native pointer; usize/isize follow it.
POINTER_BITS = struct.calcsize('P') * 8


@dataclass(frozen=True)
class IntKind:
    """Fixed-width integer target: bit width plus signedness."""
    name: str
    bits: int
    signed: bool

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, n: int) -> bool:
        return self.min_value <= n <= self.max_value


U8 = IntKind('u8', 8, False)
U16 = IntKind('u16', 16, False)
U32 = IntKind('u32', 32, False)
U64 = IntKind('u64', 64, False)
U128 = IntKind('u128', 128, False)
I8 = IntKind('i8', 8, True)
I16 = IntKind('i16', 16, True)
I32 = IntKind('i32', 32, True)
I64 = IntKind('i64', 64, True)
I128 = IntKind('i128', 128, True)
USIZE = IntKind('usize', POINTER_BITS, False)
ISIZE = IntKind('isize', POINTER_BITS, True)

INT_KINDS: Dict[str, IntKind] = {
    k.name: k for k in (U8, U16, U32, U64, U128, I8, I16, I32, I64, I128, USIZE, ISIZE)
}


def int_kind(kind: Union[str, IntKind]) -> IntKind:
    if isinstance(kind, IntKind):
        return kind
    try:
        return INT_KINDS[kind]
    except KeyError:
        raise ValueError(f"unknown integer kind {kind!r}") from None
