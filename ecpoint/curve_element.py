#!/usr/bin/env python3

# Copyright (C) 2022 The ecpoint developers
#
# This file is part of ecpoint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoint including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""CurveElement dataclass and functions.

A CurveElement is the coordinate of an elliptic curve point:
either an integer or the NONE sentinel,
the latter being used only for the coordinates of the infinity point.

Arithmetic is exact integer arithmetic, with plain int
accepted on either side of the operators;
equality with a plain int is supported as well.
Division truncates toward zero:
an inexact division is reported with a warning,
as the truncated quotient is usually meaningless on the curve.

Any arithmetic involving the NONE sentinel raises
CoordinateSentinelError.
"""

from dataclasses import dataclass
from typing import Optional
from warnings import warn

from ecpoint.alias import Integer, Operand
from ecpoint.exceptions import CoordinateSentinelError, ECPointValueError
from ecpoint.utils import int_from_integer


def _int_operand(other: object) -> Optional[int]:
    # None means 'not a supported operand', i.e. NotImplemented
    if isinstance(other, CurveElement):
        return other.unwrap()
    if isinstance(other, int) and not isinstance(other, bool):
        return other
    return None


def _trunc_div(n: int, d: int) -> int:
    # ZeroDivisionError is raised here if d == 0
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


@dataclass(frozen=True)
class CurveElement:
    value: Optional[int] = None

    def __post_init__(self) -> None:
        if self.value is not None:
            object.__setattr__(self, "value", int_from_integer(self.value))

    def is_none(self) -> bool:
        "Return True if this is the NONE sentinel."
        return self.value is None

    def unwrap(self) -> int:
        "Return the underlying int, failing for the NONE sentinel."
        if self.value is None:
            raise CoordinateSentinelError("the None coordinate has no value")
        return self.value

    def __str__(self) -> str:
        return f"{self.value}"

    def __repr__(self) -> str:
        return f"CurveElement({self.value})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CurveElement):
            return self.value == other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        # consistent with int equality: hash(CurveElement(3)) == hash(3)
        return hash(self.value)

    def __neg__(self) -> "CurveElement":
        return CurveElement(-self.unwrap())

    def __add__(self, other: Operand) -> "CurveElement":
        value = self.unwrap()
        o = _int_operand(other)
        if o is None:
            return NotImplemented
        return CurveElement(value + o)

    def __radd__(self, other: int) -> "CurveElement":
        return self.__add__(other)

    def __sub__(self, other: Operand) -> "CurveElement":
        value = self.unwrap()
        o = _int_operand(other)
        if o is None:
            return NotImplemented
        return CurveElement(value - o)

    def __rsub__(self, other: int) -> "CurveElement":
        value = self.unwrap()
        o = _int_operand(other)
        if o is None:
            return NotImplemented
        return CurveElement(o - value)

    def __mul__(self, other: Operand) -> "CurveElement":
        value = self.unwrap()
        o = _int_operand(other)
        if o is None:
            return NotImplemented
        return CurveElement(value * o)

    def __rmul__(self, other: int) -> "CurveElement":
        return self.__mul__(other)

    def __truediv__(self, other: Operand) -> "CurveElement":
        value = self.unwrap()
        o = _int_operand(other)
        if o is None:
            return NotImplemented
        return CurveElement(_div(value, o))

    def __rtruediv__(self, other: int) -> "CurveElement":
        value = self.unwrap()
        o = _int_operand(other)
        if o is None:
            return NotImplemented
        return CurveElement(_div(o, value))

    def __pow__(self, exponent: int) -> "CurveElement":
        value = self.unwrap()
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            return NotImplemented
        if exponent < 0:
            raise ECPointValueError(f"negative exponent: {exponent}")
        return CurveElement(value**exponent)


def _div(n: int, d: int) -> int:
    q = _trunc_div(n, d)
    if q * d != n:
        warn(f"inexact division: {n} / {d} truncated to {q}", stacklevel=3)
    return q


NONE = CurveElement(None)


def int_to_curve(n: Integer) -> CurveElement:
    "Return the CurveElement wrapping the input integer."
    return CurveElement(int_from_integer(n))
