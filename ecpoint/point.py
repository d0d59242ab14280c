#!/usr/bin/env python3

# Copyright (C) 2022 The ecpoint developers
#
# This file is part of ecpoint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoint including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve Point dataclass.

A Point is the four-tuple (x, y, a, b):
the affine coordinates x, y and
the parameters a, b of the short Weierstrass curve
y^2 = x^3 + a*x + b
the point belongs to.

The infinity point is represented by x and y
both being the NONE CurveElement sentinel.
Points sharing the same (a, b) pair belong to the same group,
with the point addition group law.

Coordinates are integers and arithmetic is exact,
with division truncating toward zero:
the group law is therefore computed over the rationals,
restricted to points with integer coordinates.
When the sum of two points has no integer coordinates
the truncated slope either leads off the curve, and NotOnCurveError
is raised, or it lands on another integer point of the curve,
and a wrong sum is returned.
Only the inexact division warning reliably flags both cases.
This is not a finite field group suitable for cryptography.
"""

from dataclasses import dataclass
from typing import Type

from ecpoint.alias import Coordinate, Integer
from ecpoint.curve_element import NONE, CurveElement, int_to_curve
from ecpoint.exceptions import (
    CurveMismatchError,
    ECPointValueError,
    InvalidPointError,
    NotOnCurveError,
)
from ecpoint.utils import int_from_integer


def _curve_element(c: Coordinate) -> CurveElement:
    if isinstance(c, CurveElement):
        return c
    if c is None:
        return NONE
    return int_to_curve(c)


@dataclass(frozen=True)
class Point:
    """Point of the elliptic curve y^2 = x^3 + a*x + b.

    Coordinates can be provided as CurveElement, as Integer,
    or as None for the infinity point.
    Unless check_validity is False, the point is required
    to be either the infinity point or a solution of the curve equation.
    """

    x: CurveElement
    y: CurveElement
    a: int
    b: int

    def __init__(
        self,
        x: Coordinate,
        y: Coordinate,
        a: Integer,
        b: Integer,
        check_validity: bool = True,
    ) -> None:

        object.__setattr__(self, "x", _curve_element(x))
        object.__setattr__(self, "y", _curve_element(y))
        object.__setattr__(self, "a", int_from_integer(a))
        object.__setattr__(self, "b", int_from_integer(b))

        if check_validity:
            self.assert_valid()

    @classmethod
    def infinity(cls: Type["Point"], a: Integer, b: Integer) -> "Point":
        "Return the infinity point of the (a, b) curve."
        return cls(NONE, NONE, a, b)

    @property
    def is_infinity(self) -> bool:
        return self.x.is_none() and self.y.is_none()

    def assert_valid(self) -> None:
        if self.is_infinity:
            return

        if self.x.is_none() or self.y.is_none():
            raise InvalidPointError(f"invalid point: ({self.x}, {self.y})")

        x = self.x.unwrap()
        y = self.y.unwrap()
        if y * y != (x * x + self.a) * x + self.b:
            raise NotOnCurveError(x, y, self.a, self.b)

    def is_on_curve(self) -> bool:
        "Return True if the point is the infinity point or it is on the curve."
        try:
            self.assert_valid()
        except ECPointValueError:
            return False
        return True

    def view(self) -> str:
        return f"Point({self.x},{self.y})_{self.a}_{self.b}"

    def __str__(self) -> str:
        return self.view()

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y}, {self.a}, {self.b})"

    def __neg__(self) -> "Point":
        if self.x.is_none():
            return self
        # (x, -y) is on the curve if (x, y) is
        return Point(self.x, -self.y, self.a, self.b, check_validity=False)

    def __add__(self, other: "Point") -> "Point":
        """Return the sum of two points of the same curve.

        The cases of the group law are evaluated in order:
        infinity operands, opposite points, distinct x (chord),
        vertical tangent, and doubling (tangent).
        """

        if not isinstance(other, Point):
            return NotImplemented
        if self.a != other.a or self.b != other.b:
            raise CurveMismatchError(self, other)

        if self.x.is_none():
            return other
        if other.x.is_none():
            return self

        # opposite points: vertical line
        if self.x == other.x and self.y != other.y:
            return Point.infinity(self.a, self.b)

        if self.x != other.x:
            s = (other.y - self.y) / (other.x - self.x)
            x = s**2 - self.x - other.x
            y = s * (self.x - x) - self.y
            return Point(x, y, self.a, self.b)

        # from here on self == other

        if self.y.unwrap() == 0:
            # vertical tangent
            return Point.infinity(self.a, self.b)

        s = (3 * self.x**2 + self.a) / (2 * self.y)
        x = s**2 - 2 * self.x
        y = s * (self.x - x) - self.y
        return Point(x, y, self.a, self.b)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return self + (-other)
