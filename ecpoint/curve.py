#!/usr/bin/env python3

# Copyright (C) 2022 The ecpoint developers
#
# This file is part of ecpoint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoint including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve dataclass.

The Curve holds once the (a, b) parameters
that every Point otherwise carries,
acting as a Point factory for that curve.
"""

from dataclasses import dataclass

from ecpoint.alias import Coordinate, Integer
from ecpoint.exceptions import ECPointValueError
from ecpoint.point import Point
from ecpoint.utils import int_from_integer, int_string


@dataclass(frozen=True)
class Curve:
    """Elliptic curve y^2 = x^3 + a*x + b over the integers.

    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0,
    i.e. the curve must not be singular.
    """

    a: int
    b: int

    def __init__(self, a: Integer, b: Integer, check_validity: bool = True) -> None:

        object.__setattr__(self, "a", int_from_integer(a))
        object.__setattr__(self, "b", int_from_integer(b))

        if check_validity:
            self.assert_valid()

    @property
    def discriminant(self) -> int:
        return -16 * (4 * self.a * self.a * self.a + 27 * self.b * self.b)

    def assert_valid(self) -> None:
        if self.discriminant == 0:
            raise ECPointValueError("zero discriminant")

    def __str__(self) -> str:
        result = "Curve y^2 = x^3 + a*x + b"
        result += f"\n a   = {int_string(self.a)}"
        result += f"\n b   = {int_string(self.b)}"
        return result

    def __repr__(self) -> str:
        return f"Curve({int_string(self.a)}, {int_string(self.b)})"

    def __call__(self, x: Coordinate, y: Coordinate) -> Point:
        "Return the (x, y) point of the curve."
        return Point(x, y, self.a, self.b)

    def __contains__(self, point: object) -> bool:
        "Return True if the point has the curve parameters and it is on the curve."
        if not isinstance(point, Point):
            return False
        if point.a != self.a or point.b != self.b:
            return False
        return point.is_on_curve()

    def infinity(self) -> Point:
        return Point.infinity(self.a, self.b)

    def y2(self, x: int) -> int:
        "Return x^3 + a*x + b, i.e. y^2 for the points having x-coordinate."
        return (x * x + self.a) * x + self.b
