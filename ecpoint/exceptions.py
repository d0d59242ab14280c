#!/usr/bin/env python3

# Copyright (C) 2022 The ecpoint developers
#
# This file is part of ecpoint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoint including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Expception classes.

These are only meant to discriminate between Exceptions being raised
by ecpoint from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError and TypeError
from which the ecpoint versions are derived.
"""

from typing import Any


class ECPointValueError(ValueError):
    pass


class ECPointTypeError(TypeError):
    pass


class NotOnCurveError(ECPointValueError):
    "The (x, y) pair is not a solution of y^2 = x^3 + a*x + b."

    def __init__(self, x: int, y: int, a: int, b: int) -> None:
        self.x = x
        self.y = y
        self.a = a
        self.b = b
        super().__init__(f"({x}, {y}) is not on the curve y^2 = x^3 + {a}x + {b}")


class InvalidPointError(ECPointValueError):
    "Exactly one of the two coordinates is the None sentinel."


class CurveMismatchError(ECPointValueError):
    "Operands of a group operation belong to different curves."

    def __init__(self, p: Any, q: Any) -> None:
        self.p = p
        self.q = q
        super().__init__(f"points {p}, {q} are not on the same curve")


class CoordinateSentinelError(ECPointTypeError):
    "The None coordinate sentinel has been used as an arithmetic operand."
