#!/usr/bin/env python3

# Copyright (C) 2022 The ecpoint developers
#
# This file is part of ecpoint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoint including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:  # pragma: no cover
    from ecpoint.curve_element import CurveElement

# hex-string or bytes representation of an int
#
# e.g.:
# 3735928559
# -3735928559
# "0xdeadbeef"
# "-0xdeadbeef"
# "deadbeef"
# b'\xde\xad\xbe\xef'
#
# use ecpoint.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]

# Input accepted for a point coordinate:
# a CurveElement, an Integer to be wrapped,
# or None standing for the coordinate of the infinity point
Coordinate = Union["CurveElement", Integer, None]

# Operand accepted by CurveElement arithmetic
Operand = Union["CurveElement", int]
