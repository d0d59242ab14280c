#!/usr/bin/env python3

# Copyright (C) 2022 The ecpoint developers
#
# This file is part of ecpoint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoint including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Curve explorer functions.

These functions are meant to explore small integer points
of a Curve, for didactical (and fun) reason only.
"""

from math import isqrt
from typing import List

from ecpoint.curve import Curve
from ecpoint.exceptions import ECPointValueError
from ecpoint.point import Point

MAX_BOUND = 10000


def find_integer_points(ec: Curve, bound: int) -> List[Point]:
    """Return all points with integer coordinates and |x| <= bound.

    The infinity point comes first,
    then points are sorted by x-coordinate and y-coordinate.
    Very unsophisticated walk-through approach,
    for didactical sake only.
    """
    if bound < 0:
        raise ECPointValueError(f"negative bound: {bound}")
    if bound > MAX_BOUND:
        err_msg = f"bound is too big to search all integer points: {bound}"
        raise ECPointValueError(err_msg)

    points: List[Point] = [ec.infinity()]
    for x in range(-bound, bound + 1):
        y2 = ec.y2(x)
        if y2 < 0:
            continue
        y = isqrt(y2)
        if y * y != y2:
            continue

        if y != 0:
            points.append(ec(x, -y))
        points.append(ec(x, y))

    return points


def find_subgroup_points(G: Point, max_size: int = 1000) -> List[Point]:
    """Return the G-generated subgroup points G, 2G, ..., INF.

    An error is raised if the infinity point is not reached
    within max_size points.
    As soon as a multiple of G has no integer coordinates
    the inexact division warning is emitted, and the point addition
    either raises NotOnCurveError or goes on with a wrong multiple.
    """

    points: List[Point] = [G]
    while not points[-1].is_infinity:
        if len(points) >= max_size:
            err_msg = f"infinity point not reached within {max_size} points"
            raise ECPointValueError(err_msg)
        points.append(points[-1] + G)

    return points
