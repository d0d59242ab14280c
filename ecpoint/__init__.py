#!/usr/bin/env python3

# Copyright (C) 2022 The ecpoint developers
#
# This file is part of ecpoint. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecpoint including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecpoint package."

name = "ecpoint"
__version__ = "2022.6.1"
__author__ = "The ecpoint developers"
__author_email__ = "devs@ecpoint.org"
__copyright__ = "Copyright (C) 2022 The ecpoint developers"
__license__ = "MIT License"

from ecpoint.curve import Curve
from ecpoint.curve_element import NONE, CurveElement, int_to_curve
from ecpoint.point import Point

__all__ = [
    "Curve",
    "CurveElement",
    "NONE",
    "int_to_curve",
    "Point",
]
