#!/usr/bin/env python3

# Copyright (C) 2024 The fincurve developers
#
# This file is part of fincurve. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of fincurve including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# hex-string or bytes representation of an int
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# or that carry a "0x" prefix, e.g.:
# "deadbeef"
# "dead beef"
# "0xdeadbeef"
#
# use fincurve.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]

# Field elements are plain ints, already reduced to the canonical
# representative in [0, p-1] by the field provider
FieldElement = int

# Elliptic curve point as a plain (x, y) tuple.
# The identity has no tuple form: None stands for it,
# as (x, 0) is a valid point of order two on some curves.
TuplePoint = Tuple[int, int]
