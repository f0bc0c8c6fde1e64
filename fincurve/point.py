#!/usr/bin/env python3

# Copyright (C) 2024 The fincurve developers
#
# This file is part of fincurve. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of fincurve including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.
"""Elliptic curve points in affine coordinates.

A Point is either an affine point (x, y) or the identity element
(the point at infinity), which has no coordinates at all.

Points are mutable values: fincurve.curve.Curve operations write
their results into caller-supplied output points.
"""

import math
from typing import Optional, Union

from fincurve.alias import Integer, TuplePoint
from fincurve.exceptions import FincurveValueError
from fincurve.utils import int_from_integer, int_repr

# the x value representing infinity
INF_X = math.inf


class Point:
    """Affine point of an elliptic curve, or the identity.

    is_identity is True if and only if both x and y are None.
    Coordinates are trusted to be canonical field elements:
    they are never reduced here.
    """

    __slots__ = ("x", "y", "is_identity")

    def __init__(
        self, x: Optional[Union[Integer, float]] = None, y: Optional[Integer] = None
    ) -> None:
        if (x is None and y is None) or x == INF_X:
            self.set_identity()
            return
        if x is None or y is None:
            err_msg = f"a finite point needs both coordinates: x={x!r}, y={y!r}"
            raise FincurveValueError(err_msg)
        self.x: Optional[int] = int_from_integer(x)  # type: ignore
        self.y: Optional[int] = int_from_integer(y)
        self.is_identity = False

    @classmethod
    def identity(cls) -> "Point":
        return cls()

    @classmethod
    def from_tuple(cls, Q: Optional[TuplePoint]) -> "Point":
        "Return the Point of an (x, y) tuple, the identity for None."

        if Q is None:
            return cls()
        if len(Q) != 2:
            raise FincurveValueError("point must be a tuple[int, int] or None")
        return cls(Q[0], Q[1])

    def to_tuple(self) -> Optional[TuplePoint]:
        "Return the (x, y) tuple of the point, None for the identity."

        if self.is_identity:
            return None
        return self.x, self.y  # type: ignore

    def set_identity(self) -> "Point":
        self.x = None
        self.y = None
        self.is_identity = True
        return self

    def copy(self) -> "Point":
        "Return a new, independent point with the same value."
        Q = Point.__new__(Point)
        Q.x, Q.y, Q.is_identity = self.x, self.y, self.is_identity
        return Q

    def move_into(self, target: "Point") -> "Point":
        "Overwrite target with the value of this point and return target."
        target.x, target.y, target.is_identity = self.x, self.y, self.is_identity
        return target

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        if self.is_identity or other.is_identity:
            return self.is_identity and other.is_identity
        return self.x == other.x and self.y == other.y

    # mutable: not hashable
    __hash__ = None  # type: ignore

    def __str__(self) -> str:
        if self.is_identity:
            return "INF"
        return f"({int_repr(self.x)}, {int_repr(self.y)})"  # type: ignore

    def __repr__(self) -> str:
        if self.is_identity:
            return "Point()"
        return f"Point({self.x}, {self.y})"
