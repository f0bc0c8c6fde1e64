#!/usr/bin/env python3

# Copyright (C) 2024 The fincurve developers
#
# This file is part of fincurve. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of fincurve including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.
"""Elliptic curve point arithmetic over a finite field.

The elliptic curve is the set of points (x, y)
that are solutions to a short Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b in a finite field F,
together with the identity element (the point at infinity).

Curve operations take a caller-supplied output point as first argument,
write the result into it, and return it to allow chaining.
The output point may alias any of the input points:
all input coordinates are read before the output is written.
The sum, doubled, product, and opposite methods
return freshly allocated points instead.

All field arithmetic is delegated to the FiniteField provider;
no modular reduction happens here.
"""

import logging
from typing import Optional, Union

from fincurve.alias import Integer
from fincurve.exceptions import FincurveTypeError, FincurveValueError
from fincurve.field import FiniteField
from fincurve.point import INF_X, Point
from fincurve.utils import int_from_integer, int_repr

logger = logging.getLogger(__name__)


def _require_point(P: object) -> None:
    if not isinstance(P, Point):
        raise FincurveTypeError(f"not a point: {P!r}")


class Curve:
    """Elliptic curve y^2 = x^3 + a*x + b over the field F.

    The field provider F is shared with the caller, not owned.
    The coefficients a and b are fixed at construction.
    """

    def __init__(self, F: FiniteField, a: Integer, b: Integer) -> None:
        if not isinstance(F, FiniteField):
            raise FincurveTypeError(f"not a finite field: {F!r}")
        a = int_from_integer(a)
        b = int_from_integer(b)

        # a and b must be field elements in [0, p-1]
        p = F.p
        if a < 0:
            raise FincurveValueError(f"negative a: {a}")
        if p <= a:
            raise FincurveValueError(f"p <= a: {int_repr(p)} <= {int_repr(a)}")
        if b < 0:
            raise FincurveValueError(f"negative b: {b}")
        if p <= b:
            raise FincurveValueError(f"p <= b: {int_repr(p)} <= {int_repr(b)}")

        self.F = F
        self._a = a
        self._b = b
        logger.debug("curve a=%s b=%s over p=%s", a, b, p)

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    def __str__(self) -> str:
        result = "Curve"
        result += f"\n p   = {int_repr(self.F.p)}"
        result += f"\n a   = {int_repr(self._a)}"
        result += f"\n b   = {int_repr(self._b)}"
        return result

    def __repr__(self) -> str:
        return f"Curve({self.F!r}, {int_repr(self._a)}, {int_repr(self._b)})"

    def is_singular(self) -> bool:
        "Return True if 4*a^3 + 27*b^2 = 0, i.e. the curve is not elliptic."
        F = self.F
        a3 = F.multiply(F.multiply(self._a, self._a), self._a)
        b2 = F.multiply(self._b, self._b)
        return F.add(F.multiply(4, a3), F.multiply(27, b2)) == 0

    # in-place operations

    def add(self, R: Point, P: Point, Q: Point) -> Point:
        """Set R to P + Q and return R.

        The input points are not checked to be on the curve.
        """

        _require_point(R)
        _require_point(P)
        _require_point(Q)
        return self._add(R, P, Q)

    def _add(self, R: Point, P: Point, Q: Point) -> Point:
        if P.is_identity:
            return Q.move_into(R)
        if Q.is_identity:
            return P.move_into(R)

        F = self.F
        Px, Py, Qx, Qy = P.x, P.y, Q.x, Q.y
        if Px != Qx or Py != Qy:
            # chord through two distinct points
            dy = F.subtract(Qy, Py)  # type: ignore
            dx = F.subtract(Qx, Px)  # type: ignore
            # opposite points: check before any reciprocal
            if dx == 0:
                logger.debug("vertical chord at x=%s", Px)
                return R.set_identity()
            lam = F.multiply(dy, F.reciprocal(dx))
        else:
            # tangent at a doubled point
            Px2 = F.multiply(Px, Px)  # type: ignore
            num = F.add(F.multiply(3, Px2), self._a)
            den = F.multiply(2, Py)  # type: ignore
            # point of order two: check before any reciprocal
            if den == 0:
                logger.debug("vertical tangent at x=%s", Px)
                return R.set_identity()
            lam = F.multiply(num, F.reciprocal(den))

        x = F.subtract(F.subtract(F.multiply(lam, lam), Px), Qx)  # type: ignore
        y = F.subtract(F.multiply(lam, F.subtract(Px, x)), Py)  # type: ignore
        R.x, R.y, R.is_identity = x, y, False
        return R

    def double(self, Q: Point, P: Point) -> Point:
        "Set Q to P + P and return Q."
        return self.add(Q, P, P)

    def multiply(self, Q: Point, n: Integer, P: Point) -> Point:
        """Set Q to n*P and return Q.

        This implementation uses
        'double & add' algorithm,
        'right-to-left' binary decomposition of the n coefficient.

        The scalar is an arbitrary-precision non-negative integer;
        it is not reduced modulo the order of P.
        """

        _require_point(Q)
        _require_point(P)
        n = int_from_integer(n)
        if n < 0:
            raise FincurveValueError(f"negative n: {hex(n)}")

        # R is the running result, T the running power-of-two multiple of P
        R = Point()
        T = P.copy()
        while n > 0:
            if n & 1:
                self._add(R, R, T)
            self._add(T, T, T)
            n >>= 1
        return R.move_into(Q)

    def negate(self, P: Point) -> None:
        """Replace P with its opposite point.

        The input point is not checked to be on the curve.
        """

        _require_point(P)
        if P.is_identity:
            raise FincurveValueError("INF has no y-coordinate")
        P.y = self.F.inverse(P.y)  # type: ignore

    def point_at(
        self, x: Union[Integer, float], y: Optional[Integer] = None
    ) -> Point:
        """Return the point (x, y).

        The identity is returned if y is missing or x is infinity.
        """

        if y is None or x == INF_X:
            return Point()
        return Point(x, y)

    def y2(self, x: int) -> int:
        "Return x^3 + a*x + b, the square of the y-coordinates at x."
        F = self.F
        return F.add(F.multiply(F.add(F.multiply(x, x), self._a), x), self._b)

    def solve(self, P: Point) -> None:
        """Set the y-coordinate of P from its x-coordinate.

        The field prime must be equal to 3 mod 4,
        as the closed-form square root of the field provider is used.

        Whether x is a valid x-coordinate is not checked:
        if x^3 + a*x + b is not a quadratic residue,
        y is whatever the field provider returns for it.
        """

        _require_point(P)
        if P.x is None:
            raise FincurveValueError("no x-coordinate to solve for")
        p = self.F.p
        if p % 4 != 3:
            raise FincurveValueError(
                f"field prime is not equal to 3 mod 4: {int_repr(p)}"
            )
        x = P.x
        y = self.F.sqrt_p3mod4(self.y2(x))
        logger.debug("solved x=%s: y=%s", x, y)
        P.y, P.is_identity = y, False

    solve_p3mod4 = solve

    def require_on_curve(self, P: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """

        if not self.is_on_curve(P):
            raise FincurveValueError("point not on curve")

    def is_on_curve(self, P: Point) -> bool:
        "Return True if the point is on the curve."
        _require_point(P)
        if P.is_identity:
            return True
        p = self.F.p
        if not 0 <= P.x < p or not 0 <= P.y < p:  # type: ignore
            return False
        return self.F.multiply(P.y, P.y) == self.y2(P.x)  # type: ignore

    # fresh-result operations

    def sum(self, P: Point, Q: Point) -> Point:
        "Return P + Q as a new point."
        return self.add(Point(), P, Q)

    def doubled(self, P: Point) -> Point:
        "Return 2*P as a new point."
        return self.double(Point(), P)

    def product(self, n: Integer, P: Point) -> Point:
        "Return n*P as a new point."
        return self.multiply(Point(), n, P)

    def opposite(self, P: Point) -> Point:
        "Return -P as a new point."
        Q = P.copy()
        self.negate(Q)
        return Q
