#!/usr/bin/env python3

# Copyright (C) 2024 The fincurve developers
#
# This file is part of fincurve. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of fincurve including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.
"""Modular arithmetic over a prime modulus.

These are the integer routines behind the reference field provider
fincurve.field.PrimeField: extended Euclidean algorithm,
modular inverse, Euler's criterion, and modular square roots
(closed form for p = 3 mod 4, Tonelli-Shanks otherwise).

See
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
and
https://codereview.stackexchange.com/questions/43210/tonelli-shanks-algorithm-implementation-of-prime-modular-square-root/43267
"""

from typing import Tuple

from fincurve.exceptions import FincurveValueError
from fincurve.utils import int_repr


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b)."""

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime."""

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise FincurveValueError(f"no inverse for {int_repr(a)} mod {int_repr(m)}")


def is_probable_prime(p: int) -> bool:
    "Fermat test to base 2: a _probabilistic_ primality test for odd p."
    return p > 2 and p % 2 == 1 and pow(2, p - 1, p) == 1


def legendre_symbol(a: int, p: int) -> int:
    """Compute the Legendre symbol a|p using Euler's criterion.

    p is an odd prime.
    It returns 1 if a has a square root modulo p, -1 if it has not,
    0 if p divides a.
    """

    ls = pow(a, p >> 1, p)
    return -1 if ls == p - 1 else ls


def sqrt_3mod4(a: int, p: int) -> int:
    """Return the closed-form square root candidate a^((p+1)/4) mod p.

    The candidate is a root of a only if a is a quadratic residue
    and p = 3 mod 4: neither condition is checked here.
    """

    return pow(a, (p >> 2) + 1, p)


def mod_sqrt(a: int, p: int) -> int:
    """Return a square root (mod p) of a; p must be a prime.

    Solve the equation:
        x^2 = a mod p

    and return x. Note that p - x is also a root.

    If a simple solution is not available for p,
    then the Tonelli-Shanks algorithm is used.
    """

    a %= p

    if p % 4 == 3:
        r = sqrt_3mod4(a, p)
    elif p % 8 == 5:
        # candidate is pow(a, (p + 3) // 8, p)
        r = pow(a, (p >> 3) + 1, p)
        if r * r % p != a:
            # the other candidate
            r = r * pow(2, p >> 2, p) % p
    else:
        return tonelli(a, p)

    if r * r % p != a:
        raise FincurveValueError(f"no root for {int_repr(a)} mod {int_repr(p)}")
    return r


def tonelli(a: int, p: int) -> int:
    """Return a square root (mod p) of a; p must be a prime.

    The Tonelli-Shanks algorithm is used.
    """

    a %= p
    if a == 0 or p == 2:
        return a

    if legendre_symbol(a, p) != 1:
        raise FincurveValueError(f"no root for {int_repr(a)} mod {int_repr(p)}")

    # p - 1 = q * 2^s with q odd
    q, s = p - 1, 0
    while q & 1 == 0:
        s += 1
        q >>= 1
    if s == 1:
        return sqrt_3mod4(a, p)

    # any quadratic non residue will do
    z = 2
    while legendre_symbol(z, p) != -1:
        z += 1
    c = pow(z, q, p)
    r = pow(a, (q + 1) // 2, p)
    t = pow(a, q, p)
    while t != 1:
        # lowest i such that t^(2^i) = 1
        t2i = t
        for i in range(1, s):
            t2i = t2i * t2i % p
            if t2i == 1:
                b = pow(c, 1 << (s - i - 1), p)
                r = r * b % p
                c = b * b % p
                t = t * c % p
                s = i
                break

    return r
