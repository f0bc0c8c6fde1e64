#!/usr/bin/env python3

# Copyright (C) 2024 The fincurve developers
#
# This file is part of fincurve. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of fincurve including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.
"""Finite-field arithmetic providers.

The curve arithmetic of fincurve.curve never reduces field elements
itself: every operation goes through a FiniteField provider,
which is expected to return canonical representatives in [0, p-1].

FiniteField is the abstract contract;
PrimeField is the reference implementation for prime fields Fp.
Alternative providers (e.g. optimized for specific prime shapes)
can be plugged into a Curve as long as they honor the contract.
"""

from abc import ABC, abstractmethod

from fincurve.alias import FieldElement, Integer
from fincurve.exceptions import FincurveValueError
from fincurve.number_theory import (
    is_probable_prime,
    legendre_symbol,
    mod_inv,
    mod_sqrt,
    sqrt_3mod4,
)
from fincurve.utils import int_from_integer, int_repr


class FiniteField(ABC):
    """Abstract finite-field arithmetic provider.

    Field elements are non-negative ints,
    canonically reduced modulo the field prime p.
    """

    @property
    @abstractmethod
    def p(self) -> int:
        "The field prime."

    @abstractmethod
    def add(self, x: FieldElement, y: FieldElement) -> FieldElement:
        "Return x + y mod p."

    @abstractmethod
    def subtract(self, x: FieldElement, y: FieldElement) -> FieldElement:
        "Return x - y mod p."

    @abstractmethod
    def multiply(self, x: FieldElement, y: FieldElement) -> FieldElement:
        "Return x * y mod p."

    @abstractmethod
    def power(self, x: FieldElement, e: int) -> FieldElement:
        "Return x^e mod p."

    @abstractmethod
    def reciprocal(self, x: FieldElement) -> FieldElement:
        "Return the multiplicative inverse of x mod p; x must not be zero."

    @abstractmethod
    def inverse(self, x: FieldElement) -> FieldElement:
        "Return the additive inverse -x mod p."

    @abstractmethod
    def sqrt_p3mod4(self, x: FieldElement) -> FieldElement:
        """Return the closed-form square root of x, for p = 3 mod 4.

        The value returned for a quadratic non residue
        is up to the provider.
        """


class PrimeField(FiniteField):
    """The prime field Fp of the integers modulo p.

    The sqrt_p3mod4 closed form x^((p+1)/4) is returned unchecked,
    so for a quadratic non residue x it is the root of -x;
    use sqrt for a checked square root.
    """

    def __init__(self, p: Integer) -> None:
        p = int_from_integer(p)
        # Fermat test will do as _probabilistic_ primality test...
        if not is_probable_prime(p):
            raise FincurveValueError(f"p is not an odd prime: {int_repr(p)}")
        self._p = p

    @property
    def p(self) -> int:
        return self._p

    def __str__(self) -> str:
        return f"Field\n p   = {int_repr(self._p)}"

    def __repr__(self) -> str:
        return f"PrimeField({int_repr(self._p)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self._p == other._p

    def __hash__(self) -> int:
        return hash(self._p)

    def __contains__(self, x: object) -> bool:
        "Return True if x is a canonical representative in [0, p-1]."
        return isinstance(x, int) and 0 <= x < self._p

    def element(self, x: Integer) -> FieldElement:
        "Return the canonical representative of x."
        return int_from_integer(x) % self._p

    def add(self, x: FieldElement, y: FieldElement) -> FieldElement:
        return (x + y) % self._p

    def subtract(self, x: FieldElement, y: FieldElement) -> FieldElement:
        return (x - y) % self._p

    def multiply(self, x: FieldElement, y: FieldElement) -> FieldElement:
        return (x * y) % self._p

    def power(self, x: FieldElement, e: int) -> FieldElement:
        if e < 0:
            return pow(self.reciprocal(x), -e, self._p)
        return pow(x, e, self._p)

    def reciprocal(self, x: FieldElement) -> FieldElement:
        if x % self._p == 0:
            raise FincurveValueError("zero has no reciprocal")
        return mod_inv(x, self._p)

    def inverse(self, x: FieldElement) -> FieldElement:
        return -x % self._p

    def sqrt_p3mod4(self, x: FieldElement) -> FieldElement:
        if self._p % 4 != 3:
            raise FincurveValueError(
                f"field prime is not equal to 3 mod 4: {int_repr(self._p)}"
            )
        return sqrt_3mod4(x % self._p, self._p)

    def sqrt(self, x: FieldElement) -> FieldElement:
        "Return a square root of x, raising if x is not a quadratic residue."
        return mod_sqrt(x, self._p)

    def is_square(self, x: FieldElement) -> bool:
        "Return True if x is zero or a quadratic residue."
        return legendre_symbol(x % self._p, self._p) != -1
