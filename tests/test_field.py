#!/usr/bin/env python3

# Copyright (C) 2024 The fincurve developers
#
# This file is part of fincurve. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of fincurve including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.
"Tests for the `fincurve.field` module."

import pytest

from fincurve.exceptions import FincurveValueError
from fincurve.field import FiniteField, PrimeField


def test_exceptions() -> None:

    # good field
    PrimeField(23)
    PrimeField("0x17")

    for p in (-23, 0, 1, 2, 15, 95):
        with pytest.raises(FincurveValueError, match="p is not an odd prime: "):
            PrimeField(p)

    with pytest.raises(TypeError):
        FiniteField()  # type: ignore  # pylint: disable=abstract-class-instantiated

    F = PrimeField(23)
    with pytest.raises(FincurveValueError, match="zero has no reciprocal"):
        F.reciprocal(0)
    with pytest.raises(FincurveValueError, match="zero has no reciprocal"):
        F.power(0, -1)

    F = PrimeField(13)
    with pytest.raises(FincurveValueError, match="field prime is not equal to 3 mod 4"):
        F.sqrt_p3mod4(4)
    with pytest.raises(FincurveValueError, match="no root for "):
        F.sqrt(2)


def test_str_repr_eq() -> None:
    F = PrimeField(23)
    assert str(F) == "Field\n p   = 23"
    assert repr(F) == "PrimeField(23)"
    assert F == PrimeField(23)
    assert F != PrimeField(19)
    assert hash(F) == hash(PrimeField(23))

    p = 2 ** 256 - 2 ** 32 - 977
    F = PrimeField(p)
    assert repr(F).startswith("PrimeField('FFFFFFFF ")


def test_operations() -> None:
    F = PrimeField(23)
    for x in range(23):
        assert x in F
        assert F.element(x + 23) == x
        assert F.inverse(x) == (23 - x) % 23
        assert F.add(x, F.inverse(x)) == 0
        for y in range(23):
            assert F.add(x, y) == (x + y) % 23
            assert F.subtract(x, y) == (x - y) % 23
            assert F.multiply(x, y) == (x * y) % 23
            assert F.subtract(x, y) in F
        if x:
            assert F.multiply(x, F.reciprocal(x)) == 1
            assert F.power(x, -2) == F.reciprocal(F.multiply(x, x))
        assert F.power(x, 3) == x * x * x % 23
    assert -1 not in F
    assert 23 not in F
    assert "1" not in F


def test_square_roots() -> None:
    for p in (3, 7, 11, 19, 23, 31, 43, 2 ** 256 - 2 ** 32 - 977):
        F = PrimeField(p)
        for x in range(min(p, 200)):
            root = F.sqrt_p3mod4(x)
            assert root in F
            if F.is_square(x):
                assert F.multiply(root, root) == x
                assert F.sqrt(x) in (root, F.inverse(root))
            else:
                assert F.multiply(root, root) == F.inverse(x)
                with pytest.raises(FincurveValueError, match="no root for "):
                    F.sqrt(x)

    # checked square roots are available for any odd prime
    F = PrimeField(17)
    for x in range(17):
        if F.is_square(x):
            root = F.sqrt(x)
            assert F.multiply(root, root) == x
