#!/usr/bin/env python3

# Copyright (C) 2024 The fincurve developers
#
# This file is part of fincurve. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of fincurve including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by fincurve from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError and TypeError
from which the fincurve versions are derived.
"""


class FincurveValueError(ValueError):
    pass


class FincurveTypeError(TypeError):
    pass
