#!/usr/bin/env python3

# Copyright (C) 2024 The fincurve developers
#
# This file is part of fincurve. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of fincurve including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the fincurve package."

import logging

name = "fincurve"
__version__ = "2024.10.1"
__author__ = "The fincurve developers"
__author_email__ = "devs@fincurve.org"
__copyright__ = "Copyright (C) 2024 The fincurve developers"
__license__ = "MIT License"

# applications decide where fincurve records go
logging.getLogger(__name__).addHandler(logging.NullHandler())
