#!/usr/bin/env python3

# Copyright (C) 2020-2026 The slip13 developers
#
# This file is part of slip13. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of slip13 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by slip13 from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the slip13 versions are derived.
"""


class Slip13ValueError(ValueError):
    pass


class Slip13TypeError(TypeError):
    pass


class Slip13RuntimeError(RuntimeError):
    pass


class DerivationError(Slip13ValueError):
    """A step of an identity key derivation failed.

    The error raised by the HD key is available as __cause__.
    """
