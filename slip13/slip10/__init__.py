#!/usr/bin/env python3

# Copyright (C) 2020-2026 The slip13 developers
#
# This file is part of slip13. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of slip13 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module slip13.slip10."""

from slip13.slip10.der_path import (
    HARDENED,
    DerPath,
    bytes_from_der_path,
    indexes_from_der_path,
    int_from_index_str,
    str_from_der_path,
    str_from_index_int,
)
from slip13.slip10.slip10 import (
    SLIP10_CURVES,
    SLIP10KeyData,
    curve_name,
    derive,
    rootkey_from_seed,
)

__all__ = [
    "HARDENED",
    "DerPath",
    "bytes_from_der_path",
    "indexes_from_der_path",
    "int_from_index_str",
    "str_from_der_path",
    "str_from_index_int",
    "SLIP10_CURVES",
    "SLIP10KeyData",
    "curve_name",
    "derive",
    "rootkey_from_seed",
]
