#!/usr/bin/env python3

# Copyright (C) 2020-2026 The slip13 developers
#
# This file is part of slip13. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of slip13 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module slip13.ec."""

from slip13.ec.curve import CURVES, Curve, jac_from_aff, mult, secp256k1, secp256r1
from slip13.ec.sec_point import bytes_from_point, point_from_octets

__all__ = [
    "CURVES",
    "Curve",
    "jac_from_aff",
    "mult",
    "secp256k1",
    "secp256r1",
    "bytes_from_point",
    "point_from_octets",
]
