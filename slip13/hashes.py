#!/usr/bin/env python3

# Copyright (C) 2020-2026 The slip13 developers
#
# This file is part of slip13. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of slip13 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions."""

import hashlib
import hmac

from slip13.alias import Octets
from slip13.utils import bytes_from_octets


def sha256(octets: Octets) -> bytes:
    """Return the SHA256(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hashlib.sha256(octets).digest()


def hmac_sha512(key: bytes, data: bytes) -> bytes:
    """Return the HMAC-SHA512 of data, as used by BIP32 and SLIP-0010."""
    return hmac.new(key, data, "sha512").digest()
