#!/usr/bin/env python3

# Copyright (C) 2020-2026 The slip13 developers
#
# This file is part of slip13. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of slip13 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Helper functions to use the libsecp256k1 python bindings.

The bindings are an optional install (the 'secp256k1' extra):
when missing, secp256k1 public keys are computed in pure python.
"""

import contextlib
from typing import Union

from slip13.alias import INF, Integer, Octets, Point
from slip13.exceptions import Slip13RuntimeError
from slip13.utils import bytes_from_octets, int_from_integer

LIBSECP256K1_AVAILABLE = False
with contextlib.suppress(ImportError):
    from btclib_libsecp256k1 import ffi, lib

    LIBSECP256K1_AVAILABLE = True
    # a single context, created for both signing and verification
    ctx = lib.secp256k1_context_create(769)
    EC_COMPRESSED = 258  # lib.SECP256K1_EC_COMPRESSED
    EC_UNCOMPRESSED = 2  # lib.SECP256K1_EC_UNCOMPRESSED

# secp256k1 group order
_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def is_available() -> bool:
    return LIBSECP256K1_AVAILABLE


def pubkey_from_prvkey(prv_key: Union[Octets, int], compressed: bool = True) -> bytes:
    """Return the SEC serialized public key of a private key."""

    prv_key = (
        prv_key.to_bytes(32, "big")
        if isinstance(prv_key, int)
        else bytes_from_octets(prv_key, 32)
    )

    pubkey_ptr = ffi.new("secp256k1_pubkey *")
    if not lib.secp256k1_ec_pubkey_create(ctx, pubkey_ptr, prv_key):
        raise Slip13RuntimeError("secp256k1_ec_pubkey_create failure")
    length_ = 33 if compressed else 65
    serialized_pubkey_ptr = ffi.new(f"char[{length_}]")
    length = ffi.new("size_t *", length_)
    lib.secp256k1_ec_pubkey_serialize(
        ctx,
        serialized_pubkey_ptr,
        length,
        pubkey_ptr,
        EC_COMPRESSED if compressed else EC_UNCOMPRESSED,
    )
    return ffi.unpack(serialized_pubkey_ptr, length_)


def mult(num: Integer) -> Point:
    """Multiply the secp256k1 generator point."""
    m = int_from_integer(num) % _N
    if m == 0:
        return INF
    pub_key = pubkey_from_prvkey(m, compressed=False)
    return int.from_bytes(pub_key[1:33], "big"), int.from_bytes(pub_key[33:], "big")
