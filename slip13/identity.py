#!/usr/bin/env python3

# Copyright (C) 2020-2026 The slip13 developers
#
# This file is part of slip13. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of slip13 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SLIP-0013 identity key derivation.

https://github.com/satoshilabs/slips/blob/master/slip-0013.md

An identity is a (uri, index) pair: the index allows multiple
identities for the same uri (e.g. multiple accounts on one service).
The identity key is the HD node m/13'/A'/B'/C'/D', where:

1. index is serialized as 4 bytes little-endian
   and concatenated with the uri bytes
2. the SHA256 of the result is truncated to 128 bits
3. the 128 bits are split into four 32-bit little-endian integers A, B, C, D
4. the highest bit of 13, A, B, C, and D is set to 1 (hardening)

The uri is not normalized in any way:
different strings, even if equivalent as URIs, yield unrelated keys.

Derivation works on any HD key providing derive_hardened_child,
e.g. slip13.slip10.SLIP10KeyData over secp256k1 or nist256p1.
Keys are never modified: each step returns a new key.
"""

from functools import reduce
from typing import List, Protocol, TypeVar

from slip13.alias import String
from slip13.exceptions import DerivationError, Slip13ValueError
from slip13.hashes import sha256
from slip13.slip10.der_path import HARDENED, str_from_der_path
from slip13.utils import bytes_from_string, uint32_from_int

# BIP43 purpose field used by SLIP-0013
PURPOSE = 13

_HDKey = TypeVar("_HDKey", bound="HDKey")


class HDKey(Protocol):
    "HD key capability needed by the identity derivation."

    def derive_hardened_child(self: _HDKey, index: int) -> _HDKey:
        ...


def indexes_from_uri(uri: String, index: int, purpose: int = PURPOSE) -> List[int]:
    """Return the hardened derivation indexes [purpose, A, B, C, D].

    The highest bit of purpose is set even if it is already above
    0x7FFFFFFF: such purposes collide with their hardened form.
    """

    index = uint32_from_int(index, "index")
    purpose = uint32_from_int(purpose, "purpose")

    data = index.to_bytes(4, byteorder="little", signed=False) + bytes_from_string(uri)
    hash128 = sha256(data)[:16]
    abcd = [
        int.from_bytes(hash128[i : i + 4], byteorder="little", signed=False)
        for i in range(0, 16, 4)
    ]
    return [i | HARDENED for i in [purpose] + abcd]


def der_path_from_uri(uri: String, index: int, purpose: int = PURPOSE) -> str:
    "Return the identity derivation path, e.g. m/13h/Ah/Bh/Ch/Dh."
    return str_from_der_path(indexes_from_uri(uri, index, purpose))


def derive_with_purpose(key: _HDKey, purpose: int, uri: String, index: int) -> _HDKey:
    """Derive the identity key using a custom purpose.

    Same as derive, with the purpose field replacing
    the SLIP-0013 value of 13.
    """

    indexes = indexes_from_uri(uri, index, purpose)
    try:
        return reduce(lambda k, i: k.derive_hardened_child(i), indexes, key)
    except Slip13ValueError as e:
        raise DerivationError(f"identity derivation failure: {e}") from e


def derive(key: _HDKey, uri: String, index: int) -> _HDKey:
    """Derive the SLIP-0013 identity key for uri and index.

    The derivation walks the hardened path m/13'/A'/B'/C'/D'
    from key (which does not have to be a root key);
    a failing step aborts the derivation raising DerivationError.
    """
    return derive_with_purpose(key, PURPOSE, uri, index)
