#!/usr/bin/env python3

# Copyright (C) 2020-2026 The slip13 developers
#
# This file is part of slip13. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of slip13 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 derivation path.

A derivation path can be represented as:

- "m/13h/0'/1H/0/10" or "13h/0'/1H/0/10" string
- sequence of integer indexes (even a single int)
- bytes (multiples of 4-bytes little-endian index)
"""

from typing import List, Sequence, Union

from slip13.exceptions import Slip13ValueError

HARDENED = 0x80000000

# default hardening symbol among the possible ones: "h", "H", "'"
_HARDENING = "h"

DerPath = Union[str, Sequence[int], int, bytes]


def int_from_index_str(s: str) -> int:

    s = s.strip().lower()
    hardened = False
    if s and s[-1] in ("'", "h"):
        s = s[:-1]
        hardened = True

    try:
        index = int(s)
    except ValueError as e:
        raise Slip13ValueError(f"invalid index: '{s}'") from e
    if not 0 <= index < HARDENED:
        raise Slip13ValueError(f"invalid index: {index}")
    return index + (HARDENED if hardened else 0)


def str_from_index_int(i: int, hardening: str = _HARDENING) -> str:

    if hardening not in ("'", "h", "H"):
        raise Slip13ValueError(f"invalid hardening symbol: {hardening}")
    if not 0 <= i <= 0xFFFFFFFF:
        raise Slip13ValueError(f"invalid index: {i}")
    if i < HARDENED:
        return str(i)
    return str(i - HARDENED) + hardening


def _indexes_from_der_path_str(der_path: str) -> List[int]:

    steps = [x.strip().lower() for x in der_path.split("/")]
    if steps[0] == "m":
        steps = steps[1:]

    indexes = [int_from_index_str(s) for s in steps if s != ""]

    if len(indexes) > 255:
        raise Slip13ValueError(f"depth greater than 255: {len(indexes)}")
    return indexes


def indexes_from_der_path(der_path: DerPath) -> List[int]:
    """Return the list of integer indexes of a derivation path.

    String paths are case/blank/extra-slash insensitive
    (e.g. "M /13h / 0' /1H // 0/ 10 / ").
    """

    if isinstance(der_path, str):
        return _indexes_from_der_path_str(der_path)

    if isinstance(der_path, int):
        indexes = [der_path]
    elif isinstance(der_path, bytes):
        if len(der_path) % 4 != 0:
            err_msg = f"index are not a multiple of 4-bytes: {len(der_path)}"
            raise Slip13ValueError(err_msg)
        indexes = [
            int.from_bytes(der_path[n : n + 4], byteorder="little", signed=False)
            for n in range(0, len(der_path), 4)
        ]
    else:
        indexes = [int(i) for i in der_path]

    for i in indexes:
        if not 0 <= i <= 0xFFFFFFFF:
            raise Slip13ValueError(f"invalid index: {i}")
    return indexes


def str_from_der_path(der_path: DerPath, hardening: str = _HARDENING) -> str:
    indexes = indexes_from_der_path(der_path)
    result = "/".join(str_from_index_int(i, hardening) for i in indexes)
    return "m" + ("/" + result if result else "")


def bytes_from_der_path(der_path: DerPath) -> bytes:
    indexes = indexes_from_der_path(der_path)
    result = [i.to_bytes(4, byteorder="little", signed=False) for i in indexes]
    return b"".join(result)
