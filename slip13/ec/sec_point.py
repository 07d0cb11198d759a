#!/usr/bin/env python3

# Copyright (C) 2020-2026 The slip13 developers
#
# This file is part of slip13. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of slip13 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC compressed/uncompressed point representation."""

from slip13.alias import Octets, Point
from slip13.ec.curve import Curve, secp256k1
from slip13.exceptions import Slip13ValueError
from slip13.utils import bytes_from_octets, hex_string


def bytes_from_point(Q: Point, ec: Curve = secp256k1, compressed: bool = True) -> bytes:
    """Return a point as compressed/uncompressed octet sequence.

    Return a point as compressed (0x02, 0x03) or uncompressed (0x04)
    octet sequence, according to SEC 1 v.2, section 2.3.3.
    """

    ec.require_on_curve(Q)

    if Q[1] == 0:  # infinity point in affine coordinates
        raise Slip13ValueError("no bytes representation for infinity point")

    bytes_ = Q[0].to_bytes(ec.p_size, byteorder="big", signed=False)
    if compressed:
        return (b"\x03" if (Q[1] & 1) else b"\x02") + bytes_

    return b"\x04" + bytes_ + Q[1].to_bytes(ec.p_size, byteorder="big", signed=False)


def point_from_octets(pub_key: Octets, ec: Curve = secp256k1) -> Point:
    """Return a tuple (x_Q, y_Q) that belongs to the curve.

    According to SEC 1 v.2, section 2.3.4.
    """

    pub_key = bytes_from_octets(pub_key, (ec.p_size + 1, 2 * ec.p_size + 1))

    if pub_key[0] in (0x02, 0x03):
        if len(pub_key) != ec.p_size + 1:
            err_msg = "invalid size for compressed point: "
            err_msg += f"{len(pub_key)} instead of {ec.p_size + 1}"
            raise Slip13ValueError(err_msg)
        x_Q = int.from_bytes(pub_key[1:], byteorder="big", signed=False)
        try:
            y_Q = ec.y_even(x_Q)
        except Slip13ValueError as e:
            msg = f"invalid x-coordinate: '{hex_string(x_Q)}'"
            raise Slip13ValueError(msg) from e
        return x_Q, y_Q if pub_key[0] == 0x02 else ec.p - y_Q

    if pub_key[0] == 0x04:
        if len(pub_key) != 2 * ec.p_size + 1:
            err_msg = "invalid size for uncompressed point: "
            err_msg += f"{len(pub_key)} instead of {2 * ec.p_size + 1}"
            raise Slip13ValueError(err_msg)
        x_Q = int.from_bytes(pub_key[1 : ec.p_size + 1], byteorder="big", signed=False)
        Q = x_Q, int.from_bytes(pub_key[ec.p_size + 1 :], byteorder="big", signed=False)
        if Q[1] == 0:
            raise Slip13ValueError("no bytes representation for infinity point")
        if ec.is_on_curve(Q):
            return Q
        raise Slip13ValueError(f"point not on curve: {Q}")

    raise Slip13ValueError(f"not a point: {pub_key!r}")
