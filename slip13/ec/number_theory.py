#!/usr/bin/env python3

# Copyright (C) 2020-2026 The slip13 developers
#
# This file is part of slip13. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of slip13 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic functions needed by the elliptic curve group law.

The square root implementation follows
https://codereview.stackexchange.com/questions/43210/tonelli-shanks-algorithm-implementation-of-prime-modular-square-root/43267
"""

from slip13.exceptions import Slip13ValueError
from slip13.utils import hex_string


def _fmt(i: int) -> str:
    return f"'{hex_string(i)}'" if i > 0xFFFFFFFF else f"{i}"


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime."""

    a %= m
    try:
        return pow(a, -1, m)
    except ValueError as e:
        raise Slip13ValueError(f"no inverse for {_fmt(a)} mod {_fmt(m)}") from e


def legendre_symbol(a: int, p: int) -> int:
    """Compute the Legendre symbol a|p using Euler's criterion.

    It returns 1 if a has a square root modulo p, -1 otherwise
    (0 if p divides a).
    """

    ls = pow(a, p >> 1, p)
    return -1 if ls == p - 1 else ls


def mod_sqrt(a: int, p: int) -> int:
    """Return a quadratic residue (mod p) of a; p must be a prime.

    Solve the equation x^2 = a mod p and return x.
    Note that p - x is also a root.

    Shortcuts are used for p = 3 mod 4 (e.g. secp256k1, secp256r1)
    and p = 5 mod 8; otherwise the Tonelli-Shanks algorithm is used.
    """

    a %= p

    if p % 4 == 3:
        r = pow(a, (p >> 2) + 1, p)
    elif p % 8 == 5:
        r = pow(a, (p >> 3) + 1, p)
        if r * r % p == a:
            return r
        r = r * pow(2, p >> 2, p) % p
    else:
        return tonelli(a, p)

    if r * r % p != a:
        raise Slip13ValueError(f"no root for {_fmt(a)} mod {_fmt(p)}")
    return r


def tonelli(a: int, p: int) -> int:
    """Return a quadratic residue (mod p) of a; p must be a prime.

    The Tonelli-Shanks algorithm is used.
    """

    a %= p
    if a == 0 or p == 2:
        return a

    if legendre_symbol(a, p) != 1:
        raise Slip13ValueError(f"no root for {_fmt(a)} mod {_fmt(p)}")

    # p - 1 = q * 2^s, with q odd
    q, s = p - 1, 0
    while q & 1 == 0:
        s += 1
        q >>= 1
    if s == 1:
        return pow(a, (p + 1) // 4, p)

    # a quadratic non residue modulo p
    z = 2
    while legendre_symbol(z, p) != -1:
        z += 1
    c = pow(z, q, p)
    r = pow(a, (q + 1) // 2, p)
    t = pow(a, q, p)
    while t != 1:
        # lowest i such that t^(2^i) = 1
        i, t2i = 1, t * t % p
        while t2i != 1:
            i += 1
            t2i = t2i * t2i % p
        b = pow(c, 1 << (s - i - 1), p)
        r = r * b % p
        c = b * b % p
        t = t * c % p
        s = i

    return r
