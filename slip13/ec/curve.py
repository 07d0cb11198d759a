#!/usr/bin/env python3

# Copyright (C) 2020-2026 The slip13 developers
#
# This file is part of slip13. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of slip13 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve class and scalar multiplication.

A Curve is the cyclic subgroup of prime order n, generated by G,
of the points of an elliptic curve over Fp:
the set of points (x, y) that are solutions to the
Weierstrass equation y^2 = x^3 + a*x + b,
together with the point at infinity INF.

Only the curves used by SLIP-0010 key derivation are provided:

* secp256k1, SEC 2 v.2 http://www.secg.org/sec2-v2.pdf
* secp256r1 (a.k.a. NIST P-256 or nist256p1), FIPS PUB 186-4
"""

from math import ceil, sqrt
from typing import Dict, Optional

from slip13.alias import INF, INFJ, Integer, JacPoint, Point
from slip13.ec import libsecp256k1
from slip13.ec.number_theory import mod_inv, mod_sqrt
from slip13.exceptions import Slip13ValueError
from slip13.utils import hex_string, int_from_integer

HEX_THRESHOLD = 0xFFFFFFFF


def _fmt(i: int) -> str:
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"


def jac_from_aff(Q: Point) -> JacPoint:
    """Return the Jacobian representation of the affine point.

    The input point is assumed to be on curve.
    """
    return Q[0], Q[1], 1 if Q[1] else 0


class Curve:
    "Prime order subgroup of the points of an elliptic curve over Fp."

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Point,
        n: Integer,
        h: int,
        weakness_check: bool = True,
    ) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)
        n = int_from_integer(n)

        # 1. p must be prime (Fermat test)
        if p < 2 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise Slip13ValueError(f"p is not prime: {_fmt(p)}")
        self.p = p
        self.p_size = ceil(p.bit_length() / 8)

        # 2. a and b must be in [0, p-1]
        if not 0 <= a < p:
            raise Slip13ValueError(f"a not in 0..p-1: {_fmt(a)}")
        if not 0 <= b < p:
            raise Slip13ValueError(f"b not in 0..p-1: {_fmt(b)}")

        # 3. 4*a^3 + 27*b^2 ≠ 0 (mod p)
        if (4 * a * a * a + 27 * b * b) % p == 0:
            raise Slip13ValueError("zero discriminant")
        self._a = a
        self._b = b

        # 4. G must be on curve
        if len(G) != 2:
            raise Slip13ValueError("generator must a be a sequence[int, int]")
        self.G = int_from_integer(G[0]), int_from_integer(G[1])
        if self.G[1] == 0:
            raise Slip13ValueError("INF point cannot be a generator")
        if not self.is_on_curve(self.G):
            raise Slip13ValueError("generator is not on the curve")
        self.GJ = self.G[0], self.G[1], 1

        # 5. n must be prime and within Hasse bounds
        if n < 2 or n % 2 == 0 or pow(2, n - 1, n) != 1:
            raise Slip13ValueError(f"n is not prime: {_fmt(n)}")
        delta = int(2 * sqrt(p))
        if h < 2 and not p + 1 - delta <= n <= p + 1 + delta:
            raise Slip13ValueError(f"n not in p+1-delta..p+1+delta: {_fmt(n)}")
        self.n = n
        self.n_size = (n.bit_length() + 7) // 8

        # 6. check cofactor
        exp_h = int(1 / n + delta / n + p / n)
        if h != exp_h:
            raise Slip13ValueError(f"invalid h: {h}, expected {exp_h}")
        self.h = h

        # 7. nG = INF
        if self.aff_from_jac(mult_jac(n, self.GJ, self))[1] != 0:
            raise Slip13ValueError(f"n is not the group order: {_fmt(n)}")

        # 8. n ≠ p and p^i % n ≠ 1 for all 1≤i<100
        if n == p:
            raise Slip13ValueError(f"n=p weak curve: {_fmt(n)}")
        if weakness_check:
            for i in range(1, 100):
                if pow(p, i, n) == 1:
                    raise UserWarning("weak curve")

    def __str__(self) -> str:
        result = "Curve"
        result += f"\n p   = {_fmt(self.p)}"
        result += f"\n a   = {_fmt(self._a)}"
        result += f"\n b   = {_fmt(self._b)}"
        result += f"\n x_G = {_fmt(self.G[0])}"
        result += f"\n y_G = {_fmt(self.G[1])}"
        result += f"\n n   = {_fmt(self.n)}"
        result += f"\n h   = {self.h}"
        return result

    def __repr__(self) -> str:
        result = f"Curve({_fmt(self.p)}, {_fmt(self._a)}, {_fmt(self._b)}"
        result += f", ({_fmt(self.G[0])}, {_fmt(self.G[1])})"
        result += f", {_fmt(self.n)}, {self.h})"
        return result

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        # % self.p accounts for INF, so that negate(INF) = INF
        return Q[0], (self.p - Q[1]) % self.p

    def aff_from_jac(self, Q: JacPoint) -> Point:
        # point is assumed to be on curve
        if Q[2] == 0:  # Infinity point in Jacobian coordinates
            return INF

        Z2 = Q[2] * Q[2]
        x = Q[0] * mod_inv(Z2, self.p)
        y = Q[1] * mod_inv(Z2 * Q[2], self.p)
        return x % self.p, y % self.p

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """
        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve
        if R[1] == 0:  # Infinity point in affine coordinates
            return Q
        if Q[1] == 0:
            return R

        if R[0] == Q[0]:
            if R[1] == Q[1]:  # point doubling
                return self.double_aff(R)
            # opposite points
            return INF

        lam = (R[1] - Q[1]) * mod_inv(R[0] - Q[0], self.p)
        x = lam * lam - Q[0] - R[0]
        y = lam * (Q[0] - x) - Q[1]
        return x % self.p, y % self.p

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve
        if Q[1] == 0:
            return INF

        lam = (3 * Q[0] * Q[0] + self._a) * mod_inv(2 * Q[1], self.p)
        x = lam * lam - Q[0] - Q[0]
        y = lam * (Q[0] - x) - Q[1]
        return x % self.p, y % self.p

    def add_jac(self, Q: JacPoint, R: JacPoint) -> JacPoint:
        # points are assumed to be on curve
        if Q[2] == 0:
            return R
        if R[2] == 0:
            return Q

        RZ2 = R[2] * R[2]
        RZ3 = RZ2 * R[2]
        QZ2 = Q[2] * Q[2]
        QZ3 = QZ2 * Q[2]

        M = Q[0] * RZ2 % self.p
        N = R[0] * QZ2 % self.p
        T = Q[1] * RZ3 % self.p
        U = R[1] * QZ3 % self.p

        if M == N:  # same affine x
            if T == U:
                return self.double_jac(Q)
            return INFJ

        W = U - T
        V = N - M
        V2 = V * V
        V3 = V2 * V
        MV2 = M * V2

        X = (W * W - V3 - 2 * MV2) % self.p
        Y = (W * (MV2 - X) - T * V3) % self.p
        Z = (V * Q[2] * R[2]) % self.p
        return X, Y, Z

    def double_jac(self, Q: JacPoint) -> JacPoint:
        # point is assumed to be on curve
        QZ2 = Q[2] * Q[2]
        QY2 = Q[1] * Q[1]
        W = 3 * Q[0] * Q[0] + self._a * QZ2 * QZ2
        V = 4 * Q[0] * QY2
        X = W * W - 2 * V
        Y = W * (V - X) - 8 * QY2 * QY2
        Z = 2 * Q[1] * Q[2]
        return X % self.p, Y % self.p, Z % self.p

    def _y2(self, x: int) -> int:
        # if sqrt(y2) does not exist, then x is not valid:
        # this is why the method is private
        return ((x * x + self._a) * x + self._b) % self.p

    def y(self, x: int) -> int:
        """Return the y coordinate from x, as in (x, y)."""
        if not 0 <= x < self.p:
            raise Slip13ValueError(f"x-coordinate not in 0..p-1: {_fmt(x)}")
        try:
            return mod_sqrt(self._y2(x), self.p)
        except Slip13ValueError as e:
            raise Slip13ValueError(f"invalid x-coordinate: {_fmt(x)}") from e

    def y_even(self, x: int) -> int:
        """Return the even affine y-coordinate associated to x."""
        root = self.y(x)
        return self.p - root if root % 2 else root

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise Slip13ValueError("point not on curve")

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve."""
        if len(Q) != 2:
            raise Slip13ValueError("point must be a tuple[int, int]")
        if Q[1] == 0:  # Infinity point in affine coordinates
            return True
        if not 0 < Q[1] < self.p:
            raise Slip13ValueError(f"y-coordinate not in 1..p-1: {_fmt(Q[1])}")
        return self._y2(Q[0]) == (Q[1] * Q[1] % self.p)


def mult_jac(m: int, Q: JacPoint, ec: Curve) -> JacPoint:
    """Scalar multiplication of a curve point in Jacobian coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    Jacobian coordinates.

    The input point is assumed to be on curve and
    the m coefficient is assumed to have been reduced mod n.
    """

    if m < 0:
        raise Slip13ValueError(f"negative m: {hex(m)}")

    R = INFJ  # running result
    while m > 0:
        if m & 1:
            R = ec.add_jac(R, Q)
        m >>= 1
        Q = ec.double_jac(Q)
    return R


# bitcoin curve
secp256k1 = Curve(
    2**256 - 2**32 - 977,
    0,
    7,
    (
        0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
        0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
    ),
    0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
    1,
)

# NIST P-256
secp256r1 = Curve(
    2**256 - 2**224 + 2**192 + 2**96 - 1,
    0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFC,
    0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
    (
        0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296,
        0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5,
    ),
    0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
    1,
)

CURVES: Dict[str, Curve] = {"secp256k1": secp256k1, "secp256r1": secp256r1}


def mult(m: Integer, Q: Optional[Point] = None, ec: Curve = secp256k1) -> Point:
    """Elliptic curve scalar multiplication.

    Q defaults to the curve generator;
    m is reduced mod n before the multiplication.
    """
    m = int_from_integer(m) % ec.n
    if Q is None:
        if ec is secp256k1 and libsecp256k1.is_available():
            return libsecp256k1.mult(m)
        QJ = ec.GJ
    else:
        ec.require_on_curve(Q)
        QJ = jac_from_aff(Q)
    R = mult_jac(m, QJ, ec)
    return ec.aff_from_jac(R)
