#!/usr/bin/env python3

# Copyright (C) 2020-2026 The slip13 developers
#
# This file is part of slip13. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of slip13 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SLIP-0010 Hierarchical Deterministic keys.

SLIP-0010 generalizes the BIP32 child key derivation to curves
other than secp256k1:
https://github.com/satoshilabs/slips/blob/master/slip-0010.md.

Each curve has its own master seed modifier (the HMAC key used to
derive the master key from the seed); moreover, when a derived
scalar is not a valid private key, the derivation is retried with
a different HMAC input instead of skipping to the next index.

On secp256k1 SLIP-0010 is the same as BIP32.

A key is made of:

- curve name
- depth in the derivation path
- index
- 32 bytes chain code
- 33 bytes key: compressed pub_key or [0x00][prv_key]
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from slip13.alias import Octets, Point
from slip13.ec.curve import Curve, mult, secp256k1, secp256r1
from slip13.ec.sec_point import bytes_from_point, point_from_octets
from slip13.exceptions import Slip13ValueError
from slip13.hashes import hmac_sha512
from slip13.slip10.der_path import HARDENED, DerPath, indexes_from_der_path
from slip13.utils import bytes_from_octets, hex_string

SLIP10_CURVES: Dict[str, Tuple[Curve, bytes]] = {
    "secp256k1": (secp256k1, b"Bitcoin seed"),
    "nist256p1": (secp256r1, b"Nist256p1 seed"),
}

_CURVE_ALIASES = {
    "bitcoin": "secp256k1",
    "secp256r1": "nist256p1",
    "p256": "nist256p1",
    "p-256": "nist256p1",
    "nist p-256": "nist256p1",
}


def curve_name(name: str) -> str:
    "Return the canonical SLIP-0010 name of a curve."

    name = name.strip().lower()
    name = _CURVE_ALIASES.get(name, name)
    if name not in SLIP10_CURVES:
        raise Slip13ValueError(f"unknown SLIP-0010 curve: '{name}'")
    return name


@dataclass(frozen=True)
class SLIP10KeyData:
    curve: str
    depth: int
    # index is an int, not bytes, to avoid any byteorder ambiguity
    index: int
    chain_code: bytes
    key: bytes

    def __post_init__(self) -> None:
        # the dataclass is frozen: normalize through object.__setattr__
        object.__setattr__(self, "curve", curve_name(self.curve))
        object.__setattr__(self, "chain_code", bytes_from_octets(self.chain_code))
        object.__setattr__(self, "key", bytes_from_octets(self.key))
        self.assert_valid()

    @property
    def ec(self) -> Curve:
        return SLIP10_CURVES[self.curve][0]

    @property
    def is_private(self) -> bool:
        return self.key[0] == 0

    @property
    def is_hardened(self) -> bool:
        return self.index >= HARDENED

    @property
    def is_root(self) -> bool:
        return self.depth == 0

    @property
    def prv_key_int(self) -> int:
        if not self.is_private:
            raise Slip13ValueError("not a private key")
        return int.from_bytes(self.key[1:], byteorder="big", signed=False)

    @property
    def pub_key_point(self) -> Point:
        if self.is_private:
            return mult(self.prv_key_int, ec=self.ec)
        return point_from_octets(self.key, self.ec)

    @property
    def pub_key(self) -> bytes:
        "Return the SEC compressed public key."
        if self.is_private:
            return bytes_from_point(self.pub_key_point, self.ec)
        return self.key

    def assert_valid(self) -> None:

        if len(self.chain_code) != 32:
            err_msg = "invalid chain_code length: "
            err_msg += f"{len(self.chain_code)} bytes instead of 32"
            raise Slip13ValueError(err_msg)
        if len(self.key) != 33:
            raise Slip13ValueError(
                f"invalid key length: {len(self.key)} bytes instead of 33"
            )

        if not 0 <= self.index <= 0xFFFFFFFF:
            raise Slip13ValueError(f"invalid index: {self.index}")
        if not 0 <= self.depth <= 255:
            raise Slip13ValueError(f"invalid depth: {self.depth}")
        if self.depth == 0 and self.index != 0:
            raise Slip13ValueError(f"zero depth with non-zero index: {self.index}")

        if self.is_private:
            q = self.prv_key_int
            if not 0 < q < self.ec.n:
                raise Slip13ValueError(
                    f"invalid private key not in 1..n-1: {hex_string(q)}"
                )
        elif self.key[0] in (2, 3):
            try:
                point_from_octets(self.key, self.ec)
            except Slip13ValueError as e:
                err_msg = f"invalid public key: 0x{self.key.hex()}"
                raise Slip13ValueError(err_msg) from e
        else:
            err_msg = f"invalid key prefix: 0x{self.key[:1].hex()}"
            raise Slip13ValueError(err_msg)

    def neutered(self) -> "SLIP10KeyData":
        """Neutered Derivation (ND).

        Return the public key corresponding to a private key
        (“neutered” as it removes the ability to sign).
        """
        if not self.is_private:
            return self
        return SLIP10KeyData(
            self.curve, self.depth, self.index, self.chain_code, self.pub_key
        )

    def ckd(self, index: int) -> "SLIP10KeyData":
        "Child Key Derivation: return the child key at the given index."

        if not 0 <= index <= 0xFFFFFFFF:
            raise Slip13ValueError(f"invalid index: {index}")
        if self.depth == 255:
            raise Slip13ValueError("final depth greater than 255")

        ec = self.ec
        index_bytes = index.to_bytes(4, byteorder="big", signed=False)
        if self.is_private:
            q = self.prv_key_int
            if index >= HARDENED:
                data = self.key + index_bytes
            else:
                data = bytes_from_point(mult(q, ec=ec), ec) + index_bytes
            while True:
                hmac_ = hmac_sha512(self.chain_code, data)
                offset = int.from_bytes(hmac_[:32], byteorder="big", signed=False)
                child_q = (q + offset) % ec.n
                if offset < ec.n and child_q != 0:
                    break
                data = b"\x01" + hmac_[32:] + index_bytes
            key = b"\x00" + child_q.to_bytes(32, byteorder="big", signed=False)
        else:
            if index >= HARDENED:
                raise Slip13ValueError("invalid hardened derivation from public key")
            Q = point_from_octets(self.key, ec)
            data = self.key + index_bytes
            while True:
                hmac_ = hmac_sha512(self.chain_code, data)
                offset = int.from_bytes(hmac_[:32], byteorder="big", signed=False)
                if offset < ec.n:
                    child_Q = ec.add_aff(Q, mult(offset, ec=ec))
                    if child_Q[1] != 0:
                        break
                data = b"\x01" + hmac_[32:] + index_bytes
            key = bytes_from_point(child_Q, ec)

        return SLIP10KeyData(self.curve, self.depth + 1, index, hmac_[32:], key)

    def derive_hardened_child(self, index: int) -> "SLIP10KeyData":
        "Return the hardened child key at the given (already hardened) index."

        if index < HARDENED:
            raise Slip13ValueError(f"not a hardened index: {index}")
        return self.ckd(index)


def rootkey_from_seed(seed: Octets, curve: str = "secp256k1") -> SLIP10KeyData:
    """Return the SLIP-0010 master private key from seed."""

    seed = bytes_from_octets(seed)
    bitlenght = len(seed) * 8
    if bitlenght < 128:
        raise Slip13ValueError(
            f"too few bits for seed: {bitlenght} in '{hex_string(seed)}'"
        )
    if bitlenght > 512:
        raise Slip13ValueError(
            f"too many bits for seed: {bitlenght} in '{hex_string(seed)}'"
        )

    curve = curve_name(curve)
    ec, modifier = SLIP10_CURVES[curve]
    hmac_ = hmac_sha512(modifier, seed)
    q = int.from_bytes(hmac_[:32], byteorder="big", signed=False)
    while not 0 < q < ec.n:
        hmac_ = hmac_sha512(modifier, hmac_)
        q = int.from_bytes(hmac_[:32], byteorder="big", signed=False)

    return SLIP10KeyData(
        curve=curve,
        depth=0,
        index=0,
        chain_code=hmac_[32:],
        key=b"\x00" + hmac_[:32],
    )


def derive(key: SLIP10KeyData, der_path: DerPath) -> SLIP10KeyData:
    """Derive a SLIP-0010 key across a path spanning multiple depth levels.

    Valid DerPath examples:

    - string like "m/13h/0'/1H/0/10"
    - iterable integer indexes
    - one single integer index
    - bytes in multiples of the 4-bytes index
    """

    indexes = indexes_from_der_path(der_path)

    final_depth = key.depth + len(indexes)
    if final_depth > 255:
        raise Slip13ValueError(f"final depth greater than 255: {final_depth}")

    for index in indexes:
        key = key.ckd(index)
    return key
