#!/usr/bin/env python3

# Copyright (C) 2020-2026 The slip13 developers
#
# This file is part of slip13. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of slip13 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP39 mnemonic to seed conversion.

https://github.com/bitcoin/bips/blob/master/bip-0039.mediawiki.

The seed is obtained with PBKDF2, using:

* password = mnemonic sentence (UTF-8 NFKD)
* salt = "mnemonic" + passphrase (UTF-8 NFKD)
* iteration count = 2048
* pseudo-random function = HMAC-SHA512
* derived key length = 512 bits (64 bytes)

Mnemonic generation and checksum validation need the BIP39
word-lists and are not provided here.
"""

import unicodedata
from hashlib import pbkdf2_hmac

from slip13.slip10.slip10 import SLIP10KeyData, rootkey_from_seed

Mnemonic = str


def seed_from_mnemonic(mnemonic: Mnemonic, passphrase: str = "") -> bytes:
    """Return the seed from the provided BIP39 mnemonic sentence."""

    # clean up mnemonic from spurious whitespaces
    mnemonic = " ".join(mnemonic.split())

    password = unicodedata.normalize("NFKD", mnemonic).encode("utf-8")
    salt = unicodedata.normalize("NFKD", "mnemonic" + passphrase).encode("utf-8")
    return pbkdf2_hmac("sha512", password, salt, 2048, 64)


def rootkey_from_mnemonic(
    mnemonic: Mnemonic, passphrase: str = "", curve: str = "secp256k1"
) -> SLIP10KeyData:
    "Return the SLIP-0010 master private key from BIP39 mnemonic."

    seed = seed_from_mnemonic(mnemonic, passphrase)
    return rootkey_from_seed(seed, curve)
