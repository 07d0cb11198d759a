#!/usr/bin/env python3

# Copyright (C) 2020-2026 The slip13 developers
#
# This file is part of slip13. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of slip13 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

from slip13.identity import der_path_from_uri, derive
from slip13.mnemonic import rootkey_from_mnemonic

mnemonic = "alcohol woman abuse must during monitor noble actual mixed trade anger aisle"

print("\n*** Mnemonic:")
print(mnemonic)

for curve, uri, index in (
    ("secp256k1", "https://satoshi@bitcoin.org/login", 0),
    ("secp256k1", "ftp://satoshi@bitcoin.org:2323/pub", 3),
    ("nist256p1", "ssh://satoshi@bitcoin.org", 47),
):
    print(f"\n*** {curve}: {uri} ({index})")

    print("1. Master key")
    master_key = rootkey_from_mnemonic(mnemonic, "", curve)
    print(f"  PubKey: {master_key.pub_key.hex().upper()}")

    print("2. Derivation path")
    print(f"  {der_path_from_uri(uri, index)}")

    print("3. Identity key")
    key = derive(master_key, uri, index)
    print(f"  prvkey: {hex(key.prv_key_int).upper()}")
    print(f"  PubKey: {key.pub_key.hex().upper()}")
