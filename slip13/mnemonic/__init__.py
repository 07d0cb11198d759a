#!/usr/bin/env python3

# Copyright (C) 2020-2026 The slip13 developers
#
# This file is part of slip13. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of slip13 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module slip13.mnemonic."""

from slip13.mnemonic.bip39 import Mnemonic, rootkey_from_mnemonic, seed_from_mnemonic

__all__ = [
    "Mnemonic",
    "rootkey_from_mnemonic",
    "seed_from_mnemonic",
]
