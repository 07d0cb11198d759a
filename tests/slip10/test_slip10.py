#!/usr/bin/env python3

# Copyright (C) 2020-2026 The slip13 developers
#
# This file is part of slip13. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of slip13 including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `slip13.slip10` module."

import pytest

from slip13.ec import bytes_from_point, mult, secp256k1, secp256r1
from slip13.exceptions import Slip13ValueError
from slip13.slip10 import (
    HARDENED,
    SLIP10KeyData,
    curve_name,
    derive,
    rootkey_from_seed,
)

SEED_1 = "000102030405060708090a0b0c0d0e0f"
SEED_2 = (
    "fffcf9f6f3f0edeae7e4e1dedbd8d5d2cfccc9c6c3c0bdbab7b4b1aeaba8a5a2"
    "9f9c999693908d8a8784817e7b7875726f6c696663605d5a5754514e4b484542"
)

# https://github.com/satoshilabs/slips/blob/master/slip-0010.md#test-vectors
# path, chain code, private key, public key
SLIP10_VECTORS = [
    (
        "secp256k1",
        SEED_1,
        [
            (
                "m",
                "873dff81c02f525623fd1fe5167eac3a55a049de3d314bb42ee227ffed37d508",
                "e8f32e723decf4051aefac8e2c93c9c5b214313817cdb01a1494b917c8436b35",
                "0339a36013301597daef41fbe593a02cc513d0b55527ec2df1050e2e8ff49c85c2",
            ),
            (
                "m/0'",
                "47fdacbd0f1097043b78c63c20c34ef4ed9a111d980047ad16282c7ae6236141",
                "edb2e14f9ee77d26dd93b4ecede8d16ed408ce149b6cd80b0715a2d911a0afea",
                "035a784662a4a20a65bf6aab9ae98a6c068a81c52e4b032c0fb5400c706cfccc56",
            ),
            (
                "m/0'/1",
                "2a7857631386ba23dacac34180dd1983734e444fdbf774041578e9b6adb37c19",
                "3c6cb8d0f6a264c91ea8b5030fadaa8e538b020f0a387421a12de9319dc93368",
                "03501e454bf00751f24b1b489aa925215d66af2234e3891c3b21a52bedb3cd711c",
            ),
            (
                "m/0'/1/2'",
                "04466b9cc8e161e966409ca52986c584f07e9dc81f735db683c3ff6ec7b1503f",
                "cbce0d719ecf7431d88e6a89fa1483e02e35092af60c042b1df2ff59fa424dca",
                "0357bfe1e341d01c69fe5654309956cbea516822fba8a601743a012a7896ee8dc2",
            ),
            (
                "m/0'/1/2'/2",
                "cfb71883f01676f587d023cc53a35bc7f88f724b1f8c2892ac1275ac822a3edd",
                "0f479245fb19a38a1954c5c7c0ebab2f9bdfd96a17563ef28a6a4b1a2a764ef4",
                "02e8445082a72f29b75ca48748a914df60622a609cacfce8ed0e35804560741d29",
            ),
            (
                "m/0'/1/2'/2/1000000000",
                "c783e67b921d2beb8f6b389cc646d7263b4145701dadd2161548a8b078e65e9e",
                "471b76e389e528d6de6d816857e012c5455051cad6660850e58372a6c3e6e7c8",
                "022a471424da5e657499d1ff51cb43c47481a03b1e77f951fe64cec9f5a48f7011",
            ),
        ],
    ),
    (
        "nist256p1",
        SEED_1,
        [
            (
                "m",
                "beeb672fe4621673f722f38529c07392fecaa61015c80c34f29ce8b41b3cb6ea",
                "612091aaa12e22dd2abef664f8a01a82cae99ad7441b7ef8110424915c268bc2",
                "0266874dc6ade47b3ecd096745ca09bcd29638dd52c2c12117b11ed3e458cfa9e8",
            ),
            (
                "m/0'",
                "3460cea53e6a6bb5fb391eeef3237ffd8724bf0a40e94943c98b83825342ee11",
                "6939694369114c67917a182c59ddb8cafc3004e63ca5d3b84403ba8613debc0c",
                "0384610f5ecffe8fda089363a41f56a5c7ffc1d81b59a612d0d649b2d22355590c",
            ),
            (
                "m/0'/1",
                "4187afff1aafa8445010097fb99d23aee9f599450c7bd140b6826ac22ba21d0c",
                "284e9d38d07d21e4e281b645089a94f4cf5a5a81369acf151a1c3a57f18b2129",
                "03526c63f8d0b4bbbf9c80df553fe66742df4676b241dabefdef67733e070f6844",
            ),
            (
                "m/0'/1/2'",
                "98c7514f562e64e74170cc3cf304ee1ce54d6b6da4f880f313e8204c2a185318",
                "694596e8a54f252c960eb771a3c41e7e32496d03b954aeb90f61635b8e092aa7",
                "0359cf160040778a4b14c5f4d7b76e327ccc8c4a6086dd9451b7482b5a4972dda0",
            ),
            (
                "m/0'/1/2'/2",
                "ba96f776a5c3907d7fd48bde5620ee374d4acfd540378476019eab70790c63a0",
                "5996c37fd3dd2679039b23ed6f70b506c6b56b3cb5e424681fb0fa64caf82aaa",
                "029f871f4cb9e1c97f9f4de9ccd0d4a2f2a171110c61178f84430062230833ff20",
            ),
            (
                "m/0'/1/2'/2/1000000000",
                "b9b7b82d326bb9cb5b5b121066feea4eb93d5241103c9e7a18aad40f1dde8059",
                "21c4f269ef0a5fd1badf47eeacebeeaa3de22eb8e5b0adcd0f27dd99d34d0119",
                "02216cd26d31147f72427a453c443ed2cde8a1e53c9cc44e5ddf739725413fe3f4",
            ),
        ],
    ),
    (
        "secp256k1",
        SEED_2,
        [
            (
                "m",
                "60499f801b896d83179a4374aeb7822aaeaceaa0db1f85ee3e904c4defbd9689",
                "4b03d6fc340455b363f51020ad3ecca4f0850280cf436c70c727923f6db46c3e",
                "03cbcaa9c98c877a26977d00825c956a238e8dddfbd322cce4f74b0b5bd6ace4a7",
            ),
            (
                "m/0",
                "f0909affaa7ee7abe5dd4e100598d4dc53cd709d5a5c2cac40e7412f232f7c9c",
                "abe74a98f6c7eabee0428f53798f0ab8aa1bd37873999041703c742f15ac7e1e",
                "02fc9e5af0ac8d9b3cecfe2a888e2117ba3d089d8585886c9c826b6b22a98d12ea",
            ),
            (
                "m/0/2147483647'",
                "be17a268474a6bb9c61e1d720cf6215e2a88c5406c4aee7b38547f585c9a37d9",
                "877c779ad9687164e9c2f4f0f4ff0340814392330693ce95a58fe18fd52e6e93",
                "03c01e7425647bdefa82b12d9bad5e3e6865bee0502694b94ca58b666abc0a5c3b",
            ),
            (
                "m/0/2147483647'/1",
                "f366f48f1ea9f2d1d3fe958c95ca84ea18e4c4ddb9366c336c927eb246fb38cb",
                "704addf544a06e5ee4bea37098463c23613da32020d604506da8c0518e1da4b7",
                "03a7d1d856deb74c508e05031f9895dab54626251b3806e16b4bd12e781a7df5b9",
            ),
            (
                "m/0/2147483647'/1/2147483646'",
                "637807030d55d01f9a0cb3a7839515d796bd07706386a6eddf06cc29a65a0e29",
                "f1c7c871a54a804afe328b4c83a1c33b8e5ff48f5087273f04efa83b247d6a2d",
                "02d2b36900396c9282fa14628566582f206a5dd0bcc8d5e892611806cafb0301f0",
            ),
            (
                "m/0/2147483647'/1/2147483646'/2",
                "9452b549be8cea3ecb7a84bec10dcfd94afe4d129ebfd3b3cb58eedf394ed271",
                "bb7d39bdb83ecf58f2fd82b6d918341cbef428661ef01ab97c28a4842125ac23",
                "024d902e1a2fc7a8755ab5b694c575fce742c48d9ff192e63df5193e4c7afe1f9c",
            ),
        ],
    ),
    (
        "nist256p1",
        SEED_2,
        [
            (
                "m",
                "96cd4465a9644e31528eda3592aa35eb39a9527769ce1855beafc1b81055e75d",
                "eaa31c2e46ca2962227cf21d73a7ef0ce8b31c756897521eb6c7b39796633357",
                "02c9e16154474b3ed5b38218bb0463e008f89ee03e62d22fdcc8014beab25b48fa",
            ),
            (
                "m/0",
                "84e9c258bb8557a40e0d041115b376dd55eda99c0042ce29e81ebe4efed9b86a",
                "d7d065f63a62624888500cdb4f88b6d59c2927fee9e6d0cdff9cad555884df6e",
                "039b6df4bece7b6c81e2adfeea4bcf5c8c8a6e40ea7ffa3cf6e8494c61a1fc82cc",
            ),
            (
                "m/0/2147483647'",
                "f235b2bc5c04606ca9c30027a84f353acf4e4683edbd11f635d0dcc1cd106ea6",
                "96d2ec9316746a75e7793684ed01e3d51194d81a42a3276858a5b7376d4b94b9",
                "02f89c5deb1cae4fedc9905f98ae6cbf6cbab120d8cb85d5bd9a91a72f4c068c76",
            ),
            (
                "m/0/2147483647'/1",
                "7c0b833106235e452eba79d2bdd58d4086e663bc8cc55e9773d2b5eeda313f3b",
                "974f9096ea6873a915910e82b29d7c338542ccde39d2064d1cc228f371542bbc",
                "03abe0ad54c97c1d654c1852dfdc32d6d3e487e75fa16f0fd6304b9ceae4220c64",
            ),
            (
                "m/0/2147483647'/1/2147483646'",
                "5794e616eadaf33413aa309318a26ee0fd5163b70466de7a4512fd4b1a5c9e6a",
                "da29649bbfaff095cd43819eda9a7be74236539a29094cd8336b07ed8d4eff63",
                "03cb8cb067d248691808cd6b5a5a06b48e34ebac4d965cba33e6dc46fe13d9b933",
            ),
            (
                "m/0/2147483647'/1/2147483646'/2",
                "3bfb29ee8ac4484f09db09c2079b520ea5616df7820f071a20320366fbe226a7",
                "bb0a77ba01cc31d77205d51d08bd313b979a71ef4de9b062f8958297e746bd67",
                "020ee02e18967237cf62672983b253ee62fa4dd431f8243bfeccdf39dbe181387f",
            ),
        ],
    ),
    # derivation retry
    (
        "nist256p1",
        SEED_1,
        [
            (
                "m/28578'",
                "e94c8ebe30c2250a14713212f6449b20f3329105ea15b652ca5bdfc68f6c65c2",
                "06f0db126f023755d0b8d86d4591718a5210dd8d024e3e14b6159d63f53aa669",
                "02519b5554a4872e8c9c1c847115363051ec43e93400e030ba3c36b52a3e70a5b7",
            ),
            (
                "m/28578'/33941",
                "9e87fe95031f14736774cd82f25fd885065cb7c358c1edf813c72af535e83071",
                "092154eed4af83e078ff9b84322015aefe5769e31270f62c3f66c33888335f3a",
                "0235bfee614c0d5b2cae260000bb1d0d84b270099ad790022c1ae0b2e782efe120",
            ),
        ],
    ),
    # seed retry
    (
        "nist256p1",
        "a7305bc8df8d0951f0cb224c0e95d7707cbdf2c6ce7e8d481fec69c7ff5e9446",
        [
            (
                "m",
                "7762f9729fed06121fd13f326884c82f59aa95c57ac492ce8c9654e60efd130c",
                "3b8c18469a4634517d6d0b65448f8e6c62091b45540a1743c5846be55d47d88f",
                "0383619fadcde31063d8c5cb00dbfe1713f3e6fa169d8541a798752a1c1ca0cb20",
            ),
        ],
    ),
]


def test_slip10_vectors() -> None:
    for curve, seed, keys in SLIP10_VECTORS:
        rootkey = rootkey_from_seed(seed, curve)
        assert rootkey.is_root
        for der_path, chain_code, prv_key, pub_key in keys:
            key = derive(rootkey, der_path)
            assert key.chain_code.hex() == chain_code, f"{curve} {der_path}"
            assert key.key.hex() == "00" + prv_key, f"{curve} {der_path}"
            assert key.pub_key.hex() == pub_key, f"{curve} {der_path}"
            assert key.neutered().key.hex() == pub_key
            assert key.depth == der_path.count("/")
            assert key.is_hardened == der_path.endswith("'")


def test_public_derivation() -> None:
    for curve in ("secp256k1", "nist256p1"):
        rootkey = rootkey_from_seed(SEED_2, curve)
        # private derivation, then neutering
        xprv = derive(rootkey, "m/0/2147483647'/1")
        # public derivation, from a neutered parent
        xpub = derive(derive(rootkey, "m/0/2147483647'").neutered(), "m/1")
        assert not xpub.is_private
        assert xpub == xprv.neutered()
        assert xpub.neutered() == xpub

    # the retry rule is also applied to public derivation
    rootkey = rootkey_from_seed(SEED_1, "nist256p1")
    xpub = derive(rootkey, "m/28578'").neutered().ckd(33941)
    assert xpub == derive(rootkey, "m/28578'/33941").neutered()
    pub_key = "0235bfee614c0d5b2cae260000bb1d0d84b270099ad790022c1ae0b2e782efe120"
    assert xpub.key.hex() == pub_key


def test_pub_key() -> None:
    rootkey = rootkey_from_seed(SEED_1, "secp256k1")
    Q = mult(rootkey.prv_key_int, ec=secp256k1)
    assert rootkey.pub_key_point == Q
    assert rootkey.neutered().pub_key_point == Q
    assert rootkey.pub_key == bytes_from_point(Q, secp256k1)

    rootkey = rootkey_from_seed(SEED_1, "nist256p1")
    assert rootkey.ec == secp256r1
    Q = mult(rootkey.prv_key_int, ec=secp256r1)
    assert rootkey.pub_key == bytes_from_point(Q, secp256r1)

    with pytest.raises(Slip13ValueError, match="not a private key"):
        _ = rootkey.neutered().prv_key_int


def test_immutability() -> None:
    rootkey = rootkey_from_seed(SEED_1)
    child = rootkey.derive_hardened_child(HARDENED)
    assert child != rootkey
    assert rootkey == rootkey_from_seed(SEED_1)
    with pytest.raises(AttributeError):
        rootkey.depth = 1  # type: ignore


def test_curve_name() -> None:
    assert curve_name("secp256k1") == "secp256k1"
    assert curve_name(" Bitcoin ") == "secp256k1"
    assert curve_name("nist256p1") == "nist256p1"
    assert curve_name("secp256r1") == "nist256p1"
    assert curve_name("P256") == "nist256p1"
    assert curve_name("NIST P-256") == "nist256p1"
    assert rootkey_from_seed(SEED_1, "p256") == rootkey_from_seed(SEED_1, "nist256p1")

    with pytest.raises(Slip13ValueError, match="unknown SLIP-0010 curve: "):
        curve_name("ed25519")


def test_exceptions() -> None:

    with pytest.raises(Slip13ValueError, match="too many bits for seed: "):
        rootkey_from_seed(SEED_1 * 5)

    with pytest.raises(Slip13ValueError, match="too few bits for seed: "):
        rootkey_from_seed(SEED_1[:-2])

    with pytest.raises(Slip13ValueError, match="unknown SLIP-0010 curve: "):
        rootkey_from_seed(SEED_1, "curve25519")

    rootkey = rootkey_from_seed(SEED_1)

    with pytest.raises(Slip13ValueError, match="not a hardened index: "):
        rootkey.derive_hardened_child(0)

    with pytest.raises(Slip13ValueError, match="invalid index: "):
        rootkey.ckd(0xFFFFFFFF + 1)

    err_msg = "invalid hardened derivation from public key"
    with pytest.raises(Slip13ValueError, match=err_msg):
        rootkey.neutered().derive_hardened_child(HARDENED)

    with pytest.raises(Slip13ValueError, match="final depth greater than 255: "):
        derive(rootkey, [HARDENED] * 256)

    key = SLIP10KeyData("secp256k1", 255, 1, rootkey.chain_code, rootkey.key)
    with pytest.raises(Slip13ValueError, match="final depth greater than 255"):
        key.ckd(0)


def test_assert_valid() -> None:
    rootkey = rootkey_from_seed(SEED_1)
    curve, chain_code, key = rootkey.curve, rootkey.chain_code, rootkey.key

    with pytest.raises(Slip13ValueError, match="invalid chain_code length: "):
        SLIP10KeyData(curve, 0, 0, chain_code[:-1], key)

    with pytest.raises(Slip13ValueError, match="invalid key length: "):
        SLIP10KeyData(curve, 0, 0, chain_code, key[:-1])

    with pytest.raises(Slip13ValueError, match="invalid depth: "):
        SLIP10KeyData(curve, 256, 0, chain_code, key)

    with pytest.raises(Slip13ValueError, match="invalid depth: "):
        SLIP10KeyData(curve, -1, 0, chain_code, key)

    with pytest.raises(Slip13ValueError, match="invalid index: "):
        SLIP10KeyData(curve, 1, 0xFFFFFFFF + 1, chain_code, key)

    with pytest.raises(Slip13ValueError, match="zero depth with non-zero index: "):
        SLIP10KeyData(curve, 0, 1, chain_code, key)

    n = secp256k1.n.to_bytes(32, byteorder="big")
    with pytest.raises(Slip13ValueError, match="invalid private key not in 1..n-1: "):
        SLIP10KeyData(curve, 0, 0, chain_code, b"\x00" + n)

    with pytest.raises(Slip13ValueError, match="invalid private key not in 1..n-1: "):
        SLIP10KeyData(curve, 0, 0, chain_code, b"\x00" * 33)

    with pytest.raises(Slip13ValueError, match="invalid key prefix: "):
        SLIP10KeyData(curve, 0, 0, chain_code, b"\x04" + key[1:])

    # 5 is not a valid x-coordinate on secp256k1
    invalid_pub_key = b"\x02" + (5).to_bytes(32, byteorder="big")
    with pytest.raises(Slip13ValueError, match="invalid public key: "):
        SLIP10KeyData(curve, 0, 0, chain_code, invalid_pub_key)

    # hex-strings are accepted
    assert SLIP10KeyData(curve, 0, 0, chain_code.hex(), key.hex()) == rootkey
