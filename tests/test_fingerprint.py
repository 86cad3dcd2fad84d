from dataclasses import replace

import pytest

from onosendai.crypto.decoder import decode
from onosendai.crypto.errors import FingerprintError
from onosendai.crypto.fingerprint import (
    fingerprint,
    fingerprint_file,
    fingerprint_pem,
    format_fingerprint,
    is_fingerprint,
)
from onosendai.crypto.pem_block import find_pem_block

from conftest import (
    DATA_DIR,
    EC_FINGERPRINT,
    EC_P384_FINGERPRINT,
    EC_P521_FINGERPRINT,
    RSA_FINGERPRINT,
    read_key,
    to_pem,
)


@pytest.mark.parametrize("name,expected", [
    ("rsa_2048.pem", RSA_FINGERPRINT),
    ("rsa_2048_pkcs8.pem", RSA_FINGERPRINT),
    ("ec_p256.pem", EC_FINGERPRINT),
    ("ec_p256_pkcs8.pem", EC_FINGERPRINT),
    ("ec_p384.pem", EC_P384_FINGERPRINT),
    ("ec_p521.pem", EC_P521_FINGERPRINT),
])
def test_known_vectors(name, expected):
    assert fingerprint_pem(read_key(name)) == expected


def test_fingerprint_file_expands_path():
    assert fingerprint_file(DATA_DIR / "rsa_2048.pem") == RSA_FINGERPRINT
    assert fingerprint_file(str(DATA_DIR / "ec_p256.pem")) == EC_FINGERPRINT


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        fingerprint_file(DATA_DIR / "does-not-exist.pem")


def test_deterministic(rsa_pem, ec_pem):
    for pem in (rsa_pem, ec_pem):
        values = {fingerprint(decode(pem)) for _ in range(5)}
        assert len(values) == 1


def test_reformatted_pem_gives_same_fingerprint(rsa_pem):
    der = find_pem_block(rsa_pem).data
    rewrapped = b"comment line\n" + to_pem("RSA PRIVATE KEY", der).replace(b"\n", b"\r\n")
    assert rewrapped != rsa_pem
    assert fingerprint_pem(rewrapped) == RSA_FINGERPRINT


@pytest.mark.parametrize("name", ["rsa_2048.pem", "ec_p256.pem"])
def test_format_invariant(name):
    value = fingerprint_pem(read_key(name))
    assert len(value) == 59
    assert value == value.lower()
    assert is_fingerprint(value)


def test_format_fingerprint_keeps_byte_order():
    assert format_fingerprint(bytes(range(20))) == ":".join(f"{i:02x}" for i in range(20))
    assert format_fingerprint(b"\xab\x01") == "ab:01"


def test_is_fingerprint_rejects_near_misses():
    assert not is_fingerprint(RSA_FINGERPRINT.upper())
    assert not is_fingerprint(RSA_FINGERPRINT + "\n")
    assert not is_fingerprint(RSA_FINGERPRINT[3:])
    assert not is_fingerprint(RSA_FINGERPRINT.replace(":", ""))


@pytest.mark.parametrize("field", ["private_exponent", "modulus", "public_exponent"])
def test_rsa_field_change_changes_fingerprint(rsa_pem, field):
    key = decode(rsa_pem)
    changed = replace(key, **{field: getattr(key, field) + 2})
    assert fingerprint(changed) != fingerprint(key)


@pytest.mark.parametrize("field", ["private_value", "public_x", "public_y"])
def test_ec_field_change_changes_fingerprint(ec_pem, field):
    key = decode(ec_pem)
    changed = replace(key, **{field: getattr(key, field) ^ 1})
    assert fingerprint(changed) != fingerprint(key)


@pytest.mark.parametrize("name", ["rsa_2048.pem", "ec_p256.pem"])
def test_single_byte_flip_never_collides(name):
    pem = read_key(name)
    block = find_pem_block(pem)
    original = fingerprint_pem(pem)
    step = max(1, len(block.data) // 40)
    for offset in range(0, len(block.data), step):
        corrupted = bytearray(block.data)
        corrupted[offset] ^= 0x01
        try:
            value = fingerprint_pem(to_pem(block.label, bytes(corrupted)))
        except FingerprintError:
            continue
        assert value != original, f"flip at offset {offset} kept the fingerprint"
