import pytest

from onosendai.crypto.decoder import decode
from onosendai.crypto.errors import (
    DecodeError,
    MalformedKeyEncoding,
    NoPEMBlockFound,
    UnsupportedKeyType,
)
from onosendai.crypto.key_material import ECKeyMaterial, RSAKeyMaterial
from onosendai.crypto.pem_block import find_pem_block

from conftest import read_key, to_pem


def test_decode_rsa(rsa_pem):
    key = decode(rsa_pem)
    assert isinstance(key, RSAKeyMaterial)
    assert key.key_type == "RSA"
    assert key.key_size == 2048
    assert key.public_exponent == 65537
    assert key.prime1 * key.prime2 == key.modulus


def test_decode_ec(ec_pem):
    key = decode(ec_pem)
    assert isinstance(key, ECKeyMaterial)
    assert key.key_type == "ECDSA"
    assert key.curve_name == "secp256r1"
    assert key.key_size == 256
    assert 0 < key.private_value < 2 ** 256


def test_decode_accepts_text(rsa_pem):
    assert decode(rsa_pem.decode("ascii")) == decode(rsa_pem)


@pytest.mark.parametrize("traditional,pkcs8", [
    ("rsa_2048.pem", "rsa_2048_pkcs8.pem"),
    ("ec_p256.pem", "ec_p256_pkcs8.pem"),
])
def test_pkcs8_wrapping_decodes_to_same_material(traditional, pkcs8):
    assert decode(read_key(pkcs8)) == decode(read_key(traditional))


def test_key_material_is_immutable(rsa_pem):
    key = decode(rsa_pem)
    with pytest.raises(AttributeError):
        key.modulus = 3


@pytest.mark.parametrize("data", [b"", b"not a pem file at all", b"\x00\x01\x02\x03"])
def test_no_pem_block(data):
    with pytest.raises(NoPEMBlockFound):
        decode(data)


@pytest.mark.parametrize("name", ["certificate.pem", "ed25519_pkcs8.pem", "rsa_2048_encrypted.pem"])
def test_unsupported_key_types(name):
    with pytest.raises(UnsupportedKeyType):
        decode(read_key(name))


def test_public_key_block_is_unsupported():
    with pytest.raises(UnsupportedKeyType):
        decode(to_pem("PUBLIC KEY", b"\x30\x00"))


def test_truncated_rsa_key(rsa_pem):
    der = find_pem_block(rsa_pem).data
    with pytest.raises(MalformedKeyEncoding):
        decode(to_pem("RSA PRIVATE KEY", der[:len(der) // 2]))


def test_trailing_bytes_rejected(rsa_pem):
    der = find_pem_block(rsa_pem).data
    with pytest.raises(MalformedKeyEncoding):
        decode(to_pem("RSA PRIVATE KEY", der + b"\x00\x00"))


def test_ec_structure_under_rsa_label(ec_pem):
    der = find_pem_block(ec_pem).data
    with pytest.raises(MalformedKeyEncoding):
        decode(to_pem("RSA PRIVATE KEY", der))


def test_rsa_structure_under_ec_label(rsa_pem):
    der = find_pem_block(rsa_pem).data
    with pytest.raises(MalformedKeyEncoding):
        decode(to_pem("EC PRIVATE KEY", der))


def test_inconsistent_rsa_key(rsa_pem):
    der = bytearray(find_pem_block(rsa_pem).data)
    # last byte belongs to the CRT coefficient
    der[-1] ^= 0x01
    with pytest.raises(MalformedKeyEncoding):
        decode(to_pem("RSA PRIVATE KEY", bytes(der)))


def test_errors_share_a_base_class():
    with pytest.raises(DecodeError):
        decode(b"")


def test_non_ascii_header_does_not_escape_error_hierarchy(rsa_pem):
    begin, rest = rsa_pem.split(b"\n", 1)
    pem = begin + b"\nComment: caf\xc3\xa9\n\n" + rest
    assert decode(pem) == decode(rsa_pem)
