"""
decoder.py

Turn the contents of a PEM private key file into typed key material.

Supported blocks:
  - RSA PRIVATE KEY   (PKCS#1)
  - EC PRIVATE KEY    (SEC1 / RFC 5915)
  - PRIVATE KEY       (unencrypted PKCS#8 wrapping an RSA or EC key)
"""
from pyasn1.codec.der import decoder as der_decoder
from pyasn1.error import PyAsn1Error
from cryptography import exceptions as crypto_exceptions
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from onosendai.crypto import asn1spec
from onosendai.crypto.errors import MalformedKeyEncoding, NoPEMBlockFound, UnsupportedKeyType
from onosendai.crypto.key_material import ECKeyMaterial, KeyMaterial, RSAKeyMaterial
from onosendai.crypto.pem_block import find_pem_block
from onosendai.utils.logger import get_logger

logger = get_logger("decoder")

LABEL_RSA = "RSA PRIVATE KEY"
LABEL_EC = "EC PRIVATE KEY"
LABEL_PKCS8 = "PRIVATE KEY"

SUPPORTED_LABELS = (LABEL_RSA, LABEL_EC, LABEL_PKCS8)


def _check_shape(der: bytes, schema, what: str):
    """Decode ``der`` strictly against ``schema``; trailing bytes are an error."""
    try:
        record, rest = der_decoder.decode(der, asn1Spec=schema)
    except PyAsn1Error as e:
        raise MalformedKeyEncoding(f"invalid {what} structure: {e}") from e
    if rest:
        raise MalformedKeyEncoding(f"{len(rest)} trailing bytes after {what} structure")
    return record


def _expected_type_for_pkcs8(der: bytes):
    record = _check_shape(der, asn1spec.PrivateKeyInfo(), "PKCS#8")
    oid = str(record["privateKeyAlgorithm"]["algorithm"])
    if oid == asn1spec.OID_RSA_ENCRYPTION:
        return rsa.RSAPrivateKey
    if oid == asn1spec.OID_EC_PUBLIC_KEY:
        return ec.EllipticCurvePrivateKey
    raise UnsupportedKeyType(f"PKCS#8 key algorithm {oid} is not RSA or ECDSA")


def _load_private_key(der: bytes, label: str):
    if label == LABEL_RSA:
        record = _check_shape(der, asn1spec.RSAPrivateKey(), "PKCS#1 RSA private key")
        if int(record["version"]) != asn1spec.RSA_PRIVATE_KEY_VERSION:
            raise MalformedKeyEncoding(f"unsupported RSA private key version {int(record['version'])}")
        expected = rsa.RSAPrivateKey
    elif label == LABEL_EC:
        record = _check_shape(der, asn1spec.ECPrivateKey(), "EC private key")
        if int(record["version"]) != asn1spec.EC_PRIVATE_KEY_VERSION:
            raise MalformedKeyEncoding(f"unknown EC private key version {int(record['version'])}")
        expected = ec.EllipticCurvePrivateKey
    else:
        expected = _expected_type_for_pkcs8(der)

    try:
        key = serialization.load_der_private_key(der, password=None)
    except crypto_exceptions.UnsupportedAlgorithm as e:
        raise UnsupportedKeyType(f"unsupported key in {label} block: {e}") from e
    except (ValueError, TypeError) as e:
        raise MalformedKeyEncoding(f"failed to parse {label} block: {e}") from e

    if not isinstance(key, expected):
        raise MalformedKeyEncoding(f"{label} block holds a {type(key).__name__}")
    return key


def _to_key_material(key) -> KeyMaterial:
    if isinstance(key, rsa.RSAPrivateKey):
        numbers = key.private_numbers()
        return RSAKeyMaterial(
            modulus=numbers.public_numbers.n,
            public_exponent=numbers.public_numbers.e,
            private_exponent=numbers.d,
            prime1=numbers.p,
            prime2=numbers.q,
        )
    numbers = key.private_numbers()
    return ECKeyMaterial(
        curve_name=key.curve.name,
        key_size=key.curve.key_size,
        private_value=numbers.private_value,
        public_x=numbers.public_numbers.x,
        public_y=numbers.public_numbers.y,
    )


def decode(pem_bytes: bytes) -> KeyMaterial:
    """
    Decode the first PEM block of ``pem_bytes`` into key material.

    Raises:
        NoPEMBlockFound: no PEM block in the input.
        UnsupportedKeyType: the block is not an (unencrypted) RSA or EC private key.
        MalformedKeyEncoding: the block declares a supported key but does not parse.
    """
    if isinstance(pem_bytes, str):
        pem_bytes = pem_bytes.encode("ascii", "replace")

    block = find_pem_block(pem_bytes or b"")
    if block is None:
        raise NoPEMBlockFound("no PEM data found")
    logger.debug(f"Found PEM block '{block.label}' ({len(block.data)} bytes)")

    if block.label not in SUPPORTED_LABELS:
        raise UnsupportedKeyType(f"unsupported PEM block type '{block.label}'")
    if block.encrypted:
        raise UnsupportedKeyType(f"encrypted '{block.label}' blocks are not supported")

    key = _load_private_key(block.data, block.label)
    material = _to_key_material(key)
    logger.debug(f"Decoded {material.key_type} private key")
    return material
