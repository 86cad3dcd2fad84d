"""
pkcs8.py

Canonical PKCS#8 (RFC 5208) serialization of decoded key material.

The private key payload is the algorithm-specific DER structure
(PKCS#1 RSAPrivateKey or RFC 5915 ECPrivateKey). Both algorithm
identifiers carry NULL parameters; the EC curve is named inside the
ECPrivateKey payload instead.
"""
from dataclasses import dataclass
from typing import Optional

from pyasn1.codec.der import decoder as der_decoder
from pyasn1.codec.der import encoder as der_encoder
from pyasn1.error import PyAsn1Error
from pyasn1.type import univ
from cryptography.hazmat.primitives.asymmetric import rsa

from onosendai.crypto import asn1spec
from onosendai.crypto.errors import DEREncodingFailure, MalformedKeyEncoding, UnsupportedAlgorithm
from onosendai.crypto.key_material import ECKeyMaterial, KeyMaterial, RSAKeyMaterial


@dataclass(frozen=True)
class AlgorithmIdentifier:
    oid: str
    parameters: Optional[bytes] = None


RSA_ALGORITHM = AlgorithmIdentifier(asn1spec.OID_RSA_ENCRYPTION, asn1spec.NULL_PARAMETERS)
EC_ALGORITHM = AlgorithmIdentifier(asn1spec.OID_EC_PUBLIC_KEY, asn1spec.NULL_PARAMETERS)


@dataclass(frozen=True)
class PKCS8Document:
    version: int
    algorithm: AlgorithmIdentifier
    private_key: bytes

    def to_der(self) -> bytes:
        info = asn1spec.PrivateKeyInfo()
        info["version"] = self.version
        algorithm = info["privateKeyAlgorithm"]
        algorithm["algorithm"] = self.algorithm.oid
        if self.algorithm.parameters is not None:
            algorithm["parameters"] = univ.Any(self.algorithm.parameters)
        info["privateKey"] = self.private_key
        return _encode(info, "PKCS#8 private key")


def _encode(record, what: str) -> bytes:
    try:
        return der_encoder.encode(record)
    except PyAsn1Error as e:
        raise DEREncodingFailure(f"failed to marshal {what}: {e}") from e


def encode_rsa_private_key(key: RSAKeyMaterial) -> bytes:
    """DER-encode ``key`` as a PKCS#1 RSAPrivateKey with freshly derived CRT values."""
    p, q, d = key.prime1, key.prime2, key.private_exponent
    try:
        exponent1 = rsa.rsa_crt_dmp1(d, p)
        exponent2 = rsa.rsa_crt_dmq1(d, q)
        coefficient = rsa.rsa_crt_iqmp(p, q)
    except (ValueError, ZeroDivisionError) as e:
        raise DEREncodingFailure(f"failed to derive RSA CRT parameters: {e}") from e

    record = asn1spec.RSAPrivateKey()
    record["version"] = asn1spec.RSA_PRIVATE_KEY_VERSION
    record["modulus"] = key.modulus
    record["publicExponent"] = key.public_exponent
    record["privateExponent"] = d
    record["prime1"] = p
    record["prime2"] = q
    record["exponent1"] = exponent1
    record["exponent2"] = exponent2
    record["coefficient"] = coefficient
    return _encode(record, "RSA private key")


def encode_ec_private_key(key: ECKeyMaterial) -> bytes:
    """
    DER-encode ``key`` as an RFC 5915 ECPrivateKey.

    The scalar and both point coordinates are left-padded to the curve
    width and the public key is written as an uncompressed point.
    """
    curve_oid = asn1spec.NAMED_CURVE_OIDS.get(key.curve_name)
    if curve_oid is None:
        raise DEREncodingFailure(f"failed to marshal EC private key: unknown elliptic curve '{key.curve_name}'")

    width = (key.key_size + 7) // 8
    try:
        scalar = key.private_value.to_bytes(width, "big")
        point = b"\x04" + key.public_x.to_bytes(width, "big") + key.public_y.to_bytes(width, "big")
    except OverflowError as e:
        raise DEREncodingFailure(f"EC key value does not fit curve {key.curve_name}: {e}") from e

    record = asn1spec.ECPrivateKey()
    record["version"] = asn1spec.EC_PRIVATE_KEY_VERSION
    record["privateKey"] = scalar
    record["parameters"]["namedCurve"] = curve_oid
    record["publicKey"] = univ.BitString.fromOctetString(point).subtype(
        explicitTag=asn1spec.PUBLIC_KEY_TAG)
    return _encode(record, "EC private key")


def build_pkcs8_document(key: KeyMaterial) -> PKCS8Document:
    if isinstance(key, RSAKeyMaterial):
        return PKCS8Document(asn1spec.PKCS8_VERSION, RSA_ALGORITHM, encode_rsa_private_key(key))
    if isinstance(key, ECKeyMaterial):
        return PKCS8Document(asn1spec.PKCS8_VERSION, EC_ALGORITHM, encode_ec_private_key(key))
    raise UnsupportedAlgorithm(
        f"PKCS#8 only supports RSA and ECDSA private keys, got {type(key).__name__}")


def marshal_pkcs8_private_key(key: KeyMaterial) -> bytes:
    """Serialize ``key`` to canonical PKCS#8 DER."""
    return build_pkcs8_document(key).to_der()


def parse_pkcs8(der: bytes) -> PKCS8Document:
    """Parse PKCS#8 DER back into a PKCS8Document (attributes are dropped)."""
    try:
        info, rest = der_decoder.decode(der, asn1Spec=asn1spec.PrivateKeyInfo())
    except PyAsn1Error as e:
        raise MalformedKeyEncoding(f"invalid PKCS#8 structure: {e}") from e
    if rest:
        raise MalformedKeyEncoding(f"{len(rest)} trailing bytes after PKCS#8 structure")

    algorithm = info["privateKeyAlgorithm"]
    parameters = None
    if algorithm["parameters"].isValue:
        parameters = bytes(algorithm["parameters"])
    return PKCS8Document(
        version=int(info["version"]),
        algorithm=AlgorithmIdentifier(str(algorithm["algorithm"]), parameters),
        private_key=bytes(info["privateKey"]),
    )
