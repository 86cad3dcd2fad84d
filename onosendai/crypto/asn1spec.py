"""
asn1spec.py

ASN.1 schemas for the private key structures handled by onosendai,
plus the fixed object identifiers they reference.
"""
from types import MappingProxyType

from pyasn1.type import tag
from pyasn1_modules import rfc2437, rfc5208, rfc5915

# PKCS#1 RSAPrivateKey (two-prime form, no otherPrimeInfos)
RSAPrivateKey = rfc2437.RSAPrivateKey
# SEC1 ECPrivateKey; parameters is the ECParameters choice
ECPrivateKey = rfc5915.ECPrivateKey
# PKCS#8
PrivateKeyInfo = rfc5208.PrivateKeyInfo

OID_RSA_ENCRYPTION = "1.2.840.113549.1.1.1"
OID_EC_PUBLIC_KEY = "1.2.840.10045.2.1"

# DER encoding of ASN.1 NULL
NULL_PARAMETERS = b"\x05\x00"

# curve name (as reported by cryptography) -> named curve OID
NAMED_CURVE_OIDS = MappingProxyType({
    "secp224r1": "1.3.132.0.33",
    "secp256r1": "1.2.840.10045.3.1.7",
    "secp384r1": "1.3.132.0.34",
    "secp521r1": "1.3.132.0.35",
})

# ECPrivateKey.publicKey is [1] EXPLICIT BIT STRING
PUBLIC_KEY_TAG = tag.Tag(tag.tagClassContext, tag.tagFormatSimple, 1)

RSA_PRIVATE_KEY_VERSION = 0
EC_PRIVATE_KEY_VERSION = 1
PKCS8_VERSION = 0
