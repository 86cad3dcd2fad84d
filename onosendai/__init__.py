"""onosendai - identify yourself to a blackice server with your private key."""

__version__ = "0.1.0"

from onosendai.crypto.decoder import decode
from onosendai.crypto.errors import (
    DecodeError,
    DEREncodingFailure,
    EncodeError,
    FingerprintError,
    MalformedKeyEncoding,
    NoPEMBlockFound,
    UnsupportedAlgorithm,
    UnsupportedKeyType,
)
from onosendai.crypto.fingerprint import fingerprint, fingerprint_file, fingerprint_pem
from onosendai.crypto.key_material import ECKeyMaterial, KeyMaterial, RSAKeyMaterial

__all__ = [
    "decode",
    "fingerprint",
    "fingerprint_pem",
    "fingerprint_file",
    "KeyMaterial",
    "RSAKeyMaterial",
    "ECKeyMaterial",
    "FingerprintError",
    "DecodeError",
    "NoPEMBlockFound",
    "UnsupportedKeyType",
    "MalformedKeyEncoding",
    "EncodeError",
    "UnsupportedAlgorithm",
    "DEREncodingFailure",
    "__version__",
]
