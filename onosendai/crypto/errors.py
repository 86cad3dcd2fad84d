"""
errors.py

Exception hierarchy for key decoding and fingerprinting.
Every failure surfaces as a specific subclass so callers can tell
"not a supported key" apart from "key could not be parsed".
"""


class FingerprintError(Exception):
    """Base class for every fingerprint computation failure."""


class DecodeError(FingerprintError):
    """The input bytes could not be turned into key material."""


class NoPEMBlockFound(DecodeError):
    """The input contains no PEM block."""


class UnsupportedKeyType(DecodeError):
    """The PEM block holds something other than an RSA or EC private key."""


class MalformedKeyEncoding(DecodeError):
    """The PEM block declares a supported key but its contents do not parse."""


class EncodeError(FingerprintError):
    """Key material could not be serialized to canonical PKCS#8."""


class UnsupportedAlgorithm(EncodeError):
    """The key material variant has no PKCS#8 encoding."""


class DEREncodingFailure(EncodeError):
    """The DER serializer rejected the structure."""
