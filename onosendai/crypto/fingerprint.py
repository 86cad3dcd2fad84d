"""
fingerprint.py

SHA-1 fingerprints of private keys, computed over their canonical
PKCS#8 DER encoding and rendered as colon-separated lowercase hex
(``xx:xx:...:xx``, 20 groups).
"""
import hashlib
import re
from pathlib import Path

from onosendai.crypto.decoder import decode
from onosendai.crypto.key_material import KeyMaterial
from onosendai.crypto.pkcs8 import marshal_pkcs8_private_key
from onosendai.utils.logger import get_logger

logger = get_logger("fingerprint")

FINGERPRINT_RE = re.compile(r"(?:[0-9a-f]{2}:){19}[0-9a-f]{2}")


def format_fingerprint(digest: bytes) -> str:
    return ":".join(f"{b:02x}" for b in digest)


def fingerprint(key: KeyMaterial) -> str:
    """
    Compute the fingerprint of decoded key material.

    Raises:
        UnsupportedAlgorithm: ``key`` is neither RSA nor EC key material.
        DEREncodingFailure: the key could not be serialized to PKCS#8.
    """
    der = marshal_pkcs8_private_key(key)
    logger.debug(f"Canonical PKCS#8 encoding is {len(der)} bytes")
    return format_fingerprint(hashlib.sha1(der).digest())


def fingerprint_pem(pem_bytes: bytes) -> str:
    """Decode a PEM private key and return its fingerprint."""
    return fingerprint(decode(pem_bytes))


def fingerprint_file(path) -> str:
    """Read the private key at ``path`` and return its fingerprint."""
    pem = Path(path).expanduser().read_bytes()
    return fingerprint_pem(pem)


def is_fingerprint(value: str) -> bool:
    return bool(FINGERPRINT_RE.fullmatch(value))
