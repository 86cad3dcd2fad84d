import base64
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"

# reference values computed with openssl from the fixture keys
RSA_FINGERPRINT = "cb:21:22:aa:cc:79:46:f7:97:98:0b:29:44:52:83:f4:44:e0:6b:78"
EC_FINGERPRINT = "0e:ae:d5:1b:4e:d9:ba:a1:ca:1b:6f:6c:0b:9e:a6:95:8e:c7:9a:73"
EC_P384_FINGERPRINT = "54:6d:10:42:e4:9b:46:b0:a2:d3:20:9d:28:2a:d7:40:b6:1a:b0:13"
EC_P521_FINGERPRINT = "ee:dd:cd:b9:8a:f9:ad:98:76:bc:64:c6:75:48:43:24:a9:5b:7e:c4"


def read_key(name: str) -> bytes:
    return (DATA_DIR / name).read_bytes()


def to_pem(label: str, der: bytes) -> bytes:
    body = base64.encodebytes(der)
    return b"-----BEGIN " + label.encode() + b"-----\n" + body + b"-----END " + label.encode() + b"-----\n"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep user config and ONOSENDAI_* variables out of the tests."""
    for var in (
        "ONOSENDAI_CONFIG",
        "ONOSENDAI_SERVER",
        "ONOSENDAI_IDENTITY_FILE",
        "ONOSENDAI_TIMEOUT",
        "ONOSENDAI_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def rsa_pem() -> bytes:
    return read_key("rsa_2048.pem")


@pytest.fixture
def ec_pem() -> bytes:
    return read_key("ec_p256.pem")
