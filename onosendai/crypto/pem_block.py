"""
pem_block.py

Locate and decode PEM blocks (RFC 7468, with RFC 1421 headers).
"""
import base64
import binascii
import re
from dataclasses import dataclass, field
from typing import Dict, Optional

_BLOCK_RE = re.compile(
    rb"-----BEGIN (?P<label>[^-\r\n]*)-----[ \t]*\r?\n"
    rb"(?P<body>.*?)"
    rb"-----END (?P<end>[^-\r\n]*)-----",
    re.S,
)
_HEADER_RE = re.compile(rb"^(?P<name>[A-Za-z0-9-]+):[ \t]*(?P<value>.*)$")


@dataclass(frozen=True)
class PEMBlock:
    label: str
    data: bytes
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def encrypted(self) -> bool:
        return "ENCRYPTED" in self.headers.get("Proc-Type", "")


def _split_headers(body: bytes):
    lines = body.splitlines()
    headers = {}
    idx = 0
    while idx < len(lines):
        match = _HEADER_RE.match(lines[idx].strip())
        if not match:
            break
        headers[match.group("name").decode("ascii")] = match.group("value").decode("ascii", "replace").strip()
        idx += 1
    if headers:
        # headers must be terminated by an empty line
        if idx >= len(lines) or lines[idx].strip():
            return None, None
        idx += 1
    return headers, b"".join(lines[idx:])


def _decode_block(match) -> Optional[PEMBlock]:
    label = match.group("label")
    if match.group("end") != label:
        return None
    headers, payload = _split_headers(match.group("body"))
    if headers is None:
        return None
    try:
        data = base64.b64decode(b"".join(payload.split()), validate=True)
    except (binascii.Error, ValueError):
        return None
    return PEMBlock(label=label.decode("ascii", "replace"), data=data, headers=headers)


def find_pem_block(pem_bytes: bytes) -> Optional[PEMBlock]:
    """
    Return the first well-formed PEM block in ``pem_bytes``, or None.

    Text around the block is ignored. Blocks with a mismatched END line or
    an undecodable body are skipped and the search continues after them.
    """
    pos = 0
    while True:
        match = _BLOCK_RE.search(pem_bytes, pos)
        if match is None:
            return None
        block = _decode_block(match)
        if block is not None:
            return block
        pos = match.start() + 1
