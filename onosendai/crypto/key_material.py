"""
key_material.py

Typed, immutable representations of decoded private keys.
"""
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class RSAKeyMaterial:
    modulus: int
    public_exponent: int
    private_exponent: int
    prime1: int
    prime2: int

    @property
    def key_type(self) -> str:
        return "RSA"

    @property
    def key_size(self) -> int:
        return self.modulus.bit_length()


@dataclass(frozen=True)
class ECKeyMaterial:
    """
    An elliptic-curve private key on a named curve.

    ``key_size`` is the bit length of the curve order; it fixes the width
    of the private scalar and of each public point coordinate when encoded.
    """
    curve_name: str
    key_size: int
    private_value: int
    public_x: int
    public_y: int

    @property
    def key_type(self) -> str:
        return "ECDSA"


KeyMaterial = Union[RSAKeyMaterial, ECKeyMaterial]
