"""
Pydantic Models for Persisted PRF State

Defines the structured record a PRF instance is saved to and loaded
from. Unlike repr(), this record carries the generator and the full
puncture bitset, so it is confidential material and must be stored
under access control.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _parse_hex_int(v: str) -> int:
    if not v.startswith("0x"):
        raise ValueError("must be a 0x-prefixed hex string")
    return int(v, 16)


class PrfState(BaseModel):
    """Lossless snapshot of a puncturable PRF: {N, g, R}."""

    model_config = ConfigDict(frozen=True)

    modulus: str = Field(..., description="RSA modulus N as 0x-prefixed hex")
    generator: str = Field(..., description="Current accumulator generator g as 0x-prefixed hex")
    capacity: int = Field(..., ge=0, description="Number of PRF inputs (length of R)")
    punctured: str = Field(..., description="Puncture bitset R, packed little-endian, as hex")

    @field_validator("modulus", "generator")
    @classmethod
    def validate_hex_int(cls, v: str) -> str:
        v = v.strip().lower()
        _parse_hex_int(v)
        return v

    @field_validator("punctured")
    @classmethod
    def validate_punctured_hex(cls, v: str) -> str:
        v = v.strip().lower()
        bytes.fromhex(v)
        return v

    @property
    def modulus_int(self) -> int:
        return _parse_hex_int(self.modulus)

    @property
    def generator_int(self) -> int:
        return _parse_hex_int(self.generator)

    @property
    def punctured_bytes(self) -> bytes:
        return bytes.fromhex(self.punctured)
