"""
PRF Configuration

Environment-based defaults for generating and operating puncturable PRFs.
Variables use the PPRF_ prefix, e.g. PPRF_MODULUS_BITS=3072.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .hashing import resolve_hash
from .rsa_params import MIN_MODULUS_BITS


class Settings(BaseSettings):
    """Settings loaded from environment variables and an optional .env file."""

    model_config = SettingsConfigDict(
        env_prefix="PPRF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Key generation
    modulus_bits: int = Field(
        default=2048,
        description="RSA modulus size in bits"
    )

    punctures: int = Field(
        default=256,
        gt=0,
        description="Number of PRF inputs (puncture bitset capacity)"
    )

    hash_algorithm: str = Field(
        default="sha256",
        description="Hash applied to the accumulator output"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    log_format: str = Field(
        default="text",
        description="Log format: json or text"
    )

    app_version: str = Field(
        default="0.1.0",
        description="Version reported in structured logs"
    )

    @field_validator("modulus_bits")
    @classmethod
    def validate_modulus_bits(cls, v: int) -> int:
        if v < MIN_MODULUS_BITS:
            raise ValueError(f"modulus_bits must be at least {MIN_MODULUS_BITS}")
        return v

    @field_validator("hash_algorithm")
    @classmethod
    def validate_hash_algorithm(cls, v: str) -> str:
        resolve_hash(v)
        return v.strip().lower()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("json", "text"):
            raise ValueError('log_format must be "json" or "text"')
        return v.lower()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings."""
    return Settings()
