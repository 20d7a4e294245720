"""
Hash Algorithm Selection

Resolves configured hash names to `cryptography` hash algorithm classes
and computes digests with them.
"""

from typing import Dict, Type

from cryptography.hazmat.primitives import hashes

HASH_ALGORITHMS: Dict[str, Type[hashes.HashAlgorithm]] = {
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
    "sha3_256": hashes.SHA3_256,
    "sha3_512": hashes.SHA3_512,
    "blake2b": hashes.BLAKE2b,
    "blake2s": hashes.BLAKE2s,
}

# BLAKE2 classes take their digest size as a required constructor argument
_DIGEST_SIZES = {
    hashes.BLAKE2b: 64,
    hashes.BLAKE2s: 32,
}


def resolve_hash(name: str) -> Type[hashes.HashAlgorithm]:
    """
    Look up a hash algorithm class by name.

    Args:
        name: Case-insensitive algorithm name, e.g. "sha256" or "SHA3-256"

    Returns:
        Type[hashes.HashAlgorithm]: The matching `cryptography` class

    Raises:
        ValueError: If the name is not supported
    """
    key = name.strip().lower().replace("-", "_")
    try:
        return HASH_ALGORITHMS[key]
    except KeyError:
        supported = ", ".join(sorted(HASH_ALGORITHMS))
        raise ValueError(f"Unsupported hash algorithm {name!r} (supported: {supported})")


def new_algorithm(algorithm: Type[hashes.HashAlgorithm]) -> hashes.HashAlgorithm:
    """Instantiate a hash algorithm class."""
    if algorithm in _DIGEST_SIZES:
        return algorithm(_DIGEST_SIZES[algorithm])
    return algorithm()


def digest(algorithm: Type[hashes.HashAlgorithm], data: bytes) -> bytes:
    """Hash `data` with the given algorithm class."""
    h = hashes.Hash(new_algorithm(algorithm))
    h.update(data)
    return h.finalize()
