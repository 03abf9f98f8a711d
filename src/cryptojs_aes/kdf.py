# file: cryptojs_aes/kdf.py
"""
EVP-style key and IV derivation (OpenSSL EVP_BytesToKey with SHA-384).

This is the derivation CryptoJS applies to a passphrase by default. It is
neither PBKDF2 nor HKDF: each round hashes the previous round's block
together with the passphrase and salt, and the rounds are concatenated
until enough bytes exist for the key followed by the IV.
"""

from dataclasses import dataclass

from cryptography.hazmat.primitives import hashes


KEY_SIZE = 32  # AES-256
IV_SIZE = 16
DEFAULT_HASH = "sha384"

_HASHES = {
    "md5": hashes.MD5,
    "sha1": hashes.SHA1,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}


@dataclass(frozen=True)
class DerivedKeyMaterial:
    """AES key and IV cut from one derived byte stream."""
    key: bytes
    iv: bytes


def _digest(algorithm: hashes.HashAlgorithm, data: bytes) -> bytes:
    h = hashes.Hash(algorithm)
    h.update(data)
    return h.finalize()


def evp_kdf(
    passphrase: bytes,
    salt: bytes,
    iterations: int,
    key_size: int = KEY_SIZE,
    iv_size: int = IV_SIZE,
    hash_name: str = DEFAULT_HASH,
) -> bytes:
    """
    Stretch a passphrase and salt into at least key_size + iv_size bytes.

    Args:
        passphrase: Raw passphrase bytes
        salt: Salt bytes (8 bytes in the CryptoJS frame)
        iterations: Digest applications per round, >= 1
        key_size: Key length in bytes
        iv_size: IV length in bytes
        hash_name: Digest name, one of md5/sha1/sha256/sha384/sha512

    Returns:
        The whole derived stream, a multiple of the digest size

    Raises:
        TypeError: If passphrase or salt are not bytes
        ValueError: If iterations or a size is < 1, or hash_name is unknown
    """
    if not isinstance(passphrase, (bytes, bytearray)):
        raise TypeError("passphrase must be bytes")
    if not isinstance(salt, (bytes, bytearray)):
        raise TypeError("salt must be bytes")
    if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 1:
        raise ValueError(f"iterations must be a positive integer, got {iterations!r}")
    for name, size in (("key_size", key_size), ("iv_size", iv_size)):
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ValueError(f"{name} must be a positive integer, got {size!r}")
    try:
        algorithm = _HASHES[hash_name]()
    except KeyError:
        raise ValueError(f"Unsupported hash: {hash_name}") from None

    derived = b""
    block = b""

    while len(derived) < key_size + iv_size:
        block = _digest(algorithm, block + bytes(passphrase) + bytes(salt))
        for _ in range(1, iterations):
            block = _digest(algorithm, block)
        derived += block

    return derived


def derive(passphrase: bytes, salt: bytes, iterations: int) -> DerivedKeyMaterial:
    """
    Derive the AES-256 key and IV for one message.

    Uses SHA-384, so a single round yields exactly the 48 bytes needed.
    """
    derived = evp_kdf(passphrase, salt, iterations)
    return DerivedKeyMaterial(
        key=derived[:KEY_SIZE],
        iv=derived[KEY_SIZE:KEY_SIZE + IV_SIZE],
    )
