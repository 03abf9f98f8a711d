# file: cryptojs_aes/__init__.py
"""
CryptoJS-compatible AES passphrase encryption.

Reads and writes the cipher text produced by CryptoJS.AES.encrypt(text,
passphrase): base64 of "Salted__" || 8-byte salt || AES-256-CBC body, with
key and IV derived from the passphrase by an EVP-style SHA-384 KDF.

The format carries no authentication tag. Decrypting with a wrong
passphrase usually fails on padding, but is not guaranteed to fail, and a
modified cipher text is not detected. Adding a MAC would break
compatibility with CryptoJS.

Public API:
    - encrypt(plaintext: str, passphrase: str, iterations: int = 1) -> str
    - decrypt(cipher_text_base64: str, passphrase: str, iterations: int = 1) -> str
    - derive(passphrase: bytes, salt: bytes, iterations: int) -> DerivedKeyMaterial
"""

from .codec import encrypt, decrypt, CryptoJSCodec
from .kdf import derive, evp_kdf, DerivedKeyMaterial
from .framing import CipherFrame, parse_frame
from .deterministic import system_random_source, FixedSaltSource, SeededSaltSource
from .crypto_errors import (
    CryptoError,
    DecodeError,
    FormatError,
    DecryptionError,
    EncodingError,
)


__all__ = [
    'encrypt',
    'decrypt',
    'CryptoJSCodec',
    'derive',
    'evp_kdf',
    'DerivedKeyMaterial',
    'CipherFrame',
    'parse_frame',
    'system_random_source',
    'FixedSaltSource',
    'SeededSaltSource',
    'CryptoError',
    'DecodeError',
    'FormatError',
    'DecryptionError',
    'EncodingError',
]


__version__ = '1.0.0'
