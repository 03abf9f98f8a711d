# file: cryptojs_aes/codec.py
"""
CryptoJS-compatible AES encryption and decryption.

encrypt() output decrypts with CryptoJS.AES.decrypt(text, passphrase) and
with `openssl enc -d -aes-256-cbc -md sha384 -a`; decrypt() accepts the
output of CryptoJS.AES.encrypt(text, passphrase) configured with SHA-384
key derivation.
"""

import base64
import binascii
import logging
from typing import Optional, Union

from .cipher import encrypt_cbc, decrypt_cbc
from .config import load_config
from .crypto_errors import DecodeError, EncodingError
from .deterministic import RandomSource, system_random_source
from .framing import SALT_SIZE, assemble_frame, parse_frame
from .kdf import derive


logger = logging.getLogger(__name__)

_ASCII_WHITESPACE = b"\t\n\f\r "


def _encode_text(text: str, what: str) -> bytes:
    try:
        return text.encode('utf-8')
    except UnicodeEncodeError as e:
        raise EncodingError(f"{what} cannot be encoded as UTF-8: {e.reason}") from e


def _decode_base64(cipher_text_base64: Union[str, bytes]) -> bytes:
    """
    Decode base64 the forgiving way browsers' atob() does.

    ASCII whitespace anywhere is dropped (openssl -a wraps lines at 64
    characters) and missing "=" padding is restored. The alphabet itself
    is checked strictly.
    """
    if isinstance(cipher_text_base64, str):
        if not cipher_text_base64.isascii():
            raise DecodeError("Cipher text contains non-ASCII characters")
        data = cipher_text_base64.encode('ascii')
    else:
        data = bytes(cipher_text_base64)

    data = data.translate(None, _ASCII_WHITESPACE)

    if len(data) % 4 == 0 and data.endswith(b"="):
        data = data[:-2] if data.endswith(b"==") else data[:-1]
    if len(data) % 4 == 1:
        raise DecodeError(f"Cipher text is not valid base64: {len(data)} characters")
    data += b"=" * (-len(data) % 4)

    try:
        return base64.b64decode(data, validate=True)
    except binascii.Error as e:
        raise DecodeError(f"Cipher text is not valid base64: {e}") from e


def encrypt(
    plaintext: str,
    passphrase: str,
    iterations: int = 1,
    *,
    random_source: Optional[RandomSource] = None
) -> str:
    """
    Encrypt text the way CryptoJS.AES.encrypt(text, passphrase) does.

    Args:
        plaintext: Text to encrypt (UTF-8 encoded before encryption)
        passphrase: Passphrase (UTF-8 encoded before key derivation)
        iterations: KDF digest iterations, >= 1
        random_source: Callable returning n random bytes; defaults to the
                       OS CSPRNG. Inject a fixed source only in tests.

    Returns:
        Base64 "Salted__" frame

    Raises:
        EncodingError: If plaintext or passphrase are not encodable
        ValueError: If iterations < 1 or the source returns a bad salt
    """
    if random_source is None:
        random_source = system_random_source

    plaintext_bytes = _encode_text(plaintext, "Plaintext")
    passphrase_bytes = _encode_text(passphrase, "Passphrase")

    salt = random_source(SALT_SIZE)
    if not isinstance(salt, (bytes, bytearray)) or len(salt) != SALT_SIZE:
        raise ValueError(f"Random source must return {SALT_SIZE} bytes")

    material = derive(passphrase_bytes, bytes(salt), iterations)
    body = encrypt_cbc(material.key, material.iv, plaintext_bytes)

    frame = assemble_frame(salt, body)
    logger.debug(
        "Encrypted %d plaintext bytes into %d-byte frame (iterations=%d)",
        len(plaintext_bytes), len(frame.to_bytes()), iterations
    )

    return base64.b64encode(frame.to_bytes()).decode('ascii')


def decrypt(
    cipher_text_base64: Union[str, bytes],
    passphrase: str,
    iterations: int = 1,
    *,
    strict_header: bool = False
) -> str:
    """
    Decrypt base64 cipher text produced by CryptoJS.AES.encrypt.

    There is no authentication tag in this format. A wrong passphrase is
    detected only through invalid padding or invalid UTF-8, and a small
    fraction of wrong passphrases will return garbage text instead.

    Args:
        cipher_text_base64: Base64 "Salted__" frame
        passphrase: Passphrase used for encryption
        iterations: KDF digest iterations used for encryption
        strict_header: Reject frames not starting with "Salted__"

    Returns:
        Decrypted text

    Raises:
        DecodeError: If input is not valid base64
        FormatError: If the frame is shorter than 16 bytes
        DecryptionError: If padding or block alignment is invalid
        EncodingError: If the plaintext is not valid UTF-8
        ValueError: If iterations < 1
    """
    frame = parse_frame(_decode_base64(cipher_text_base64), strict_header=strict_header)

    material = derive(_encode_text(passphrase, "Passphrase"), frame.salt, iterations)
    plaintext_bytes = decrypt_cbc(material.key, material.iv, frame.body)

    logger.debug(
        "Decrypted %d-byte body into %d plaintext bytes (iterations=%d)",
        len(frame.body), len(plaintext_bytes), iterations
    )

    try:
        return plaintext_bytes.decode('utf-8')
    except UnicodeDecodeError as e:
        raise EncodingError(
            f"Decrypted data is not valid UTF-8 (wrong passphrase or binary plaintext?): {e.reason}"
        ) from e


class CryptoJSCodec:
    """
    encrypt/decrypt bound to a configuration.

    Holds only settings; key material is derived per call and never kept.
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        random_source: Optional[RandomSource] = None
    ):
        """
        Args:
            config_path: Path to configuration YAML file.
                        If None, uses the packaged default configuration.
            random_source: Salt source passed through to encrypt()
        """
        self.config = load_config(config_path)
        self.random_source = random_source

    @property
    def iterations(self) -> int:
        """Default KDF iterations (crypto.kdf.iterations)."""
        return self.config["crypto"]["kdf"]["iterations"]

    @property
    def strict_header(self) -> bool:
        """Whether decrypt rejects frames without "Salted__" (crypto.framing.strict_header)."""
        return self.config["crypto"]["framing"]["strict_header"]

    def encrypt(self, plaintext: str, passphrase: str, iterations: Optional[int] = None) -> str:
        """
        Encrypt with the configured defaults; see encrypt().

        Args:
            plaintext: Text to encrypt
            passphrase: Passphrase
            iterations: Overrides the configured iteration count

        Returns:
            Base64 "Salted__" frame
        """
        if iterations is None:
            iterations = self.iterations
        return encrypt(plaintext, passphrase, iterations, random_source=self.random_source)

    def decrypt(
        self,
        cipher_text_base64: Union[str, bytes],
        passphrase: str,
        iterations: Optional[int] = None
    ) -> str:
        """
        Decrypt with the configured defaults; see decrypt().

        Args:
            cipher_text_base64: Base64 "Salted__" frame
            passphrase: Passphrase used for encryption
            iterations: Overrides the configured iteration count

        Returns:
            Decrypted text

        Raises:
            DecodeError, FormatError, DecryptionError, EncodingError: As decrypt()
        """
        if iterations is None:
            iterations = self.iterations
        return decrypt(
            cipher_text_base64, passphrase, iterations, strict_header=self.strict_header
        )
