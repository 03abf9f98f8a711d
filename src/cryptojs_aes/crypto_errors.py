# file: cryptojs_aes/crypto_errors.py
"""
Error types raised while decoding and decrypting CryptoJS cipher text.
"""


class CryptoError(Exception):
    """Base exception for CryptoJS-compatible encryption and decryption."""
    pass


class DecodeError(CryptoError):
    """Raised when cipher text is not valid base64."""
    pass


class FormatError(CryptoError):
    """Raised when the decoded frame is too short (or has the wrong header in strict mode)."""
    pass


class DecryptionError(CryptoError):
    """
    Raised when AES-CBC decryption fails on padding or block alignment.

    Usually a wrong passphrase, wrong iteration count or corrupted input.
    The format has no authentication tag, so a wrong key can still pass
    the padding check and produce garbage instead of this error.
    """
    pass


class EncodingError(CryptoError):
    """Raised when text cannot be converted to or from UTF-8."""
    pass
