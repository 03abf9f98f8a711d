# file: cryptojs_aes/cipher.py
"""
AES-256-CBC with PKCS#7 padding, the cipher CryptoJS uses by default.
"""

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .crypto_errors import DecryptionError
from .framing import BLOCK_SIZE


BLOCK_SIZE_BITS = BLOCK_SIZE * 8


def encrypt_cbc(key: bytes, iv: bytes, plaintext: bytes) -> bytes:
    """
    Pad and encrypt data with AES-CBC.

    Args:
        key: 32-byte AES key
        iv: 16-byte initialization vector
        plaintext: Data to encrypt (any length, including empty)

    Returns:
        Cipher text, length rounded up to the next full block
    """
    padder = padding.PKCS7(BLOCK_SIZE_BITS).padder()
    padded = padder.update(plaintext) + padder.finalize()

    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def decrypt_cbc(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """
    Decrypt AES-CBC data and strip its padding.

    Args:
        key: 32-byte AES key
        iv: 16-byte initialization vector
        ciphertext: Encrypted data

    Returns:
        Unpadded plaintext

    Raises:
        DecryptionError: If the data is not block aligned or the padding is invalid
    """
    # Bad key or IV sizes raise ValueError here, outside the try blocks.
    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()

    try:
        padded = decryptor.update(ciphertext) + decryptor.finalize()
    except ValueError as e:
        raise DecryptionError(f"Cipher text is not block aligned: {len(ciphertext)} bytes") from e

    unpadder = padding.PKCS7(BLOCK_SIZE_BITS).unpadder()
    try:
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as e:
        raise DecryptionError("Invalid padding (wrong passphrase or iterations?)") from e
