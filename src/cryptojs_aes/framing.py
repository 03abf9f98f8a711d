# file: cryptojs_aes/framing.py
"""
Frame assembly and parsing for CryptoJS "Salted__" cipher text.

Frame structure (16 + N bytes):
    +----------+----------+-----------------+
    | Salted__ |  <salt>  |  <cipher text>  |
    +----------+----------+-----------------+
    |  8 bytes |  8 bytes | variable length |
    +----------+----------+-----------------+
"""

import logging
from dataclasses import dataclass

from .crypto_errors import FormatError


logger = logging.getLogger(__name__)

SALT_HEADER = b"Salted__"
HEADER_SIZE = 8
SALT_SIZE = 8
BLOCK_SIZE = 16  # AES block size in bytes
MIN_FRAME_SIZE = HEADER_SIZE + SALT_SIZE


@dataclass(frozen=True)
class CipherFrame:
    """One parsed or freshly assembled cipher text frame."""
    header: bytes
    salt: bytes
    body: bytes

    def to_bytes(self) -> bytes:
        return self.header + self.salt + self.body

    @classmethod
    def from_bytes(cls, frame_bytes: bytes) -> "CipherFrame":
        return parse_frame(frame_bytes)

    @property
    def has_salt_header(self) -> bool:
        return self.header == SALT_HEADER


def assemble_frame(salt: bytes, body: bytes) -> CipherFrame:
    """
    Assemble an encrypted frame from its components.

    Args:
        salt: 8-byte KDF salt
        body: AES-CBC output (padded, multiple of 16 bytes)

    Returns:
        CipherFrame carrying the constant "Salted__" header

    Raises:
        ValueError: If salt is not exactly 8 bytes
    """
    if len(salt) != SALT_SIZE:
        raise ValueError(f"Salt must be {SALT_SIZE} bytes, got {len(salt)}")

    return CipherFrame(header=SALT_HEADER, salt=bytes(salt), body=bytes(body))


def parse_frame(frame_bytes: bytes, strict_header: bool = False) -> CipherFrame:
    """
    Parse raw frame bytes by fixed offsets.

    The header is skipped, not checked, unless strict_header is set. This
    keeps frames with a damaged header but an intact salt and body
    decryptable, as CryptoJS itself does.

    Args:
        frame_bytes: Base64-decoded cipher text
        strict_header: Reject frames whose first 8 bytes are not "Salted__"

    Returns:
        CipherFrame with header, salt and body slices

    Raises:
        FormatError: If the frame is shorter than 16 bytes, or the header
            does not match in strict mode
    """
    if len(frame_bytes) < MIN_FRAME_SIZE:
        raise FormatError(
            f"Frame too short: {len(frame_bytes)} bytes (minimum {MIN_FRAME_SIZE})"
        )

    header = bytes(frame_bytes[:HEADER_SIZE])
    salt = bytes(frame_bytes[HEADER_SIZE:MIN_FRAME_SIZE])
    body = bytes(frame_bytes[MIN_FRAME_SIZE:])

    if header != SALT_HEADER:
        if strict_header:
            raise FormatError(f"Unexpected frame header: {header!r}")
        logger.debug("Frame header %r is not %r, ignoring", header, SALT_HEADER)

    return CipherFrame(header=header, salt=salt, body=body)
