# file: cryptojs_aes/deterministic.py
"""
Salt sources for encryption.

encrypt() takes any callable mapping a byte count to that many bytes. The
system CSPRNG is the default; the fixed and seeded sources make cipher text
reproducible in tests and fixtures.
"""

import os
import threading
from typing import Callable

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF


RandomSource = Callable[[int], bytes]

# Domain separation for seeded salts
SEED_DOMAIN_SALT = b"cryptojs-aes-seeded-salt-v1"


def system_random_source(n: int) -> bytes:
    """Return n bytes from the operating system CSPRNG."""
    return os.urandom(n)


class FixedSaltSource:
    """
    Returns the same bytes on every call.

    Only for tests: reusing a salt with the same passphrase reproduces the
    same key and IV.
    """

    def __init__(self, salt: bytes):
        self.salt = bytes(salt)

    def __call__(self, n: int) -> bytes:
        if n != len(self.salt):
            raise ValueError(f"Fixed salt is {len(self.salt)} bytes, {n} requested")
        return self.salt


class SeededSaltSource:
    """
    Deterministic salt stream derived from an integer seed via HKDF-SHA256.

    Call i returns HKDF(seed, info="salt" || i), so a run with the same
    seed produces the same sequence of salts. Calls from several threads
    each get a distinct counter value.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self.counter = 0
        self._lock = threading.Lock()

    def __call__(self, n: int) -> bytes:
        with self._lock:
            index = self.counter
            self.counter += 1

        hkdf = HKDF(
            algorithm=hashes.SHA256(),
            length=n,
            salt=SEED_DOMAIN_SALT,
            info=b"salt" + index.to_bytes(8, 'big'),
        )
        return hkdf.derive(self.seed.to_bytes(8, 'big'))
