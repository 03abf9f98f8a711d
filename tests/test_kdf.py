# file: tests/test_kdf.py

"""
Unit tests for the EVP-style key derivation.

Known answers were produced with `openssl enc -P -md <hash>`, which uses
the same EVP_BytesToKey construction with one iteration, and with chained
`openssl dgst -sha384 -binary` for the multi-iteration case.
"""

import pytest
from cryptojs_aes.kdf import (
    derive,
    evp_kdf,
    DerivedKeyMaterial,
    KEY_SIZE,
    IV_SIZE,
)


SALT = bytes.fromhex("0102030405060708")


class TestDerive:
    """Test the fixed SHA-384 / AES-256 derivation."""

    def test_single_round_equals_plain_sha384(self):
        """With one iteration the stream is SHA-384(passphrase || salt)."""
        material = derive(b"password", bytes(8), 1)

        expected = bytes.fromhex(
            "219af3fdbe791596e2561583a95ea5a541461e8fe9bf11916ff2d8aacb046044"
            "5c46038fa9809e2f182ce86cb498cb3c"
        )
        assert material.key + material.iv == expected

    def test_openssl_key_and_iv(self):
        material = derive(b"pw", SALT, 1)

        assert material.key == bytes.fromhex(
            "306a26d98c60c2c93c340867ee51b0e9eb5b2617f2cd326a2c867db96d4d9493"
        )
        assert material.iv == bytes.fromhex("4b6d76c0811bb34a326bf3409d01cf8f")

    def test_multiple_iterations(self):
        """Three iterations = SHA-384 applied three times in a chain."""
        material = derive(b"pw", SALT, 3)

        assert material.key == bytes.fromhex(
            "ccd9ee6b56bd9d1cd312a73a6d543eaa7591f4eb2f8dd909ed1322aff45ef207"
        )
        assert material.iv == bytes.fromhex("88e0735bad8206881dc454268e15cdba")

    def test_sizes(self):
        material = derive(b"pw", SALT, 1)

        assert isinstance(material, DerivedKeyMaterial)
        assert len(material.key) == KEY_SIZE == 32
        assert len(material.iv) == IV_SIZE == 16

    def test_deterministic(self):
        first = derive(b"same passphrase", SALT, 5)
        second = derive(b"same passphrase", SALT, 5)

        assert first == second

    def test_salt_changes_output(self):
        assert derive(b"pw", SALT, 1) != derive(b"pw", bytes(8), 1)

    def test_iterations_change_output(self):
        assert derive(b"pw", SALT, 1) != derive(b"pw", SALT, 2)

    def test_empty_passphrase(self):
        """An empty passphrase is valid input."""
        material = derive(b"", SALT, 1)
        assert len(material.key) == 32

    def test_zero_iterations_rejected(self):
        with pytest.raises(ValueError, match="positive integer"):
            derive(b"pw", SALT, 0)

    def test_non_integer_iterations_rejected(self):
        with pytest.raises(ValueError):
            derive(b"pw", SALT, 1.5)

    def test_text_passphrase_rejected(self):
        with pytest.raises(TypeError, match="passphrase"):
            derive("pw", SALT, 1)


class TestEvpKdf:
    """Test the general streaming loop."""

    def test_sha384_yields_one_block(self):
        derived = evp_kdf(b"pw", SALT, 1)
        assert len(derived) == 48

    def test_key_and_iv_are_contiguous_slices(self):
        derived = evp_kdf(b"pw", SALT, 2)
        material = derive(b"pw", SALT, 2)

        assert derived[:32] == material.key
        assert derived[32:48] == material.iv

    def test_md5_needs_three_rounds(self):
        """16-byte digests need three chained rounds for 48 bytes."""
        derived = evp_kdf(b"pw", SALT, 1, hash_name="md5")

        assert len(derived) == 48
        assert derived == bytes.fromhex(
            "222776d258e716efdaa0cf5a7e504b9d21982575418a44be8d93693294778eea"
            "f44a4ca59001d91d765385d7bea75845"
        )

    def test_sha1_excess_bytes(self):
        """20-byte digests overshoot to 60 bytes; only 48 are used."""
        derived = evp_kdf(b"pw", SALT, 1, hash_name="sha1")

        assert len(derived) == 60
        assert derived[:48] == bytes.fromhex(
            "6c3342df2b43eabec78300bed103f9b3c775d7aea86369d32497461e2b80fdf3"
            "0b40c84c84dfda216374347c2c83d57f"
        )

    def test_custom_sizes(self):
        derived = evp_kdf(b"pw", SALT, 1, key_size=64, iv_size=16)
        assert len(derived) == 96

    def test_unknown_hash(self):
        with pytest.raises(ValueError, match="Unsupported hash"):
            evp_kdf(b"pw", SALT, 1, hash_name="whirlpool")

    @pytest.mark.parametrize("key_size, iv_size", [(0, 0), (0, 16), (32, 0), (-16, 16), (32, -1)])
    def test_non_positive_sizes_rejected(self, key_size, iv_size):
        with pytest.raises(ValueError, match="must be a positive integer"):
            evp_kdf(b"pw", SALT, 1, key_size=key_size, iv_size=iv_size)
