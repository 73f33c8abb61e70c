"""Error hierarchy for Cryptex."""

from __future__ import annotations


class CryptexError(Exception):
    """Base exception for all Cryptex errors."""

    pass


class SaltLengthError(CryptexError):
    """Salt argument does not have the required length.

    Attributes:
        expected: The required salt length in bytes.
        actual: The length that was supplied.
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Bad salt length: expected {expected} bytes, got {actual}")


class InvalidKeyError(CryptexError):
    """Passphrase is empty."""

    pass


class DecodingError(CryptexError):
    """Ciphertext string is not valid hexadecimal."""

    pass


class NonceLengthError(CryptexError):
    """Decoded ciphertext is too short to contain a nonce."""

    pass


class DecryptionError(CryptexError):
    """Authentication or decryption failure.

    Raised for tampered data, truncated data and a wrong key or salt alike.
    The causes are deliberately not distinguished.
    """

    pass


class KeyDerivationError(CryptexError):
    """The password hashing primitive reported an internal failure."""

    pass


class EncryptionError(CryptexError):
    """The AEAD primitive reported an internal failure while sealing."""

    pass
