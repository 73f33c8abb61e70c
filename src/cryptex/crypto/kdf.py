"""Argon2id key derivation for Cryptex."""

from __future__ import annotations

from cryptography.hazmat.primitives.kdf.argon2 import Argon2id

from ..errors import InvalidKeyError, KeyDerivationError, SaltLengthError
from .constants import (
    KDF_LANES,
    KEY_LENGTH,
    MEMLIMIT_INTERACTIVE,
    OPSLIMIT_INTERACTIVE,
    SALT_LENGTH,
)
from .memory import BytesLike, byte_view, require_bytes_like, wipe


def derive_key(passphrase: BytesLike, salt: BytesLike) -> bytearray:
    """Derive a binary key from a passphrase using Argon2id v1.3.

    The cost parameters are the fixed libsodium "interactive" limits, so the
    same passphrase and salt always yield the same key, and that key matches
    ``crypto_pwhash(KEY_LENGTH, ..., ALG_ARGON2ID13)``.

    Mutable arguments (a ``bytearray`` or a writable ``memoryview``) are
    zeroed in place before this function returns, on success and on
    failure. Pass a copy if you need to keep them. Lengths are counted in
    bytes, whatever the item format of a ``memoryview``.

    Args:
        passphrase: The passphrase bytes. Must not be empty.
        salt: A salt of exactly ``SALT_LENGTH`` bytes.

    Returns:
        A fresh ``KEY_LENGTH``-byte buffer. The caller owns it and should
        wipe it once done.

    Raises:
        TypeError: If an argument is not bytes-like or not contiguous.
        SaltLengthError: If the salt has the wrong length.
        InvalidKeyError: If the passphrase is empty.
        KeyDerivationError: If the Argon2id primitive fails.
    """
    require_bytes_like("key", passphrase)
    require_bytes_like("salt", salt)
    passphrase_view = byte_view(passphrase)
    salt_view = byte_view(salt)

    try:
        if len(salt_view) != SALT_LENGTH:
            raise SaltLengthError(SALT_LENGTH, len(salt_view))
        if len(passphrase_view) == 0:
            raise InvalidKeyError("Key must not be empty")

        try:
            kdf = Argon2id(
                salt=bytes(salt_view),
                length=KEY_LENGTH,
                iterations=OPSLIMIT_INTERACTIVE,
                lanes=KDF_LANES,
                memory_cost=MEMLIMIT_INTERACTIVE // 1024,
            )
            return bytearray(kdf.derive(passphrase_view))
        except Exception as e:
            raise KeyDerivationError(f"Key derivation failed: {type(e).__name__}") from e
    finally:
        for view in (passphrase_view, salt_view):
            if not view.readonly:
                wipe(view)
            view.release()
