"""Encryption and decryption operations for Cryptex.

Ciphertexts are XChaCha20-Poly1305-IETF over a key derived with Argon2id,
encoded as ``hex(nonce || ciphertext || tag)``.
"""

from __future__ import annotations

import logging
import os
from contextlib import ExitStack

from nacl.bindings import (
    crypto_aead_xchacha20poly1305_ietf_decrypt,
    crypto_aead_xchacha20poly1305_ietf_encrypt,
)
from nacl.exceptions import CryptoError

from ..errors import DecryptionError, EncryptionError, NonceLengthError
from .constants import (
    AEAD_ALGORITHM,
    KDF_ALGORITHM,
    NONCE_LENGTH,
    SALT_LENGTH,
    TAG_LENGTH,
)
from .kdf import derive_key
from .memory import BytesLike, SecretBuffer, require_bytes_like
from .utils import from_hex, to_hex

logger = logging.getLogger("cryptex")


def generate_salt() -> bytes:
    """Generate a random salt suitable for :func:`encrypt` and :func:`decrypt`.

    Returns:
        ``SALT_LENGTH`` bytes from the operating system CSPRNG.
    """
    return os.urandom(SALT_LENGTH)


def encrypt(
    plaintext: BytesLike,
    key: BytesLike,
    salt: BytesLike,
    associated_data: BytesLike = b"",
) -> str:
    """Encrypt data with a passphrase.

    A fresh random nonce is generated for every call, so encrypting the same
    input twice gives two different ciphertexts.

    Args:
        plaintext: The data to encrypt.
        key: The passphrase.
        salt: A salt of exactly ``SALT_LENGTH`` bytes, see :func:`generate_salt`.
        associated_data: Optional context bound to the ciphertext. The same
            value must be passed to :func:`decrypt`.

    Returns:
        The lowercase hex encoding of ``nonce || ciphertext || tag``.

    Raises:
        TypeError: If an argument is not bytes-like.
        SaltLengthError: If the salt has the wrong length.
        InvalidKeyError: If the key is empty.
        KeyDerivationError: If key derivation fails.
        EncryptionError: If the cipher fails.
    """
    require_bytes_like("plaintext", plaintext)
    require_bytes_like("key", key)
    require_bytes_like("salt", salt)
    require_bytes_like("associated_data", associated_data)

    with ExitStack() as stack:
        message = stack.enter_context(SecretBuffer(plaintext))
        derived_key = _derive_scoped_key(stack, key, salt)
        nonce = stack.enter_context(SecretBuffer(os.urandom(NONCE_LENGTH)))

        try:
            sealed = crypto_aead_xchacha20poly1305_ietf_encrypt(
                bytes(message),
                bytes(associated_data),
                bytes(nonce),
                bytes(derived_key),
            )
        except CryptoError as e:
            raise EncryptionError("Encryption failure") from e

        logger.debug(
            "Encrypted %d bytes with %s, key from %s", len(message), AEAD_ALGORITHM, KDF_ALGORITHM
        )
        return to_hex(bytes(nonce) + sealed)


def decrypt(
    ciphertext: str,
    key: BytesLike,
    salt: BytesLike,
    associated_data: BytesLike = b"",
) -> bytes:
    """Authenticate and decrypt data produced by :func:`encrypt`.

    Args:
        ciphertext: The hex string returned by :func:`encrypt`.
        key: The passphrase used to encrypt.
        salt: The salt used to encrypt.
        associated_data: The associated data used to encrypt, if any.

    Returns:
        The decrypted plaintext bytes.

    Raises:
        TypeError: If an argument has the wrong type.
        SaltLengthError: If the salt has the wrong length.
        InvalidKeyError: If the key is empty.
        KeyDerivationError: If key derivation fails.
        DecodingError: If the ciphertext is not valid hex.
        NonceLengthError: If the decoded ciphertext is shorter than a nonce.
        DecryptionError: If authentication fails. Tampering, truncation and a
            wrong key, salt or associated data all look the same.
    """
    if not isinstance(ciphertext, str):
        raise TypeError(f"ciphertext must be str, not {type(ciphertext).__name__}")
    require_bytes_like("key", key)
    require_bytes_like("salt", salt)
    require_bytes_like("associated_data", associated_data)

    with ExitStack() as stack:
        derived_key = _derive_scoped_key(stack, key, salt)

        decoded = from_hex(ciphertext)
        if len(decoded) < NONCE_LENGTH:
            raise NonceLengthError(
                f"Nonce length mismatch: got {len(decoded)} bytes, need at least {NONCE_LENGTH}"
            )

        nonce = decoded[:NONCE_LENGTH]
        sealed = stack.enter_context(SecretBuffer(decoded[NONCE_LENGTH:]))

        # Anything shorter than a tag cannot authenticate
        if len(sealed) < TAG_LENGTH:
            logger.debug("Decryption failed: sealed output shorter than tag")
            raise DecryptionError("Decryption failed")

        try:
            plaintext = crypto_aead_xchacha20poly1305_ietf_decrypt(
                bytes(sealed),
                bytes(associated_data),
                nonce,
                bytes(derived_key),
            )
        except CryptoError as e:
            logger.debug("Decryption failed: authentication check did not pass")
            raise DecryptionError("Decryption failed") from e

        logger.debug(
            "Decrypted %d bytes with %s, key from %s", len(plaintext), AEAD_ALGORITHM, KDF_ALGORITHM
        )
        return plaintext


def _derive_scoped_key(stack: ExitStack, key: BytesLike, salt: BytesLike) -> SecretBuffer:
    """Derive a key from call-owned copies of ``key`` and ``salt``.

    The copies and the derived key are registered on ``stack`` so they are
    wiped when the caller's scope exits. Caller objects are left untouched.
    """
    key_copy = stack.enter_context(SecretBuffer(key))
    salt_copy = stack.enter_context(SecretBuffer(salt))
    return stack.enter_context(SecretBuffer.adopt(derive_key(key_copy.data, salt_copy.data)))
