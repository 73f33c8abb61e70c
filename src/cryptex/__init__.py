"""Cryptex.

Password-based authenticated encryption: XChaCha20-Poly1305 with a key
derived from a passphrase and salt using Argon2id.

Example:
    ```python
    from cryptex import decrypt, encrypt, generate_salt

    salt = generate_salt()
    ciphertext = encrypt(b"You're a certified prince.", b"1-2-3-4-5", salt)

    # Store ciphertext and salt; later:
    plaintext = decrypt(ciphertext, b"1-2-3-4-5", salt)
    ```
"""

from .crypto import (
    KEY_LENGTH,
    NONCE_LENGTH,
    SALT_LENGTH,
    TAG_LENGTH,
    SecretBuffer,
    decrypt,
    derive_key,
    encrypt,
    generate_salt,
)
from .errors import (
    CryptexError,
    DecodingError,
    DecryptionError,
    EncryptionError,
    InvalidKeyError,
    KeyDerivationError,
    NonceLengthError,
    SaltLengthError,
)

__version__ = "4.0.0"

__all__ = [
    # Operations
    "generate_salt",
    "encrypt",
    "decrypt",
    "derive_key",
    "SecretBuffer",
    # Constants
    "SALT_LENGTH",
    "KEY_LENGTH",
    "NONCE_LENGTH",
    "TAG_LENGTH",
    # Errors
    "CryptexError",
    "SaltLengthError",
    "InvalidKeyError",
    "DecodingError",
    "NonceLengthError",
    "DecryptionError",
    "KeyDerivationError",
    "EncryptionError",
    # Version
    "__version__",
]
