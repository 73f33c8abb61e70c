"""Cryptographic operations for Cryptex."""

from .cipher import decrypt, encrypt, generate_salt
from .constants import (
    AEAD_ALGORITHM,
    KDF_ALGORITHM,
    KDF_LANES,
    KEY_LENGTH,
    MEMLIMIT_INTERACTIVE,
    NONCE_LENGTH,
    OPSLIMIT_INTERACTIVE,
    SALT_LENGTH,
    TAG_LENGTH,
)
from .kdf import derive_key
from .memory import SecretBuffer, wipe
from .utils import from_hex, to_hex

__all__ = [
    "AEAD_ALGORITHM",
    "KDF_ALGORITHM",
    "KDF_LANES",
    "KEY_LENGTH",
    "MEMLIMIT_INTERACTIVE",
    "NONCE_LENGTH",
    "OPSLIMIT_INTERACTIVE",
    "SALT_LENGTH",
    "TAG_LENGTH",
    "SecretBuffer",
    "decrypt",
    "derive_key",
    "encrypt",
    "from_hex",
    "generate_salt",
    "to_hex",
    "wipe",
]
