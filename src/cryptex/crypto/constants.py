"""Cryptographic constants for Cryptex.

Values match libsodium so ciphertexts interoperate with other sodium-based
implementations of the same format.
"""

# Argon2id salt size (crypto_pwhash_SALTBYTES)
SALT_LENGTH = 16

# XChaCha20-Poly1305-IETF sizes
KEY_LENGTH = 32
NONCE_LENGTH = 24
TAG_LENGTH = 16

# Argon2id v1.3 "interactive" cost (crypto_pwhash_*_INTERACTIVE)
OPSLIMIT_INTERACTIVE = 2
MEMLIMIT_INTERACTIVE = 67_108_864
# libsodium always runs Argon2 with a single lane
KDF_LANES = 1

KDF_ALGORITHM = "argon2id13"
AEAD_ALGORITHM = "xchacha20poly1305-ietf"
