#!/usr/bin/env python3
"""Testhelper CLI for Cryptex interoperability testing.

Binary fields are exchanged as hex strings in JSON on stdin/stdout.
"""

import json
import sys

from cryptex import CryptexError, decrypt, encrypt, generate_salt


def _read_request() -> dict[str, str]:
    data = json.loads(sys.stdin.read())
    if not isinstance(data, dict):
        raise ValueError("request must be a JSON object")
    return data


def cmd_generate_salt() -> None:
    """Output a fresh salt."""
    print(json.dumps({"salt": generate_salt().hex()}))


def cmd_encrypt() -> None:
    """Encrypt the request's plaintext and output the ciphertext."""
    data = _read_request()
    ciphertext = encrypt(
        bytes.fromhex(data["plaintext"]),
        bytes.fromhex(data["key"]),
        bytes.fromhex(data["salt"]),
        bytes.fromhex(data.get("aad", "")),
    )
    print(json.dumps({"ciphertext": ciphertext}))


def cmd_decrypt() -> None:
    """Decrypt the request's ciphertext and output the plaintext."""
    data = _read_request()
    plaintext = decrypt(
        data["ciphertext"],
        bytes.fromhex(data["key"]),
        bytes.fromhex(data["salt"]),
        bytes.fromhex(data.get("aad", "")),
    )
    print(json.dumps({"plaintext": plaintext.hex()}))


COMMANDS = {
    "generate-salt": cmd_generate_salt,
    "encrypt": cmd_encrypt,
    "decrypt": cmd_decrypt,
}


def main() -> None:
    """Main entry point."""
    if len(sys.argv) < 2:
        print("usage: testhelper.py <command>", file=sys.stderr)
        sys.exit(1)

    command = COMMANDS.get(sys.argv[1])
    if command is None:
        print(f"unknown command: {sys.argv[1]}", file=sys.stderr)
        sys.exit(1)

    try:
        command()
    except CryptexError as e:
        print(json.dumps({"error": type(e).__name__}), file=sys.stderr)
        sys.exit(1)
    except (KeyError, TypeError, ValueError) as e:
        # Missing field, bad JSON or a field that is not a hex string
        print(json.dumps({"error": "InvalidRequest", "detail": str(e)}), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
