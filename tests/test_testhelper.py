"""Tests for the scripts/testhelper.py interop CLI."""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path
from typing import Any

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "testhelper.py"


def run_helper(*args: str, request: dict[str, Any] | None = None) -> subprocess.CompletedProcess[str]:
    """Run the helper with an optional JSON request on stdin."""
    return subprocess.run(
        [sys.executable, str(SCRIPT), *args],
        input=json.dumps(request) if request is not None else "",
        capture_output=True,
        text=True,
        timeout=60,
    )


class TestTesthelper:
    """End-to-end tests for the interop helper."""

    def test_round_trip(self) -> None:
        """Test generate-salt, encrypt and decrypt through the CLI."""
        salt = json.loads(run_helper("generate-salt").stdout)["salt"]
        assert len(bytes.fromhex(salt)) == 16

        key = b"1-2-3-4-5".hex()
        plaintext = "You're a certified prince.".encode().hex()

        encrypted = run_helper(
            "encrypt", request={"plaintext": plaintext, "key": key, "salt": salt}
        )
        assert encrypted.returncode == 0, encrypted.stderr
        ciphertext = json.loads(encrypted.stdout)["ciphertext"]

        decrypted = run_helper(
            "decrypt", request={"ciphertext": ciphertext, "key": key, "salt": salt}
        )
        assert decrypted.returncode == 0, decrypted.stderr
        assert json.loads(decrypted.stdout)["plaintext"] == plaintext

    def test_error_reports_kind(self) -> None:
        """Test that library errors are reported by class name."""
        result = run_helper(
            "decrypt",
            request={"ciphertext": "not-valid-hex", "key": "00", "salt": "00" * 16},
        )
        assert result.returncode == 1
        assert json.loads(result.stderr) == {"error": "DecodingError"}

    def test_malformed_request_reported(self) -> None:
        """Test that bad JSON fields are reported as InvalidRequest, not a traceback."""
        salt = "00" * 16
        for request in (
            {"plaintext": "00", "salt": salt},
            {"plaintext": "zz", "key": "00", "salt": salt},
            {"plaintext": 5, "key": "00", "salt": salt},
        ):
            result = run_helper("encrypt", request=request)
            assert result.returncode == 1
            assert json.loads(result.stderr)["error"] == "InvalidRequest"
            assert "Traceback" not in result.stderr

    def test_invalid_json_reported(self) -> None:
        """Test that a non-JSON request is reported as InvalidRequest."""
        result = subprocess.run(
            [sys.executable, str(SCRIPT), "decrypt"],
            input="not json",
            capture_output=True,
            text=True,
            timeout=60,
        )
        assert result.returncode == 1
        assert json.loads(result.stderr)["error"] == "InvalidRequest"

    def test_unknown_command(self) -> None:
        """Test that an unknown command exits with usage."""
        result = run_helper("rotate-keys")
        assert result.returncode == 1
        assert "unknown command" in result.stderr

    def test_missing_command(self) -> None:
        """Test that no command prints usage."""
        result = run_helper()
        assert result.returncode == 1
        assert "usage" in result.stderr
