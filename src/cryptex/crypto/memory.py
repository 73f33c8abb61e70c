"""Scoped secret buffers for Cryptex.

Every buffer that holds key material lives inside a :class:`SecretBuffer`
and is zeroed when its ``with`` block exits, whichever way it exits.
"""

from __future__ import annotations

from types import TracebackType

BytesLike = bytes | bytearray | memoryview


def require_bytes_like(name: str, value: object) -> None:
    """Reject anything that is not raw bytes, including text.

    Raises:
        TypeError: If ``value`` is not bytes, bytearray or memoryview.
    """
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like, not {type(value).__name__}")


def byte_view(data: BytesLike) -> memoryview:
    """Return a flat one-byte-per-item view of ``data``.

    Lengths taken from the view count bytes, whatever the format of the
    original buffer.

    Raises:
        TypeError: If ``data`` is not C-contiguous.
    """
    return memoryview(data).cast("B")


def wipe(buffer: bytearray | memoryview) -> None:
    """Overwrite a mutable buffer or writable view with zero bytes in place.

    Args:
        buffer: The buffer to clear.
    """
    buffer[:] = bytes(len(buffer))


class SecretBuffer:
    """A call-owned copy of secret bytes that is wiped on scope exit.

    Example:
        ```python
        with SecretBuffer(passphrase) as secret:
            use(secret.data)
        # secret.data is now all zeros
        ```
    """

    __slots__ = ("_data",)

    def __init__(self, data: BytesLike = b"") -> None:
        self._data = bytearray(data)

    @classmethod
    def adopt(cls, buffer: bytearray) -> SecretBuffer:
        """Take ownership of an existing bytearray without copying it.

        Args:
            buffer: The buffer to own. It will be wiped with this guard.

        Returns:
            A guard wrapping ``buffer``.
        """
        guard = cls()
        guard._data = buffer
        return guard

    @property
    def data(self) -> bytearray:
        """The underlying mutable buffer."""
        return self._data

    def wipe(self) -> None:
        """Zero the buffer. Safe to call more than once."""
        wipe(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"SecretBuffer(<{len(self._data)} bytes>)"

    def __enter__(self) -> SecretBuffer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.wipe()
