"""A seekable reader that repeats a block of data up to a fixed length."""

from __future__ import annotations

import io


def _resolve_seek(position: int, want: int, offset: int, whence: int) -> int:
    """Return the new read position for a seek, or raise if it is out of range."""
    if whence == io.SEEK_SET:
        if offset > want:
            raise EOFError("seek past end of data")
        new_position = offset
    elif whence == io.SEEK_CUR:
        if position + offset > want:
            raise EOFError("seek past end of data")
        new_position = position + offset
    elif whence == io.SEEK_END:
        if offset > 0:
            raise EOFError("seek past end of data")
        if want + offset < 0:
            raise ValueError("seek before start of data")
        new_position = want + offset
    else:
        raise ValueError(f"invalid whence: {whence}")
    if new_position < 0:
        raise ValueError("negative seek position")
    return new_position


class CircularBuffer:
    """Serves ``size`` bytes by cycling over ``data``.

    Seeking only moves the logical position; the data cursor keeps cycling,
    so the reader stays cheap while still allowing uploads to retry.
    """

    def __init__(self, data: bytes, size: int) -> None:
        self.data = bytes(data)
        self.want = size
        self._position = 0
        self._offset = 0

    def reset(self, want: int = 0) -> "CircularBuffer":
        """Rewind to the start; a positive ``want`` replaces the length served."""
        if want > 0:
            self.want = want
        self._position = 0
        self._offset = 0
        return self

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """Move the logical read position and return it."""
        self._position = _resolve_seek(self._position, self.want, offset, whence)
        return self._position

    def tell(self) -> int:
        """Return the logical read position."""
        return self._position

    def read(self, size: int | None = -1) -> bytes:
        """Read up to ``size`` bytes; all that remains if ``size`` is negative."""
        if not self.data:
            raise ValueError("circular buffer has no data")
        remaining = self.want - self._position
        count = remaining if size is None or size < 0 else min(size, remaining)
        if count <= 0:
            return b""
        parts = []
        left = count
        while left:
            if self._offset >= len(self.data):
                self._offset = 0
            chunk = self.data[self._offset:self._offset + left]
            parts.append(chunk)
            self._offset += len(chunk)
            left -= len(chunk)
        self._position += count
        return b"".join(parts)