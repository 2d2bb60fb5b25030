"""A seekable reader producing pseudorandom data by encrypting a repeating block."""

from __future__ import annotations

import io
import random
import sys

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from warpgen.circular import CircularBuffer, _resolve_seek

_FRAGMENT_SIZE = 16 * 1024
_NONCE_PREFIX_SIZE = 8


class Scrambler:
    """Serves ``size`` bytes of an AES-GCM encrypted stream of ``data``.

    The stream never rewinds, so rereading after a seek or reset yields
    fresh pseudorandom bytes of the requested length.
    """

    def __init__(self, data: bytes, size: int, rng: random.Random) -> None:
        key = rng.randbytes(16)
        self._aead = AESGCM(key)
        self._nonce_prefix = key[:_NONCE_PREFIX_SIZE]
        self._sequence = 0
        self._source = CircularBuffer(data, sys.maxsize)
        self._pending = bytearray()
        self.want = size
        self._position = 0

    def _next_fragment(self) -> bytes:
        plain = self._source.read(_FRAGMENT_SIZE)
        nonce = self._nonce_prefix + self._sequence.to_bytes(4, "little")
        self._sequence = (self._sequence + 1) & 0xFFFFFFFF
        return self._aead.encrypt(nonce, plain, None)

    def reset(self, want: int = 0) -> "Scrambler":
        """Rewind to the start; a positive ``want`` replaces the length served."""
        if want > 0:
            self.want = want
        self._position = 0
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
        remaining = self.want - self._position
        count = remaining if size is None or size < 0 else min(size, remaining)
        if count <= 0:
            return b""
        while len(self._pending) < count:
            self._pending += self._next_fragment()
        out = bytes(self._pending[:count])
        del self._pending[:count]
        self._position += count
        return out