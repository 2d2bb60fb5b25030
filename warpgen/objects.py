"""Generated objects and the random helpers used to name and size them."""

from __future__ import annotations

import math
import posixpath
import random
from dataclasses import dataclass
from typing import Any, Iterable

ASCII_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890()"
_ASCII_LETTER_BYTES = ASCII_LETTERS.encode("ascii")


@dataclass
class Object:
    """One generated object: its data reader and metadata."""

    reader: Any = None
    name: str = ""
    content_type: str = ""
    size: int = 0
    prefix: str = ""
    version_id: str = ""

    def set_prefix(self, options: Any) -> None:
        """Set the prefix from the custom prefix and an optional random part."""
        if options.random_prefix <= 0:
            self.prefix = options.custom_prefix
            return
        suffix = rand_ascii_bytes(options.random_prefix, random.Random()).decode("ascii")
        self.prefix = posixpath.normpath(posixpath.join(options.custom_prefix, suffix))

    def set_name(self, name: str) -> None:
        """Set the object name, placed under the prefix if there is one."""
        self.name = f"{self.prefix}/{name}" if self.prefix else name


def prefixes(objects: Iterable[Object]) -> list[str]:
    """Return the distinct prefixes of the objects."""
    return list(dict.fromkeys(obj.prefix for obj in objects))


def merge_object_prefixes(groups: Iterable[Iterable[Object]]) -> list[str]:
    """Return the distinct prefixes across several collections of objects."""
    return list(dict.fromkeys(obj.prefix for group in groups for obj in group))


def rand_ascii_bytes(n: int, rng: random.Random) -> bytes:
    """Return ``n`` pseudorandom ASCII letters, digits or parentheses.

    Cheap filler from a single random draw; not suitable as real randomness.
    """
    value = rng.getrandbits(64)
    rnd = value & 0xFFFFFFFF
    rnd2 = value >> 32
    out = bytearray(n)
    for i in range(n):
        out[i] = _ASCII_LETTER_BYTES[(rnd >> 16) % len(_ASCII_LETTER_BYTES)]
        rnd ^= rnd2
        rnd = (rnd * 2654435761) & 0xFFFFFFFF
    return bytes(out)


def get_exp_rand_size(rng: random.Random, min_size: int, max_size: int) -> int:
    """Return an exponentially distributed random size up to and including ``max_size``.

    Without a minimum the smallest scale is 128 bytes or 256 times below the
    maximum, whichever is larger.
    """
    span = max_size - min_size
    if span < 10:
        if span <= 0:
            return 0
        return 1 + min_size + rng.randrange(span)
    log_size_max = math.log2(max_size - 1)
    log_size_min = max(7.0, log_size_max - 8)
    if min_size > 1:
        log_size_min = math.log2(min_size - 1)
    delta = log_size_max - log_size_min
    draw = rng.random()
    log_size = draw * delta
    if log_size > 1:
        return 1 + int(math.pow(2, log_size + log_size_min))
    # The lowest part is spread evenly.
    return 1 + min_size + int(draw * math.pow(2, log_size_min + 1))