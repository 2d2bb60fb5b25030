"""A data source producing pseudorandom binary data."""

from __future__ import annotations

import itertools
import random

from warpgen.objects import Object, rand_ascii_bytes
from warpgen.options import Options
from warpgen.scrambler import Scrambler


class RandomSource:
    """Generates objects filled with scrambled pseudorandom data."""

    content_type = "application/octet-stream"

    def __init__(self, options: Options) -> None:
        self.options = options
        seed = options.random.seed
        self._rng = random.Random(seed) if seed is not None else random.Random()
        size = min(options.random.block_size, options.total_size)
        if size <= 0:
            raise ValueError(f"size must be > 0, got {size}")
        data = self._rng.randbytes(size)
        self._scrambler = Scrambler(data, options.total_size, self._rng)
        self._counter = itertools.count(1)
        template = Object(content_type=self.content_type)
        template.set_prefix(options)
        self._prefix = template.prefix

    def next_object(self) -> Object:
        """Return a new object with fresh pseudorandom data."""
        number = next(self._counter)
        tag = rand_ascii_bytes(16, self._rng).decode("ascii")
        obj = Object(content_type=self.content_type, prefix=self._prefix)
        obj.size = self.options.get_size(self._rng)
        obj.set_name(f"{number}.{tag}.rnd")
        obj.reader = self._scrambler.reset(obj.size)
        return obj

    def __str__(self) -> str:
        if self.options.rand_size:
            return f"Random data; random size up to {self.options.total_size} bytes"
        return f"Random data; {self._scrambler.want} bytes total"

    def prefix(self) -> str:
        """Return the prefix objects are placed under, if any."""
        return self._prefix