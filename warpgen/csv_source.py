"""A data source producing CSV text of random ASCII fields."""

from __future__ import annotations

import random

from warpgen.circular import CircularBuffer
from warpgen.objects import Object, rand_ascii_bytes
from warpgen.options import Options


class CsvSource:
    """Generates objects filled with CSV rows of random ASCII fields.

    Every object gets freshly generated rows; the rows are repeated until
    the configured total size has been served.
    """

    content_type = "text/csv"

    def __init__(self, options: Options) -> None:
        self.options = options
        csv = options.csv
        self._rng = random.Random(csv.seed) if csv.seed is not None else random.Random()
        self._buffer = CircularBuffer(b"", options.total_size)
        template = Object(content_type=self.content_type, size=0)
        template.set_prefix(options)
        self._prefix = template.prefix

    def _build_rows(self) -> bytes:
        csv = self.options.csv
        separator = csv.separator
        lines = []
        for _ in range(csv.rows):
            fields = []
            for _ in range(csv.cols):
                length = csv.min_len
                if csv.min_len != csv.max_len:
                    length += self._rng.randrange(csv.max_len - csv.min_len)
                fields.append(rand_ascii_bytes(length, self._rng))
            if fields:
                lines.append(separator.join(fields) + b"\n")
        return b"".join(lines)

    def next_object(self) -> Object:
        """Return a new object with freshly generated CSV data."""
        obj = Object(content_type=self.content_type, prefix=self._prefix)
        obj.size = self.options.get_size(self._rng)
        self._buffer.data = self._build_rows()
        obj.reader = self._buffer.reset(0)
        name = rand_ascii_bytes(16, self._rng).decode("ascii")
        obj.set_name(name + ".csv")
        return obj

    def __str__(self) -> str:
        csv = self.options.csv
        return f"CSV data. {csv.cols} columns, {csv.rows} rows."

    def prefix(self) -> str:
        """Return the prefix objects are placed under, if any."""
        return self._prefix