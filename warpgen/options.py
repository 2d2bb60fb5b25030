"""Options that select and configure a data source."""

from __future__ import annotations

import dataclasses
import enum
import random
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from warpgen.objects import get_exp_rand_size


class SourceKind(enum.Enum):
    """The kind of data a generator produces."""

    RANDOM = "random"
    CSV = "csv"


@dataclass(frozen=True)
class CsvOpts:
    """Options for CSV data; builder methods return updated copies."""

    cols: int = 15
    rows: int = 1000
    separator: bytes = b","
    seed: Optional[int] = None
    min_len: int = 5
    max_len: int = 15

    def size(self, cols: int, rows: int) -> "CsvOpts":
        """Set the number of columns and rows."""
        return dataclasses.replace(self, cols=cols, rows=rows)

    def comma(self, c: Union[str, bytes, int]) -> "CsvOpts":
        """Set the field separator, a single ASCII character."""
        if isinstance(c, int):
            separator = bytes([c])
        elif isinstance(c, str):
            separator = c.encode("ascii")
        else:
            separator = bytes(c)
        if len(separator) != 1:
            raise ValueError(f"csv: separator must be one byte, got {c!r}")
        return dataclasses.replace(self, separator=separator)

    def field_len(self, min_len: int, max_len: int) -> "CsvOpts":
        """Set the shortest and longest field length."""
        return dataclasses.replace(self, min_len=min_len, max_len=max_len)

    def rng_seed(self, seed: int) -> "CsvOpts":
        """Use a fixed random seed for predictable output."""
        return dataclasses.replace(self, seed=seed)

    def validate(self) -> None:
        """Raise ValueError if the options are inconsistent."""
        if self.rows < 0:
            raise ValueError("csv: rows <= 0")
        if self.cols < 0:
            raise ValueError("csv: cols <= 0")
        if self.min_len > self.max_len:
            raise ValueError(f"csv field length: min:{self.min_len} > max:{self.max_len}")

    def apply(self) -> "Option":
        """Return an option selecting CSV data with these settings."""

        def option(opts: Options) -> None:
            self.validate()
            opts.csv = self
            opts.source = SourceKind.CSV

        return option


@dataclass(frozen=True)
class RandomOpts:
    """Options for random data; builder methods return updated copies."""

    seed: Optional[int] = None
    block_size: int = 128 << 10

    def rng_seed(self, seed: int) -> "RandomOpts":
        """Use a fixed random seed for predictable output."""
        return dataclasses.replace(self, seed=seed)

    def size(self, size: int) -> "RandomOpts":
        """Set the block size that is scrambled to fill the output."""
        return dataclasses.replace(self, block_size=size)

    def validate(self) -> None:
        """Raise ValueError if the options are inconsistent."""
        if self.block_size <= 0:
            raise ValueError("random: size <= 0")

    def apply(self) -> "Option":
        """Return an option selecting random data with these settings."""

        def option(opts: Options) -> None:
            self.validate()
            opts.random = self
            opts.source = SourceKind.RANDOM

        return option


@dataclass
class Options:
    """Settings collected from options before a source is built."""

    source: SourceKind = SourceKind.RANDOM
    min_size: int = 0
    total_size: int = 1 << 20
    rand_size: bool = False
    custom_prefix: str = ""
    csv: CsvOpts = field(default_factory=CsvOpts)
    random: RandomOpts = field(default_factory=RandomOpts)
    random_prefix: int = 0

    def get_size(self, rng: random.Random) -> int:
        """Return the size for the next object."""
        if not self.rand_size:
            return self.total_size
        return get_exp_rand_size(rng, self.min_size, self.total_size)


Option = Callable[[Options], None]


def with_csv() -> CsvOpts:
    """Return default CSV options."""
    return CsvOpts()


def with_random_data() -> RandomOpts:
    """Return default random data options."""
    return RandomOpts()


def with_min_max_size(min_size: int, max_size: int) -> Option:
    """Set the smallest and largest size of generated data."""

    def option(opts: Options) -> None:
        if min_size <= 0:
            raise ValueError("min size must be > 0")
        if max_size < 0:
            raise ValueError("max size must be >= 0")
        if min_size > max_size:
            raise ValueError("min size must be <= max size")
        if opts.rand_size and max_size < 256:
            raise ValueError("random sized objects should be at least 256 bytes")
        opts.total_size = max_size
        opts.min_size = min_size

    return option


def with_size(n: int) -> Option:
    """Set the size of generated data."""

    def option(opts: Options) -> None:
        if n <= 0:
            raise ValueError("size must be > 0")
        if opts.rand_size and opts.total_size < 256:
            raise ValueError("random sized objects should be at least 256 bytes")
        opts.total_size = n

    return option


def with_random_size(enabled: bool) -> Option:
    """Randomize object sizes up to the total size."""

    def option(opts: Options) -> None:
        if 0 < opts.total_size < 256:
            raise ValueError("random sized objects should be at least 256 bytes")
        opts.rand_size = enabled

    return option


def with_custom_prefix(prefix: str) -> Option:
    """Place all generated objects under a custom prefix."""

    def option(opts: Options) -> None:
        opts.custom_prefix = prefix

    return option


def with_prefix_size(n: int) -> Option:
    """Set the length of the random prefix, from 0 to 16."""

    def option(opts: Options) -> None:
        if n < 0 or n > 16:
            raise ValueError("prefix size must be >= 0 and <= 16")
        opts.random_prefix = n

    return option