"""Building data sources from options."""

from __future__ import annotations

from typing import Callable, Union

from warpgen.csv_source import CsvSource
from warpgen.options import Option, Options, SourceKind
from warpgen.random_source import RandomSource

Source = Union[RandomSource, CsvSource]

_SOURCES: dict = {
    SourceKind.RANDOM: RandomSource,
    SourceKind.CSV: CsvSource,
}


def _collect(opts: tuple) -> Options:
    options = Options()
    for opt in opts:
        opt(options)
    if options.source not in _SOURCES:
        raise ValueError(f"unknown generator source: {options.source!r}")
    return options


def new(*args: Option) -> Source:
    """Return a data source configured by the given options."""
    options = _collect(args)
    return _SOURCES[options.source](options)


def new_fn(*args: Option) -> Callable[[], Source]:
    """Validate the options and return a factory building fresh sources from them."""
    options = _collect(args)
    factory = _SOURCES[options.source]

    def make() -> Source:
        return factory(options)

    return make