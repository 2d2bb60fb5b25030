# warpgen

`warpgen` produces synthetic objects for benchmarking object storage. Each
object (`warpgen.objects.Object`) has a generated `name`, a `prefix`, a
`content_type`, a `size` and a seekable `reader`. The reader serves exactly
`size` bytes and can be rewound with `seek`, which lets an upload be retried.

There are two kinds of data:

- **Random data** (`application/octet-stream`), made by
  `warpgen.random_source.RandomSource`. A seed block is encrypted with
  AES-GCM into a stream of pseudorandom bytes. This is the default.
- **CSV data** (`text/csv`), made by `warpgen.csv_source.CsvSource`. Rows of
  random ASCII fields. The column count, row count, separator and field
  lengths can all be set. The generated rows are repeated until the object
  size is reached.

## Installation

```
pip install warpgen
```

## Usage

Build a source from options with `warpgen.generator.new`, then ask it for
objects with `next_object()`:

```python
import io

from warpgen.generator import new
from warpgen.options import with_csv, with_random_data, with_size, with_prefix_size

# Default source: 1 MiB random objects.
source = new()
obj = source.next_object()
data = obj.reader.read()
assert len(data) == 1 << 20

# Rewind and read again, as a retrying client would.
obj.reader.seek(0, io.SEEK_SET)
assert len(obj.reader.read()) == obj.size

# CSV objects, 64 KiB each, with a random 4-character prefix.
csv_source = new(
    with_size(1 << 16),
    with_prefix_size(4),
    with_csv().size(5, 100).comma(";").field_len(3, 10).rng_seed(42).apply(),
)
obj = csv_source.next_object()
print(obj.name, obj.content_type, obj.size)

# Reproducible random data.
seeded = new(with_random_data().rng_seed(1).size(64 << 10).apply())
print(seeded)
```

`warpgen.generator.new_fn` takes the same options and checks them at once.
It returns a factory that makes a fresh, independent source each time it is
called, for example one per worker.

A source reuses one reader for all its objects, so read an object before
asking for the next one. Reading past the end returns `b""`; seeking past the
end raises `EOFError`, and seeking before the start raises `ValueError`.

### Options

Options live in `warpgen.options`:

| Option | Effect |
| --- | --- |
| `with_size(n)` | Object size in bytes (default 1 MiB). |
| `with_min_max_size(min, max)` | Size bounds, used together with random sizes. |
| `with_random_size(True)` | Exponentially distributed sizes up to the maximum. |
| `with_custom_prefix(prefix)` | Fixed prefix for every object name. |
| `with_prefix_size(n)` | Random prefix of `n` characters (0–16) under the custom prefix. |
| `with_csv()...apply()` | Switch to CSV data (`CsvOpts`: `size`, `comma`, `field_len`, `rng_seed`). |
| `with_random_data()...apply()` | Switch to random data (`RandomOpts`: `rng_seed`, `size` for the block size). |

An invalid option raises `ValueError` when it is applied, that is when
`new` or `new_fn` is called.

Other helpers in `warpgen.objects`: `prefixes` and `merge_object_prefixes`
collect the distinct prefixes of generated objects, `get_exp_rand_size` draws
an exponentially distributed size, and `rand_ascii_bytes` makes cheap
pseudorandom ASCII filler.

## What it does not do

`warpgen` only generates objects. It has no command-line tool, does not
connect to or upload to any storage service, and does not run or report
benchmarks; those are left to the code that uses it.

## Running the tests

```
pip install -e ".[test]"
pytest
```