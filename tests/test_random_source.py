import io

import pytest

from warpgen.options import (
    Options,
    with_custom_prefix,
    with_prefix_size,
    with_random_data,
    with_random_size,
    with_size,
)
from warpgen.random_source import RandomSource


def _options(*opts):
    options = Options()
    for opt in opts:
        opt(options)
    return options


def test_object_size_and_content_type():
    options = _options(with_size(4096), with_random_data().rng_seed(1).apply())
    obj = RandomSource(options).next_object()
    assert obj.content_type == "application/octet-stream"
    assert obj.size == 4096
    assert len(obj.reader.read()) == 4096


def test_names_carry_a_counter():
    options = _options(with_size(100), with_random_data().apply())
    source = RandomSource(options)
    first = source.next_object().name
    second = source.next_object().name
    assert first.startswith("1.")
    assert second.startswith("2.")
    assert first.endswith(".rnd")
    assert len(first.split(".")[1]) == 16


def test_objects_get_different_data():
    options = _options(with_size(4096), with_random_data().rng_seed(3).apply())
    source = RandomSource(options)
    first = source.next_object().reader.read()
    second = source.next_object().reader.read()
    assert first != second


def test_seed_makes_output_repeatable():
    opts = (with_size(5000), with_random_data().rng_seed(99).apply())
    a = RandomSource(_options(*opts)).next_object()
    b = RandomSource(_options(*opts)).next_object()
    assert a.reader.read() == b.reader.read()
    assert a.name == b.name


def test_block_larger_than_total_is_clamped():
    options = _options(with_size(100), with_random_data().size(1 << 20).apply())
    obj = RandomSource(options).next_object()
    assert len(obj.reader.read()) == 100


def test_zero_total_size_rejected():
    options = Options(total_size=0)
    with pytest.raises(ValueError):
        RandomSource(options)


def test_random_sizes_stay_within_total():
    options = _options(with_random_size(True), with_size(1 << 16))
    source = RandomSource(options)
    for _ in range(20):
        obj = source.next_object()
        assert 0 < obj.size <= 1 << 16
        assert len(obj.reader.read()) == obj.size


def test_description_fixed_size():
    options = _options(with_size(4096))
    assert str(RandomSource(options)) == "Random data; 4096 bytes total"


def test_description_random_size():
    options = _options(with_random_size(True), with_size(4096))
    assert str(RandomSource(options)) == "Random data; random size up to 4096 bytes"


def test_seek_and_eof():
    options = _options(with_size(1000))
    reader = RandomSource(options).next_object().reader
    assert len(reader.read()) == 1000
    assert reader.seek(10, io.SEEK_SET) == 10
    assert len(reader.read()) == 990
    with pytest.raises(EOFError):
        reader.seek(10, io.SEEK_CUR)


def test_random_prefix():
    options = _options(with_custom_prefix("base"), with_prefix_size(6), with_size(64))
    source = RandomSource(options)
    obj = source.next_object()
    assert source.prefix().startswith("base/")
    assert len(source.prefix()) == len("base/") + 6
    assert obj.name.startswith(source.prefix() + "/")