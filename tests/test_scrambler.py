import io
import random

import pytest

from warpgen.scrambler import Scrambler


def test_read_returns_requested_length():
    scrambler = Scrambler(b"x" * 100, 1000, random.Random(1))
    assert len(scrambler.read()) == 1000
    assert scrambler.read() == b""


def test_large_read_spans_fragments():
    scrambler = Scrambler(bytes(64), 40000, random.Random(2))
    pieces = []
    while True:
        chunk = scrambler.read(3000)
        if not chunk:
            break
        pieces.append(chunk)
    assert sum(len(p) for p in pieces) == 40000


def test_output_is_scrambled():
    scrambler = Scrambler(bytes(256), 20000, random.Random(3))
    out = scrambler.read()
    assert out.count(0) < len(out) // 10


def test_same_seed_gives_same_stream():
    first = Scrambler(b"payload" * 10, 5000, random.Random(5)).read()
    second = Scrambler(b"payload" * 10, 5000, random.Random(5)).read()
    assert first == second


def test_seek_and_reset():
    scrambler = Scrambler(b"abc" * 50, 500, random.Random(4))
    scrambler.read()
    assert scrambler.seek(0, io.SEEK_SET) == 0
    assert len(scrambler.read()) == 500
    assert scrambler.seek(10, io.SEEK_SET) == 10
    assert len(scrambler.read()) == 490
    with pytest.raises(EOFError):
        scrambler.seek(10, io.SEEK_CUR)
    scrambler.reset(50)
    assert scrambler.tell() == 0
    assert len(scrambler.read()) == 50


def test_seek_errors():
    scrambler = Scrambler(b"abc", 100, random.Random(6))
    with pytest.raises(ValueError):
        scrambler.seek(0, 5)
    with pytest.raises(ValueError):
        scrambler.seek(-101, io.SEEK_END)
    with pytest.raises(EOFError):
        scrambler.seek(1, io.SEEK_END)
    assert scrambler.seek(-1, io.SEEK_END) == 99


def test_empty_data_cannot_be_read():
    scrambler = Scrambler(b"", 100, random.Random(7))
    with pytest.raises(ValueError):
        scrambler.read()