# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
from lcparray.errors import AlgorithmInvariantError, InputError, OutputError
from lcparray.lcp import lcp_array
from lcparray.serialize import (decode_lcp_array,
                                encode_lcp_array,
                                load_lcp_file,
                                save_lcp_file,
                                write_lcp_array)
from lcparray.suffix_array import suffix_array
from io import BytesIO
import pytest

class ShortWriter:
    def write(self, data):
        return len(data) - 1

class BrokenWriter:
    def write(self, data):
        raise OSError('No space left on device')

def test_encode():
    assert encode_lcp_array([1, 258]) == \
        b'\x01\x00\x00\x00\x02\x01\x00\x00'
    assert encode_lcp_array([1, 258], 'big') == \
        b'\x00\x00\x00\x01\x00\x00\x01\x02'
    assert encode_lcp_array([2**32 - 1], 'big') == b'\xff\xff\xff\xff'
    assert encode_lcp_array([]) == b''

def test_encode_out_of_range():
    for value in [-1, 2**32]:
        with pytest.raises(AlgorithmInvariantError):
            encode_lcp_array([0, value])

def test_bad_byte_order():
    with pytest.raises(ValueError):
        encode_lcp_array([0], 'middle')
    with pytest.raises(ValueError):
        decode_lcp_array(b'', 'native')

def test_round_trip():
    text = b'It was the best of times, it was the worst of times'
    lcp = lcp_array(text, suffix_array(text))
    for byteorder in ['little', 'big']:
        data = encode_lcp_array(lcp, byteorder)
        assert len(data) == 4 * len(text)
        assert decode_lcp_array(data, byteorder) == lcp

def test_decode_truncated():
    with pytest.raises(InputError):
        decode_lcp_array(b'\x00\x00\x00\x00\x01')

def test_write_lcp_array():
    f = BytesIO()
    assert write_lcp_array(f, [0, 1, 3, 0, 0, 2]) == 24
    assert decode_lcp_array(f.getvalue()) == [0, 1, 3, 0, 0, 2]

def test_failed_writes():
    for f in [ShortWriter(), BrokenWriter()]:
        with pytest.raises(OutputError) as info:
            write_lcp_array(f, [0, 1, 2])
        assert info.value.stage == 'write'

def test_save_and_load(tmp_path):
    path = tmp_path / 'banana.lcp'
    save_lcp_file(path, [0, 1, 3, 0, 0, 2], 'big')
    assert path.stat().st_size == 24
    assert load_lcp_file(path, 'big') == [0, 1, 3, 0, 0, 2]
    assert load_lcp_file(path, 'little')[2] == 3 << 24

def test_save_to_missing_dir(tmp_path):
    with pytest.raises(OutputError):
        save_lcp_file(tmp_path / 'nope' / 'out.lcp', [0])

def test_load_missing_file(tmp_path):
    with pytest.raises(InputError):
        load_lcp_file(tmp_path / 'missing.lcp')
