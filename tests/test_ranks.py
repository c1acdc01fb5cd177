# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
from lcparray.ranks import (SENTINEL,
                            SuffixKeys,
                            compare_suffixes,
                            dense_ranks,
                            initial_keys,
                            shifted_ranks,
                            suffix_comparator)
import numpy as np

def test_compare_suffixes():
    text = b'banana'
    assert compare_suffixes(text, 2, 2) == 0
    assert compare_suffixes(text, 1, 3) == 1
    assert compare_suffixes(text, 5, 3) == -1
    assert compare_suffixes(text, 0, 4) == -1

    # Common prefixes longer than the first chunk.
    text = b'x' * 200 + b'y' + b'x' * 200
    assert compare_suffixes(text, 0, 201) == 1
    assert compare_suffixes(text, 201, 0) == -1

def test_suffix_comparator():
    text = b'mississippi'
    sa = sorted(range(len(text)), key = suffix_comparator(text))
    assert sa == [10, 7, 4, 1, 0, 9, 8, 6, 3, 5, 2]

def test_shifted_ranks():
    ranks = np.array([3, 1, 2], dtype = np.int32)
    assert shifted_ranks(ranks, 1).tolist() == [1, 2, SENTINEL]
    assert shifted_ranks(ranks, 2).tolist() == [2, SENTINEL, SENTINEL]
    assert shifted_ranks(ranks, 5).tolist() == [SENTINEL] * 3

def test_initial_keys():
    keys = initial_keys(b'ab')
    assert keys.primary.tolist() == [97, 98]
    assert keys.secondary.tolist() == [98, SENTINEL]
    keys = initial_keys(b'')
    assert len(keys.primary) == 0

def test_dense_ranks():
    keys = SuffixKeys(np.array([1, 0, 1, 2]), np.array([0, -1, 0, -1]))
    order = np.lexsort((keys.secondary, keys.primary))
    assert dense_ranks(keys, order).tolist() == [1, 0, 1, 2]

    keys = SuffixKeys(np.array([5, 5, 5]), np.array([5, 7, -1]))
    order = np.lexsort((keys.secondary, keys.primary))
    assert dense_ranks(keys, order).tolist() == [1, 2, 0]

    empty = SuffixKeys(np.array([], dtype = np.int32),
                       np.array([], dtype = np.int32))
    assert len(dense_ranks(empty, np.array([], dtype = np.int64))) == 0
