# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Ordering of suffixes. A suffix is identified by its start offset in
# the text and suffixes are compared byte by byte, with an imaginary
# end-of-text sentinel that is smaller than every byte. So a suffix
# that is a prefix of another suffix sorts first.
from collections import namedtuple
from functools import cmp_to_key
import numpy as np

# Rank of the sentinel. Real ranks start at zero.
SENTINEL = -1

# Number of distinct ranks before the first round, one per byte value.
N_BYTE_RANKS = 256

# Ranks of every suffix after a round of prefix doubling. primary is
# the rank of the first k bytes, secondary the rank of the k bytes
# following those or SENTINEL if the suffix is shorter than k.
SuffixKeys = namedtuple('SuffixKeys', ['primary', 'secondary'])

def as_text(text):
    if isinstance(text, str):
        raise TypeError('Text must be bytes, not str. Encode it first.')
    if not isinstance(text, (bytes, bytearray, memoryview)):
        raise TypeError('Text must be bytes, not %s' % type(text).__name__)
    return bytes(text)

def compare_suffixes(text, i, j):
    '''Three-way comparison of the suffixes starting at i and j.

    The suffixes are compared in chunks of doubling width so that
    slicing stays cheap for suffixes with short common prefixes.
    '''
    if i == j:
        return 0
    width = 32
    while True:
        a = text[i:i + width]
        b = text[j:j + width]
        if a != b:
            return -1 if a < b else 1
        # Equal chunks are always full width here, otherwise both
        # suffixes would have the same length and i == j.
        i += width
        j += width
        width *= 2

def suffix_comparator(text):
    '''Sort key for suffix start offsets of text.'''
    def cmp(i, j):
        return compare_suffixes(text, i, j)
    return cmp_to_key(cmp)

def rank_dtype(n):
    return np.int32 if n < 2**31 - 1 else np.int64

def shifted_ranks(ranks, h):
    '''Secondary ranks: rank of the suffix h positions later or
    SENTINEL when that is past the end of the text.'''
    n = len(ranks)
    secondary = np.full(n, SENTINEL, dtype = ranks.dtype)
    if h < n:
        secondary[:n - h] = ranks[h:]
    return secondary

def initial_keys(text):
    n = len(text)
    primary = np.frombuffer(text, dtype = np.uint8).astype(rank_dtype(n))
    return SuffixKeys(primary, shifted_ranks(primary, 1))

def dense_ranks(keys, order):
    '''Assigns consecutive ranks to suffixes sorted by their keys.

    Suffixes with equal keys share a rank and each distinct key gets
    a rank one higher than the previous one.
    '''
    ranks = np.empty(len(order), dtype = keys.primary.dtype)
    if not len(order):
        return ranks
    primary = keys.primary[order]
    secondary = keys.secondary[order]
    changed = np.logical_or(np.diff(primary), np.diff(secondary))
    ranks[order[0]] = 0
    ranks[order[1:]] = np.cumsum(changed, dtype = ranks.dtype)
    return ranks
