# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Suffix array construction. Three strategies are available and all of
# them produce the same array:
#
#  * naive: comparison sort of the suffixes, O(n^2 log n) worst case.
#  * doubling: prefix doubling with a full sort per round,
#    O(n log^2 n).
#  * radix: prefix doubling with two counting sort passes per round
#    that stops as soon as all ranks are distinct, O(n log n).
#
# Which strategy to use is up to the caller.
from lcparray.errors import AlgorithmInvariantError, allocating
from lcparray.ranks import (N_BYTE_RANKS,
                            SuffixKeys,
                            as_text,
                            compare_suffixes,
                            dense_ranks,
                            initial_keys,
                            rank_dtype,
                            shifted_ranks,
                            suffix_comparator)
import numpy as np

STRATEGY_NAIVE = 'naive'
STRATEGY_DOUBLING = 'doubling'
STRATEGY_RADIX = 'radix'

def naive_suffix_array(text):
    return sorted(range(len(text)), key = suffix_comparator(text))

def doubling_suffix_array(text):
    n = len(text)
    if not n:
        return []
    keys = initial_keys(text)
    order = np.lexsort((keys.secondary, keys.primary))
    h = 2
    while h < n:
        ranks = dense_ranks(keys, order)
        keys = SuffixKeys(ranks, shifted_ranks(ranks, h))
        order = np.lexsort((keys.secondary, keys.primary))
        h *= 2
    return order.tolist()

class RadixBuffers:
    '''Working memory owned by one radix construction.'''
    def __init__(self, n):
        dtype = rank_dtype(n)
        self.order = np.arange(n, dtype = dtype)
        self.tmp = np.empty(n, dtype = dtype)
        self.buckets = np.empty(n, dtype = dtype)
        self.src_keys = np.empty(n, dtype = dtype)
        # One bucket per byte and one for the sentinel.
        self.counts = np.zeros(N_BYTE_RANKS + 1, dtype = dtype)

    def reserve(self, n_buckets):
        if n_buckets > len(self.counts):
            self.counts = np.zeros(n_buckets, dtype = self.counts.dtype)
        return self.counts[:n_buckets]

    def counting_sort(self, src, dst, keys, n_buckets):
        '''Stable sort of the offsets in src by their keys into dst.'''
        counts = self.reserve(n_buckets)
        keys = np.asarray(keys, dtype = self.src_keys.dtype)
        src_keys = self.src_keys[:len(src)]
        np.take(keys, src, out = src_keys)
        counts[:] = np.bincount(src_keys, minlength = n_buckets)
        np.cumsum(counts, out = counts)
        # Walking backwards keeps equal keys in their order.
        for t in range(len(src) - 1, -1, -1):
            k = src_keys[t]
            counts[k] -= 1
            dst[counts[k]] = src[t]

    def sort_keys(self, keys, n_ranks):
        '''Orders the suffixes by their keys in two passes, secondary
        first. Returns the order.'''
        # The sentinel goes in bucket 0.
        np.add(keys.secondary, 1, out = self.buckets)
        self.counting_sort(self.order, self.tmp, self.buckets, n_ranks + 1)
        self.counting_sort(self.tmp, self.order, keys.primary, n_ranks)
        return self.order

def radix_suffix_array(text):
    n = len(text)
    if not n:
        return []
    bufs = RadixBuffers(n)
    keys = initial_keys(text)
    n_ranks = N_BYTE_RANKS
    h = 1
    while True:
        order = bufs.sort_keys(keys, n_ranks)
        ranks = dense_ranks(keys, order)
        top = int(ranks.max())
        # All suffixes have distinct ranks so the order is total.
        if top == n - 1:
            return order.tolist()
        n_ranks = top + 1
        h *= 2
        keys = SuffixKeys(ranks, shifted_ranks(ranks, h))

STRATEGIES = {
    STRATEGY_NAIVE : naive_suffix_array,
    STRATEGY_DOUBLING : doubling_suffix_array,
    STRATEGY_RADIX : radix_suffix_array
}

def get_strategy(name):
    builder = STRATEGIES.get(name)
    if builder:
        return builder
    names = sorted(STRATEGIES)
    name_str = ', '.join(names[:-1]) + ', and ' + names[-1]
    fmt = '%s is not a suffix array strategy. Specify one of %s'
    raise ValueError(fmt % (name, name_str))

def suffix_array(text, strategy = STRATEGY_RADIX):
    '''Sorted start offsets of all suffixes of text.'''
    build = get_strategy(strategy)
    text = as_text(text)
    with allocating('suffix array'):
        return build(text)

def check_suffix_array(text, sa):
    '''Raises AlgorithmInvariantError unless sa is the suffix array of
    text. The ordering check compares neighbouring suffixes directly
    and is therefore slow on repetitive texts.'''
    text = as_text(text)
    n = len(text)
    if len(sa) != n:
        fmt = 'suffix array has %d entries but the text has %d bytes'
        raise AlgorithmInvariantError('suffix array', fmt % (len(sa), n))
    seen = bytearray(n)
    for ofs in sa:
        if not 0 <= ofs < n or seen[ofs]:
            fmt = 'offset %d is out of range or repeated'
            raise AlgorithmInvariantError('suffix array', fmt % ofs)
        seen[ofs] = 1
    for i in range(1, n):
        if compare_suffixes(text, sa[i - 1], sa[i]) > 0:
            fmt = 'suffix %d sorts after suffix %d at position %d'
            args = (sa[i - 1], sa[i], i)
            raise AlgorithmInvariantError('suffix array', fmt % args)
