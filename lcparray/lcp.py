# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
from collections import Counter, namedtuple
from lcparray.errors import AlgorithmInvariantError, allocating
from lcparray.ranks import as_text
from lcparray.serialize import ENTRY_SIZE

LCPStats = namedtuple('LCPStats', [
    'n',
    'max',
    'mean',
    'median',
    'most_common',
    'most_common_frac',
    'n_bytes'])

def inverse_suffix_array(sa):
    rank = [0] * len(sa)
    for i, ofs in enumerate(sa):
        rank[ofs] = i
    return rank

def lcp_array(text, sa):
    '''Kasai's algorithm. Element i of the result is the length of the
    longest common prefix of the suffixes at sorted positions i - 1
    and i. Element 0 is always 0.

    Text positions are visited in order and the common prefix length
    k of the previous position is reused, minus one, as a lower bound
    for the next. Hence the total work is linear.
    '''
    text = as_text(text)
    n = len(sa)
    if n != len(text):
        fmt = 'suffix array has %d entries but the text has %d bytes'
        raise AlgorithmInvariantError('lcp array', fmt % (n, len(text)))
    with allocating('lcp array'):
        lcp = [0] * n
        rank = inverse_suffix_array(sa)
    k = 0
    for i, rank_el in enumerate(rank):
        if rank_el == 0:
            k = 0
            continue
        j = sa[rank_el - 1]
        while i + k < n and j + k < n and text[i + k] == text[j + k]:
            k += 1
        lcp[rank_el] = k
        if k > 0:
            k -= 1
    return lcp

def check_lcp_array(text, sa, lcp):
    text = as_text(text)
    n = len(text)
    if len(lcp) != n:
        fmt = 'lcp array has %d entries but the text has %d bytes'
        raise AlgorithmInvariantError('lcp array', fmt % (len(lcp), n))
    if n and lcp[0] != 0:
        raise AlgorithmInvariantError('lcp array', 'first entry is not 0')
    for i in range(1, n):
        a, b, l = sa[i - 1], sa[i], lcp[i]
        ok = (0 <= l <= n - max(a, b)
              and text[a:a + l] == text[b:b + l]
              and (a + l == n or b + l == n
                   or text[a + l] != text[b + l]))
        if not ok:
            fmt = 'entry %d (%d) is not the lcp of suffixes %d and %d'
            raise AlgorithmInvariantError('lcp array', fmt % (i, l, a, b))

def lcp_statistics(lcp):
    n = len(lcp)
    if not n:
        return LCPStats(0, 0, 0.0, 0, 0, 0.0, 0)
    counts = Counter(lcp)
    values = sorted(counts)

    # Smallest value at which half of the entries are covered.
    half = n // 2
    median = 0
    at = 0
    for v in values:
        if at >= half:
            break
        at += counts[v]
        median = v

    # Ties go to the smallest value.
    most_common = max(values, key = counts.get)
    return LCPStats(n, values[-1], sum(lcp) / n, median,
                    most_common, counts[most_common] / n,
                    n * ENTRY_SIZE)
