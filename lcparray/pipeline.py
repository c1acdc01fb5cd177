# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Reads a file, builds its suffix and LCP arrays and writes the LCP
# array in binary form.
from lcparray.errors import InputError
from lcparray.lcp import check_lcp_array, lcp_array
from lcparray.ranks import as_text
from lcparray.serialize import entry_format, save_lcp_file
from lcparray.suffix_array import (STRATEGY_NAIVE,
                                   STRATEGY_RADIX,
                                   check_suffix_array,
                                   get_strategy,
                                   suffix_array)
from lcparray.utils import SP, Timer

STRATEGY_AUTO = 'auto'

# The naive strategy is fast enough below this many bytes.
LARGE_INPUT_THRESHOLD = 100000

def select_strategy(n, threshold = LARGE_INPUT_THRESHOLD):
    return STRATEGY_RADIX if n > threshold else STRATEGY_NAIVE

def load_text(path):
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise InputError('read', 'cannot read %s: %s' % (path, e)) from e

def build_lcp_array(text, strategy = STRATEGY_AUTO,
                    threshold = LARGE_INPUT_THRESHOLD,
                    check = False):
    '''Returns the suffix array and the LCP array of text.'''
    text = as_text(text)
    if strategy == STRATEGY_AUTO:
        strategy = select_strategy(len(text), threshold)
    with Timer('CONSTRUCTING SUFFIX ARRAY (%s)' % strategy):
        sa = suffix_array(text, strategy)
    with Timer('COMPUTING LCP ARRAY'):
        lcp = lcp_array(text, sa)
    if check:
        with Timer('VALIDATING'):
            check_suffix_array(text, sa)
            check_lcp_array(text, sa, lcp)
    return sa, lcp

def build_lcp_file(input_path, output_path, byteorder = 'little',
                   strategy = STRATEGY_AUTO,
                   threshold = LARGE_INPUT_THRESHOLD,
                   check = False):
    # Bad options should fail before any work is done.
    entry_format(byteorder)
    if strategy != STRATEGY_AUTO:
        get_strategy(strategy)

    with Timer('READING %s' % input_path):
        text = load_text(input_path)
        SP.print('%d bytes.', len(text))
    _, lcp = build_lcp_array(text, strategy, threshold, check)
    with Timer('WRITING %s' % output_path):
        n_bytes = save_lcp_file(output_path, lcp, byteorder)
        SP.print('%d bytes (%s endian).', (n_bytes, byteorder))
    return lcp
