# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
"""
LCP array constructor
=====================
Constructs the suffix array and the LCP array of a file and writes the
LCP array as 32-bit unsigned integers, a format compatible with DACs.

Usage:
    build-lcp-array.py [options] <input> <output>

Options:
    -h --help              show this screen
    -v --verbose           print more output
    --byte-order=<s>       byte order of the output; little or big
                           [default: little]
    --strategy=<s>         suffix array construction strategy; auto,
                           naive, doubling or radix [default: auto]
    --threshold=<i>        inputs larger than this many bytes use the
                           radix strategy when the strategy is auto
                           [default: 100000]
    --check                validate the suffix and LCP arrays
    --stats                print statistics about the LCP array

Example:
    build-lcp-array.py -v dna.100MB dna_lcp.bin
"""
from docopt import docopt
from lcparray.errors import LCPError
from lcparray.lcp import lcp_statistics
from lcparray.pipeline import build_lcp_file
from lcparray.utils import SP, Timer, print_term_table
from sys import exit

def print_lcp_stats(lcp):
    stats = lcp_statistics(lcp)
    rows = [
        ['Number of elements', '%d' % stats.n],
        ['Maximum value', '%d' % stats.max],
        ['Average value', '%.2f' % stats.mean],
        ['Median value', '%d' % stats.median],
        ['Most frequent value', '%d (%.2f%%)' % (stats.most_common,
                                                 100 * stats.most_common_frac)],
        ['Binary file size', '%d bytes' % stats.n_bytes]
    ]
    print_term_table(['%s', '%s'], rows, ['Key', 'Value'], 'lr')

def main():
    args = docopt(__doc__, version = 'LCP array constructor 1.0')
    SP.enabled = args['--verbose']
    try:
        threshold = int(args['--threshold'])
    except ValueError:
        print('Error: --threshold must be an integer')
        return 1
    try:
        with Timer('PROCESSING %s' % args['<input>']):
            lcp = build_lcp_file(args['<input>'], args['<output>'],
                                 byteorder = args['--byte-order'],
                                 strategy = args['--strategy'],
                                 threshold = threshold,
                                 check = args['--check'])
    except (LCPError, ValueError) as e:
        print('Error: %s' % e)
        return 1
    if args['--stats']:
        print_lcp_stats(lcp)
    print("LCP array successfully written to '%s'" % args['<output>'])
    return 0

if __name__ == '__main__':
    exit(main())
