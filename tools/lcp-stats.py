# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
"""
LCP array statistics
====================
Prints descriptive statistics for a binary LCP array file.

Usage:
    lcp-stats.py [options] <lcp-file>

Options:
    -h --help              show this screen
    -v --verbose           print more output
    --byte-order=<s>       byte order of the file; little or big
                           [default: little]
"""
from docopt import docopt
from lcparray.errors import LCPError
from lcparray.lcp import lcp_statistics
from lcparray.serialize import load_lcp_file
from lcparray.utils import SP, print_term_table
from sys import exit

def main():
    args = docopt(__doc__, version = 'LCP array statistics 1.0')
    SP.enabled = args['--verbose']
    path = args['<lcp-file>']
    try:
        lcp = load_lcp_file(path, args['--byte-order'])
    except (LCPError, ValueError) as e:
        print('Error: %s' % e)
        return 1
    SP.print('Loaded %d entries from %s.', (len(lcp), path))
    stats = lcp_statistics(lcp)
    rows = [
        ['Number of elements', stats.n],
        ['Maximum value', stats.max],
        ['Average value', '%.2f' % stats.mean],
        ['Median value', stats.median],
        ['Most frequent value', stats.most_common],
        ['Most frequent share', '%.2f%%' % (100 * stats.most_common_frac)],
        ['Binary file size', stats.n_bytes]
    ]
    print_term_table(['%s', '%s'], rows, ['Key', 'Value'], 'lr')
    return 0

if __name__ == '__main__':
    exit(main())
