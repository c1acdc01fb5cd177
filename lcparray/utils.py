# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Progress output and tables.
from termtables import to_string
from time import time

class StructuredPrinter:
    '''Indented progress output, silent unless enabled.'''
    def __init__(self, enabled):
        self.indent = 0
        self.enabled = enabled

    def print(self, fmt, args = None):
        if self.enabled:
            s = fmt % args if args is not None else str(fmt)
            print(' ' * self.indent + s)

    def header(self, name):
        self.print('* %s', name)
        self.indent += 2

    def leave(self):
        self.indent -= 2
        assert self.indent >= 0

SP = StructuredPrinter(False)

class Timer:
    '''Prints the time spent in a block through SP.'''
    def __init__(self, name):
        self.name = name

    def __enter__(self):
        SP.header(self.name)
        self.start = time()
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.elapsed = time() - self.start
        if exc_type is None:
            SP.print('Done in %.2f seconds.', self.elapsed)
        SP.leave()

def print_term_table(row_fmt, rows, header, alignment):
    def format_col(fmt, col):
        if callable(fmt):
            return fmt(col)
        return fmt % col
    rows = [[format_col(*e) for e in zip(row_fmt, row)] for row in rows]
    s = to_string(rows,
                  header = header,
                  padding = (0, 0, 0, 0),
                  alignment = alignment,
                  style = "            -- ")
    m = len(s.splitlines()[1]) - 2
    print(' ' + '=' * m)
    print(s)
    print(' ' + '=' * m)
