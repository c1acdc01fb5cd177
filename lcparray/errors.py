# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Errors raised by the suffix array and LCP pipeline. Each error
# remembers the stage that failed so that the tools can report it.
from contextlib import contextmanager

class LCPError(Exception):
    def __init__(self, stage, msg):
        super().__init__('%s: %s' % (stage, msg))
        self.stage = stage
        self.msg = msg

class InputError(LCPError):
    pass

class AllocationError(LCPError):
    pass

class AlgorithmInvariantError(LCPError):
    pass

class OutputError(LCPError):
    pass

@contextmanager
def allocating(stage):
    '''Reraises MemoryError as AllocationError for the given stage.'''
    try:
        yield
    except MemoryError as e:
        raise AllocationError(stage, 'cannot allocate working buffers') from e
