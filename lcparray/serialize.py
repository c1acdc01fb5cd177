# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Binary layout of LCP arrays. The file is a flat sequence of 32-bit
# unsigned integers, one per entry, without any header. This is the
# format DACs tools expect.
from construct import Array, ConstructError, Int32ub, Int32ul
from lcparray.errors import AlgorithmInvariantError, InputError, OutputError

ENTRY_SIZE = 4

BYTE_ORDERS = {
    'little' : Int32ul,
    'big' : Int32ub
}

def entry_format(byteorder):
    fmt = BYTE_ORDERS.get(byteorder)
    if fmt is None:
        names = ' or '.join(sorted(BYTE_ORDERS))
        raise ValueError('Byte order must be %s, not "%s"' % (names, byteorder))
    return fmt

def encode_lcp_array(lcp, byteorder = 'little'):
    fmt = Array(len(lcp), entry_format(byteorder))
    try:
        return fmt.build(list(lcp))
    except ConstructError as e:
        msg = 'value does not fit in an unsigned 32-bit integer (%s)' % e
        raise AlgorithmInvariantError('serialize', msg) from e

def decode_lcp_array(data, byteorder = 'little'):
    entry = entry_format(byteorder)
    if len(data) % ENTRY_SIZE:
        fmt = '%d bytes is not a multiple of the %d byte entry size'
        raise InputError('deserialize', fmt % (len(data), ENTRY_SIZE))
    return list(Array(len(data) // ENTRY_SIZE, entry).parse(data))

def write_lcp_array(f, lcp, byteorder = 'little'):
    data = encode_lcp_array(lcp, byteorder)
    try:
        n_written = f.write(data)
    except OSError as e:
        raise OutputError('write', str(e)) from e
    # Raw streams may write less than asked for.
    if n_written is not None and n_written != len(data):
        fmt = 'only %d of %d bytes written'
        raise OutputError('write', fmt % (n_written, len(data)))
    return len(data)

def save_lcp_file(path, lcp, byteorder = 'little'):
    try:
        with open(path, 'wb') as f:
            return write_lcp_array(f, lcp, byteorder)
    except OSError as e:
        raise OutputError('write', 'cannot write %s: %s' % (path, e)) from e

def load_lcp_file(path, byteorder = 'little'):
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise InputError('read', 'cannot read %s: %s' % (path, e)) from e
    return decode_lcp_array(data, byteorder)
