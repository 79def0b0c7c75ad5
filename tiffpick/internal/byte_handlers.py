# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

class ByteOrder:
    BIG     = "big"
    LITTLE  = "little"

def int_to_bytes (integer, length, byte_order):
    return integer.to_bytes(length, byte_order)

def bytes_to_int (bytestring, byte_order):
    return int.from_bytes(bytestring, byte_order)

def bytes_to_sint (bytestring, byte_order):
    return int.from_bytes(bytestring, byte_order, signed=True)

def sint_to_bytes (integer, length, byte_order):
    return integer.to_bytes(length, byte_order, signed=True)

def hex_to_bytes (hexstring):
    return bytes.fromhex(hexstring)

def split_units (bytestring, width):
    """Cut a bytestring into consecutive chunks of the same width.

        >>> list(split_units(b"\\1\\0\\2\\0\\3\\0", 2))
        [b'\\x01\\x00', b'\\x02\\x00', b'\\x03\\x00']

    Any trailing partial chunk is dropped.
    """
    for start in range(0, len(bytestring) - width + 1, width):
        yield bytestring[start:start + width]
