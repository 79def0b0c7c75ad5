# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .byte_handlers import  ByteOrder, int_to_bytes, bytes_to_int,  \
                            sint_to_bytes, bytes_to_sint,           \
                            hex_to_bytes, split_units
from .backways_map  import  make_backways_map

__all__ = [
    "ByteOrder",
    "int_to_bytes",
    "bytes_to_int",
    "sint_to_bytes",
    "bytes_to_sint",
    "hex_to_bytes",
    "split_units",
    "make_backways_map",
]
