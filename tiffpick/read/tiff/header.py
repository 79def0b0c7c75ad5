# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from collections    import  namedtuple

from ...exceptions  import  IOFailure, MalformedHeader, UnknownByteOrder, \
                            UnknownMagicNumber
from ...internal    import  ByteOrder, bytes_to_int
from ...log         import  get_logger

logger = get_logger(__name__)

TiffHeader = namedtuple("TiffHeader", ("byte_order",
                                       "magic_number",
                                       "first_ifd_offset"))

class HeaderDecoder:
    """Tiff header decoder.

    The header is eight bytes: a byte order marker, a magic number, and
    the offset of the first IFD. Manufacturer-specific headers (like the
    CR2 header) continue past these eight bytes, but nothing beyond them
    is interpreted here.
    """

    header_length           = 8

    # The marker is a repeated byte, so it reads the same either way.
    expected_byte_orders    = {
        0x4949: ByteOrder.LITTLE,   # "II"
        0x4d4d: ByteOrder.BIG,      # "MM"
    }

    # Standard TIFF has 42 (or 42 read the wrong way around); ORF files
    # have "RO" or "OR" in its place.
    accepted_magic_numbers  = frozenset((
        0x002a,
        0x2a00,
        0x4f52,
        0x524f,
    ))

    def decode (self, reader):
        """Read the first eight bytes of the reader.

        Returns a TiffHeader. The reader's byte order is set to match
        the file as a side effect, so that every read after this one
        interprets integers correctly.
        """

        try:
            header = reader[0:self.header_length]

        except IOFailure as e:
            raise MalformedHeader(e.position) from e

        marker = bytes_to_int(header[0:2], ByteOrder.LITTLE)

        try:
            byte_order = self.expected_byte_orders[marker]

        except KeyError:
            raise UnknownByteOrder(0, marker) from None

        magic_number = bytes_to_int(header[2:4], byte_order)

        if magic_number not in self.accepted_magic_numbers:
            raise UnknownMagicNumber(2, magic_number)

        first_ifd_offset = bytes_to_int(header[4:8], byte_order)
        reader.byte_order = byte_order

        logger.debug("%s-endian header, magic 0x%04x, IFD0 at 0x%08x",
                     byte_order, magic_number, first_ifd_offset)

        return TiffHeader(byte_order, magic_number, first_ifd_offset)

def decode_header (reader):
    """Shortcut for HeaderDecoder().decode(reader)"""
    return HeaderDecoder().decode(reader)
