# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from hamcrest import *
from random import randrange
import unittest

from tiffpick.exceptions import MalformedHeader, UnknownByteOrder, \
                                UnknownMagicNumber
from tiffpick.internal import int_to_bytes, hex_to_bytes
from tiffpick.read.file_reader import FileReader
from tiffpick.read.tiff.header import TiffHeader, decode_header

def decode (bytestring):
    return decode_header(FileReader(bytestring))

class GivenValidHeaders (unittest.TestCase):

    def test_intel_header_is_little_endian (self):
        header = decode(hex_to_bytes("49 49 2a 00 08 00 00 00"))
        assert_that(header, is_(equal_to(TiffHeader("little", 0x2a, 8))))

    def test_motorola_header_is_big_endian (self):
        header = decode(hex_to_bytes("4d 4d 00 2a 00 00 00 08"))
        assert_that(header, is_(equal_to(TiffHeader("big", 0x2a, 8))))

    def test_cr2_header_points_past_its_extension (self):
        header = decode(hex_to_bytes("49 49 2a 00 10 00 00 00"
                                     "43 52 02 00 00 00 00 00"))
        assert_that(header.first_ifd_offset, is_(equal_to(0x10)))

    def test_orf_magic_numbers_are_accepted (self):
        for bytestring, order in (
                (b"IIRO\x08\0\0\0", "little"),
                (b"MMOR\0\0\0\x08", "big")):
            header = decode(bytestring)
            assert_that(header.byte_order, is_(equal_to(order)))
            assert_that(header.magic_number, is_(equal_to(0x4f52)))

    def test_swapped_forty_two_is_accepted (self):
        header = decode(hex_to_bytes("49 49 00 2a 08 00 00 00"))
        assert_that(header.magic_number, is_(equal_to(0x2a00)))

    def test_decoding_sets_the_reader_byte_order (self):
        reader = FileReader(hex_to_bytes("49 49 2a 00 08 00 00 00"))
        decode_header(reader)
        assert_that(reader.byte_order, is_(equal_to("little")))

    def test_decoding_is_deterministic (self):
        bytestring = hex_to_bytes("4d 4d 00 2a 00 00 01 00")
        assert_that(decode(bytestring), is_(equal_to(decode(bytestring))))

    def test_only_the_first_eight_bytes_matter (self):
        assert_that(decode(b"II*\0\x08\0\0\0garbage"),
                    is_(equal_to(decode(b"II*\0\x08\0\0\0"))))

class GivenInvalidHeaders (unittest.TestCase):

    def test_short_headers_are_malformed (self):
        for length in (0, 2, 4, 7):
            assert_that(calling(decode).with_args(b"II*\0\x08\0\0\0"[:length]),
                        raises(MalformedHeader))

    def test_unknown_byte_orders (self):
        valid = (b"II", b"MM")

        for i in range(0x100):
            # We'll try a bunch of random bad bytestrings.
            marker = b"II"
            while marker in valid:
                marker = int_to_bytes(randrange(0x10000), 2, "big")

            assert_that(calling(decode).with_args(marker + b"*\0\x08\0\0\0"),
                        raises(UnknownByteOrder))

    def test_mixed_markers_are_unknown (self):
        assert_that(calling(decode).with_args(b"IM*\0\x08\0\0\0"),
                    raises(UnknownByteOrder, "0x4D49"))

    def test_unknown_magic_numbers (self):
        accepted = (0x002a, 0x2a00, 0x4f52, 0x524f)

        for head, order in ((b"II", "little"), (b"MM", "big")):
            for i in range(0x100):
                magic = 0x002a
                while magic in accepted:
                    magic = randrange(0x10000)

                assert_that(calling(decode).with_args(
                                head + int_to_bytes(magic, 2, order)
                                + b"\0\0\0\x08"),
                            raises(UnknownMagicNumber))

    def test_magic_number_error_names_the_number (self):
        assert_that(calling(decode).with_args(b"MM\x12\x34\0\0\0\x08"),
                    raises(UnknownMagicNumber, "0x1234"))
