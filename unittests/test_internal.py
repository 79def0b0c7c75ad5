# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from hamcrest import *
import unittest

from tiffpick.exceptions import TiffpickBaseError, FileReadError, \
                                IOFailure, UnexpectedEOF, TiffError, \
                                UnknownByteOrder, TypeMismatch, \
                                LengthMismatch, EntryError, IFDCycle
from tiffpick.internal import make_backways_map, split_units, \
                              bytes_to_int, bytes_to_sint, sint_to_bytes
from tiffpick.read.tiff.tags import IFDTag, TiffType, TiffTagNameDict, \
                                    TiffTypeDict, tag_name

class GivenBackwaysMaps (unittest.TestCase):

    def test_names_are_keyed_by_value (self):
        class SomeTags:
            Make    = 0x010f
            Model   = 0x0110

        assert_that(make_backways_map(SomeTags),
                    is_(equal_to({0x010f: "Make", 0x0110: "Model"})))

    def test_duplicate_values_are_refused (self):
        class BadTags:
            Make        = 0x010f
            AlsoMake    = 0x010f

        assert_that(calling(make_backways_map).with_args(BadTags),
                    raises(AssertionError, "BadTags.Make"))

    def test_tag_names (self):
        assert_that(TiffTagNameDict[IFDTag.Make], is_(equal_to("Make")))
        assert_that(tag_name(IFDTag.ExifIFD), is_(equal_to("ExifIFD")))
        assert_that(tag_name(0xbeef), is_(equal_to("0xbeef")))

    def test_every_type_has_a_width (self):
        for tifftype in range(TiffType.BYTE, TiffType.IFD + 1):
            assert_that(TiffTypeDict[tifftype].bytecount,
                        is_in((1, 2, 4, 8)))

class GivenByteHandlers (unittest.TestCase):

    def test_split_units (self):
        assert_that(list(split_units(b"\1\0\2\0\3\0", 2)),
                    is_(equal_to([b"\1\0", b"\2\0", b"\3\0"])))

    def test_split_units_drops_partial_units (self):
        assert_that(list(split_units(b"\1\2\3\4\5", 4)),
                    is_(equal_to([b"\1\2\3\4"])))
        assert_that(list(split_units(b"\1", 2)), is_(equal_to([])))

    def test_signedness (self):
        assert_that(bytes_to_int(b"\xff\xfe", "big"),
                    is_(equal_to(0xfffe)))
        assert_that(bytes_to_sint(b"\xff\xfe", "big"), is_(equal_to(-2)))
        assert_that(sint_to_bytes(-2, 2, "little"),
                    is_(equal_to(b"\xfe\xff")))

class GivenErrors (unittest.TestCase):

    def test_eof_message (self):
        assert_that(str(UnexpectedEOF(256)),
                    is_(equal_to("Unexpected end of file. (0x00000100)")))
        assert_that(repr(UnexpectedEOF(256)), is_(equal_to(
                "UnexpectedEOF('Unexpected end of file. (0x00000100)')")))

    def test_io_failure_message_includes_the_cause (self):
        assert_that(str(IOFailure(0, OSError("boom"))), is_(equal_to(
                "Couldn't read from the source: boom (0x00000000)")))

    def test_formatted_messages (self):
        assert_that(str(UnknownByteOrder(0, 0x4d49)), is_(equal_to(
                "Unknown byte order: 0x4D49 (0x00000000)")))
        assert_that(str(TypeMismatch(0x1e, 0x0101, "string",
                                     "unsigned short 16bits")),
                    is_(equal_to("Tag 0x0101 holds string values, not "
                                 "unsigned short 16bits. (0x0000001e)")))
        assert_that(str(LengthMismatch(0x2a, 0x0102, 3)),
                    is_(equal_to("Tag 0x0102 holds 3 values; expected "
                                 "exactly 1. (0x0000002a)")))
        assert_that(str(IFDCycle(8, 8)), is_(equal_to(
                "IFD at 0x00000008 has already been visited. (0x00000008)")))

    def test_positions_are_kept (self):
        assert_that(IFDCycle(0x30, 8).position, is_(equal_to(0x30)))

    def test_hierarchy (self):
        assert_that(issubclass(UnexpectedEOF, IOFailure), is_(True))
        assert_that(issubclass(IOFailure, FileReadError), is_(True))
        assert_that(issubclass(TypeMismatch, EntryError), is_(True))
        assert_that(issubclass(EntryError, TiffError), is_(True))
        assert_that(issubclass(TiffError, FileReadError), is_(True))
        assert_that(issubclass(FileReadError, TiffpickBaseError), is_(True))
        assert_that(issubclass(IOFailure, TiffError), is_(False))
