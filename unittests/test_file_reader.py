# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from hamcrest import *
from io import BytesIO
from random import randrange
import unittest

from tiffpick.exceptions import IOFailure, UnexpectedEOF
from tiffpick.read.file_reader import FileReader

class GivenRandomBytes (unittest.TestCase):

    def generate_random_bytes (self):
        self.length = randrange(0xf00) + 0x100
        self.bytelist = bytes(randrange(0x100)
                              for i in range(self.length))
        self.reader = FileReader(self.bytelist)

    def setUp (self):
        self.generate_random_bytes()

    def test_reading_everything_gives_back_the_same_bytes (self):
        for i in range(10):
            self.generate_random_bytes()
            assert_that(self.reader.read(), is_(equal_to(self.bytelist)))

    def test_reading_past_the_end_raises_eof (self):
        assert_that(calling(self.reader.read).with_args(self.length + 1),
                    raises(UnexpectedEOF))

    def test_eof_is_an_io_failure (self):
        assert_that(calling(self.reader.read).with_args(self.length + 1),
                    raises(IOFailure))

    def test_slices_seek_then_read (self):
        assert_that(self.reader[4:8], is_(equal_to(self.bytelist[4:12])))
        assert_that(self.reader.pos(), is_(equal_to(12)))

    def test_eof_reports_where_the_read_started (self):
        self.reader.seek(self.length - 2)

        try:
            self.reader.read(4)

        except UnexpectedEOF as e:
            assert_that(e.position, is_(equal_to(self.length - 2)))

        else:
            self.fail("Expected UnexpectedEOF")

class GivenKnownBytes (unittest.TestCase):

    def setUp (self):
        self.reader = FileReader(b"\x01\x02\x03\x04")

    def test_default_byte_order_is_big (self):
        assert_that(self.reader.read_int(2), is_(equal_to(0x0102)))

    def test_byte_order_can_change (self):
        self.reader.byte_order = "little"
        assert_that(self.reader.read_int_at(0, 2), is_(equal_to(0x0201)))

    def test_negative_seek_is_an_io_failure (self):
        assert_that(calling(self.reader.seek).with_args(-1),
                    raises(IOFailure))

    def test_reading_a_closed_file_is_an_io_failure (self):
        stream = BytesIO(b"\x01\x02")
        reader = FileReader(stream)
        stream.close()

        assert_that(calling(reader.read).with_args(1), raises(IOFailure))

class GivenNonBinaryFiles (unittest.TestCase):

    def test_only_binary_readable_files_are_accepted (self):
        # Be sure we won't accept any files that aren't binary
        # read-only.
        for mode in ("r", "w", "wb", "a", "ab"):
            with open("/dev/null", mode) as dev_null:
                assert_that(calling(FileReader).with_args(dev_null),
                            raises(TypeError, "Expected a file with mode"))

    def test_str_is_not_accepted (self):
        assert_that(calling(FileReader).with_args("sup doggie"),
                    raises(TypeError))

    def test_rb_files_are_accepted (self):
        with open("/dev/null", "rb") as dev_null:
            assert_that(FileReader(dev_null).read(), is_(equal_to(b"")))
