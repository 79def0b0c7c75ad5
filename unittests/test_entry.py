# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from hamcrest import *
from fractions import Fraction
import unittest

from tiffpick.read.tiff.entry import Entry, Inline, External, Rational, \
                                     Float, classify_payload
from tiffpick.read.tiff.tags import TiffType

class GivenPayloadBytes (unittest.TestCase):

    def test_single_short_is_inline (self):
        assert_that(classify_payload(TiffType.SHORT, 1, b"\x40\x14\0\0",
                                     "little"),
                    is_(equal_to(Inline(b"\x40\x14\0\0"))))

    def test_single_long_is_inline (self):
        assert_that(classify_payload(TiffType.LONG, 1, b"\0\0\x01\0",
                                     "big"),
                    is_(equal_to(Inline(b"\0\0\x01\0"))))

    def test_several_shorts_are_external (self):
        assert_that(classify_payload(TiffType.SHORT, 2, b"\xee\0\0\0",
                                     "little"),
                    is_(equal_to(External(0xee))))

    def test_short_strings_are_external (self):
        assert_that(classify_payload(TiffType.ASCII, 2, b"\0\0\0\x20",
                                     "big"),
                    is_(equal_to(External(0x20))))

    def test_rationals_are_external (self):
        for datatype in (TiffType.RATIONAL, TiffType.SRATIONAL):
            assert_that(classify_payload(datatype, 1, b"\x10\0\0\0",
                                         "little"),
                        is_(equal_to(External(0x10))))

    def test_doubles_are_external (self):
        assert_that(classify_payload(TiffType.DOUBLE, 1, b"\x10\0\0\0",
                                     "little"),
                    instance_of(External))

    def test_unknown_types_are_external (self):
        assert_that(classify_payload(0x63, 1, b"\x10\0\0\0", "little"),
                    instance_of(External))

class GivenAnEntry (unittest.TestCase):

    def setUp (self):
        self.entry = Entry(0x010f, TiffType.ASCII, 6, External(0x100),
                           0x1e)

    def test_external_entry_is_not_inline (self):
        assert_that(self.entry.is_inline, is_(equal_to(False)))

    def test_string_form (self):
        assert_that(str(self.entry),
                    is_(equal_to("ID: 0x10F (Make)\n"
                                 "DataType: string\n"
                                 "Length: 6\n")))

    def test_entries_compare_by_value (self):
        assert_that(self.entry, is_(equal_to(
                Entry(0x010f, TiffType.ASCII, 6, External(0x100), 0x1e))))

class GivenRationals (unittest.TestCase):

    def test_pair_is_kept_as_stored (self):
        value = Rational(10, 400)
        assert_that(value.numerator, is_(equal_to(10)))
        assert_that(value.denominator, is_(equal_to(400)))
        assert_that(value.fraction, is_(equal_to(Fraction(1, 40))))

    def test_string_forms (self):
        assert_that(str(Rational(1, 40)), is_(equal_to("1 / 40")))
        assert_that(str(Rational(72, 1)), is_(equal_to("72")))

    def test_zero_denominator_can_exist (self):
        assert_that(str(Rational(1, 0)), is_(equal_to("1 / 0")))
        assert_that(calling(float).with_args(Rational(1, 0)),
                    raises(ZeroDivisionError))

class GivenFloats (unittest.TestCase):

    def test_positive_exponent (self):
        assert_that(float(Float(1, 2, 3)), is_(equal_to(4.0)))

    def test_negative_exponent (self):
        assert_that(float(Float(-3, 2, -1)), is_(equal_to(-0.75)))

    def test_equality_goes_through_float (self):
        assert_that(Float(3, 2, 0), is_(equal_to(1.5)))
        assert_that(Float(3, 2, 0), is_(equal_to(Float(3, 4, 1))))
        assert_that(hash(Float(3, 2, 0)), is_(equal_to(hash(1.5))))

    def test_repr (self):
        assert_that(repr(Float(1, 2, 3)),
                    is_(equal_to("<Float 2**(3) * 1/2>")))
