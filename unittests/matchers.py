# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from hamcrest.core.base_matcher import BaseMatcher

class evaluates_to (BaseMatcher):

    def __init__ (self, expected):
        self.expected = expected

    def _matches (self, item):
        return bool(item) == self.expected

    def describe_to (self, description):
        description.append_text("an object with {} truthiness".format(
                repr(self.expected)))

    def describe_mismatch (self, item, description):
        description.append_text("was {} ".format(bool(item))) \
                .append_description_of(item)

class starts_with_bytes (BaseMatcher):

    def __init__ (self, prefix):
        self.prefix = prefix

    def _matches (self, item):
        return isinstance(item, bytes) and item.startswith(self.prefix)

    def describe_to (self, description):
        description.append_text("bytes starting with ") \
                .append_description_of(self.prefix)

    def describe_mismatch (self, item, description):
        description.append_text("began with ") \
                .append_description_of(item[:len(self.prefix)])

class a_rational (BaseMatcher):

    def __init__ (self, numerator, denominator):
        self.pair = (numerator, denominator)

    def _matches (self, item):
        return (getattr(item, "numerator", None),
                getattr(item, "denominator", None)) == self.pair

    def describe_to (self, description):
        description.append_text("a rational {:d}/{:d}".format(*self.pair))

class an_entry (BaseMatcher):

    def __init__ (self, tag, datatype, count):
        self.expected = (tag, datatype, count)

    def _matches (self, item):
        return (item.tag, item.datatype, item.count) == self.expected

    def describe_to (self, description):
        description.append_text(
                "an entry with tag 0x{:04x}, datatype {:d}, count {:d}"
                .format(*self.expected))

    def describe_mismatch (self, item, description):
        description.append_text(
                "was tag 0x{:04x}, datatype {:d}, count {:d}".format(
                        item.tag, item.datatype, item.count))
