# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .entry     import  Entry, Inline, External, Rational, Float
from .groups    import  Group, TagGroupMapping, DEFAULT_GROUPS
from .header    import  TiffHeader, HeaderDecoder, decode_header
from .parser    import  TiffParser
from .tags      import  IFDTag, TiffType, TiffTagNameDict
from .wanted    import  WantedSet

__all__ = [
    "Entry",
    "Inline",
    "External",
    "Rational",
    "Float",
    "Group",
    "TagGroupMapping",
    "DEFAULT_GROUPS",
    "TiffHeader",
    "HeaderDecoder",
    "decode_header",
    "TiffParser",
    "IFDTag",
    "TiffType",
    "TiffTagNameDict",
    "WantedSet",
]
