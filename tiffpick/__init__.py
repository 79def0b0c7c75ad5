# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .read.file_reader  import  FileReader
from .read.tiff         import  TiffParser, IFDTag, TiffType, Group,   \
                                Entry, Rational, WantedSet

__version__ = "1.0.0.dev0"

__all__ = [
    "FileReader",
    "TiffParser",
    "IFDTag",
    "TiffType",
    "Group",
    "Entry",
    "Rational",
    "WantedSet",
]
