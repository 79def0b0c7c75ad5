# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .file_reader   import  FileReader
from .tiff          import  TiffParser

__all__ = [
    "FileReader",
    "TiffParser",
]
