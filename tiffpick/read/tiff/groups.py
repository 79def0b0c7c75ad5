# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from collections.abc    import  Mapping
from types              import  MappingProxyType

from .tags              import  IFDTag

class Group:
    """Which IFD a tag is looked for in"""
    IFD0        = "IFD0"
    EXIF        = "Exif"
    GPS_INFO    = "GPSInfo"

# Sub-IFDs are reached through a pointer tag in IFD0.
group_pointers = MappingProxyType({
    Group.EXIF:     IFDTag.ExifIFD,
    Group.GPS_INFO: IFDTag.GPSInfoIFD,
})

DEFAULT_GROUPS = MappingProxyType({
    IFDTag.ImageWidth:          Group.IFD0,
    IFDTag.ImageHeight:         Group.IFD0,
    IFDTag.BitsPerSample:       Group.IFD0,
    IFDTag.Compression:         Group.IFD0,
    IFDTag.ImageDescription:    Group.IFD0,
    IFDTag.Make:                Group.IFD0,
    IFDTag.Model:               Group.IFD0,
    IFDTag.Orientation:         Group.IFD0,
    IFDTag.XResolution:         Group.IFD0,
    IFDTag.YResolution:         Group.IFD0,
    IFDTag.ResolutionUnit:      Group.IFD0,
    IFDTag.Software:            Group.IFD0,
    IFDTag.DateTime:            Group.IFD0,
    IFDTag.Artist:              Group.IFD0,
    IFDTag.Copyright:           Group.IFD0,

    IFDTag.ExposureTime:        Group.EXIF,
    IFDTag.FNumber:             Group.EXIF,
    IFDTag.ExposureProgram:     Group.EXIF,
    IFDTag.ISO:                 Group.EXIF,
    IFDTag.DateTimeOriginal:    Group.EXIF,
    IFDTag.DateTimeDigitized:   Group.EXIF,
    IFDTag.OffsetTime:          Group.EXIF,
    IFDTag.OffsetTimeOriginal:  Group.EXIF,
    IFDTag.ExposureBiasValue:   Group.EXIF,
    IFDTag.Flash:               Group.EXIF,
    IFDTag.FocalLength:         Group.EXIF,
    IFDTag.MakerNote:           Group.EXIF,
    IFDTag.LensModel:           Group.EXIF,

    IFDTag.GPSLatitudeRef:      Group.GPS_INFO,
    IFDTag.GPSLatitude:         Group.GPS_INFO,
    IFDTag.GPSLongitudeRef:     Group.GPS_INFO,
    IFDTag.GPSLongitude:        Group.GPS_INFO,
    IFDTag.GPSAltitudeRef:      Group.GPS_INFO,
    IFDTag.GPSAltitude:         Group.GPS_INFO,
    IFDTag.GPSTimeStamp:        Group.GPS_INFO,
    IFDTag.GPSDateStamp:        Group.GPS_INFO,
})

class TagGroupMapping (Mapping):
    """Tag Group Mapping

    An unchangeable mapping of tag -> Group, built from the defaults
    plus any overrides. Manufacturers don't always put tags where the
    standard says to, so overrides win.

        >>> mapping = TagGroupMapping({IFDTag.Model: Group.EXIF})
        >>> mapping[IFDTag.Model]
        'Exif'
        >>> mapping[IFDTag.Make]
        'IFD0'

    Extending one gives you a new one; the old one stays as it was.

        >>> extended = mapping.extend({IFDTag.Model: Group.IFD0})
        >>> extended[IFDTag.Model], mapping[IFDTag.Model]
        ('IFD0', 'Exif')
    """

    valid_groups = frozenset((Group.IFD0, Group.EXIF, Group.GPS_INFO))

    def __init__ (self, overrides = None, defaults = DEFAULT_GROUPS):
        groups = dict(defaults)

        if overrides is not None:
            for tag, group in dict(overrides).items():
                if group not in self.valid_groups:
                    raise ValueError("Unknown group for tag 0x{:04x}: "
                                     "{!r}".format(tag, group))

                groups[tag] = group

        self.__groups = groups

    def __getitem__ (self, key):
        return self.__groups[key]

    def __iter__ (self):
        return iter(self.__groups)

    def __len__ (self):
        return len(self.__groups)

    def __repr__ (self):
        return "<{} ({:d} tags)>".format(self.__class__.__name__,
                                         len(self))

    def extend (self, overrides):
        """Make a new mapping with more overrides on top of this one"""
        return TagGroupMapping(overrides, defaults = self)
