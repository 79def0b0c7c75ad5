# Copyright (c) 2015 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

class WantedSet:
    """The tags one IFD scan should stop for.

        >>> wanted = WantedSet(0x0110, 0x010f)
        >>> 0x010f in wanted
        True
        >>> hex(wanted.max)
        '0x110'

    Since IFD entries are sorted by tag, the maximum tells a scan when
    nothing further along can possibly match. An empty set's maximum is
    zero.
    """

    def __init__ (self, *tags):
        self.tags   = set()
        self.max    = 0

        for tag in tags:
            self.add(tag)

    def add (self, tag):
        self.tags.add(tag)

        if tag > self.max:
            self.max = tag

    def __contains__ (self, tag):
        return tag in self.tags

    def __len__ (self):
        return len(self.tags)

    def __bool__ (self):
        return len(self.tags) > 0

    def __iter__ (self):
        return iter(sorted(self.tags))

    def __repr__ (self):
        return "<{} {}>".format(self.__class__.__name__,
                                ", ".join("0x{:04x}".format(t)
                                          for t in self))
