# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
"""Exceptions raised by txtar."""


class ArchiveReadError(IOError):
    """Raised when txtar data can't be read or decoded.

    The underlying exception is available as __cause__.

    Attributes:
        path (str): path of the archive being read, or None when reading
            from a file object.
    """

    def __init__(self, message, path=None):
        super(ArchiveReadError, self).__init__(message)
        self.path = path
