# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
"""Package for reading and writing txtar archives.

txtar is a trivial text-based file archive format. An archive is an optional
comment followed by file entries, each introduced by a "-- NAME --" marker
line. It is easy to edit by hand and diffs nicely; any text is a valid
archive.

The primary modules of interest are `txtar.archive`, `txtar.reader` and
`txtar.writer`
"""
from txtar.archive import Archive
from txtar.archive import File
from txtar.archive import parse
from txtar.errors import ArchiveReadError
from txtar.reader import from_file
from txtar.reader import read

version = (1, 0, 0)
version_str = "1.0.0"

__all__ = ['Archive', 'ArchiveReadError', 'File', 'from_file', 'parse', 'read']
