# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
"""txtar writing support.

This module provides the ArchiveWriter class which is used to write txtar
archives.
"""
import io
import logging
import os

from txtar.archive import Archive
from txtar.format import find_next_marker
from txtar.utils import archive_name

log = logging.getLogger(__name__)


def check_name(name):
    """Raise ValueError if `name` can't be stored in a marker line."""
    if '\n' in name or '\r' in name:
        raise ValueError('file names must not contain newlines: {!r}'.format(name))
    if not name or name.strip() != name:
        raise ValueError('file names must be non-empty and not padded with '
                         'whitespace: {!r}'.format(name))


class ArchiveWriter(object):
    """Class for writing txtar archives.

    Example::
        with ArchiveWriter(open('test.txtar', 'wb')) as t:
            t.add('testdata')
    """

    def __init__(self, fileobj, comment=None, encoding='utf-8'):
        """Initialize a new ArchiveWriter object.

        Args:
            fileobj (file object): A file-like object open in write mode where
                the archive will be written to. Text and binary file objects
                are both supported.
            comment (str, optional): comment placed before the first file
            encoding (str, optional): encoding used for binary file objects,
                and for reading files added from disk. Defaults to 'utf-8'.
        """
        self.fileobj = fileobj
        self.encoding = encoding
        self.archive = Archive(comment or '')

    def flush(self):
        """Flush data written to our file object."""
        self.fileobj.flush()

    def __enter__(self):
        """Support the context manager protocol.

        On exit, .finish() will be called and then the data will be flushed to
        our file object.
        """
        return self

    def __exit__(self, type_, value, tb):
        """Support the context manager protocol.

        Finalizes writing the archive, unless the block raised.
        """
        if type_ is not None:
            return
        self.finish()
        self.flush()

    def add(self, path, start=None):
        """Add `path` to the archive.

        If `path` is a file, it will be added directly.
        If `path` is a directory, it will be traversed recursively and all
        files inside will be added.

        Args:
            path (str): path to file or directory on disk to add
            start (str, optional): directory that member names are relative
                to. Defaults to using `path` as given.
        """
        if os.path.isdir(path):
            self.add_dir(path, start)
        else:
            self.add_file(path, archive_name(path, start))

    def add_dir(self, path, start=None):
        """Add all files under directory `path` to the archive.

        Files are added in sorted order so that archives are reproducible.
        """
        if not os.path.isdir(path):
            raise ValueError('{} is not a directory'.format(path))
        for root, dirs, files in os.walk(path):
            dirs.sort()
            for f in sorted(files):
                full = os.path.join(root, f)
                self.add_file(full, archive_name(full, start))

    def add_file(self, path, name=None):
        """Add a single file to the archive.

        Args:
            path (str): path to the file on disk
            name (str, optional): name of this file in the archive. Defaults
                to `path`.
        """
        if name is None:
            name = archive_name(path)
        with io.open(path, 'r', encoding=self.encoding, newline='') as f:
            content = f.read()
        return self.add_text(name, content)

    def add_text(self, name, content):
        """Add a file called `name` with the given content to the archive.

        Raises:
            ValueError if `name` can't be stored in a marker line, or if
            `content` contains a marker line of its own.

        """
        check_name(name)
        before, inner, after = find_next_marker(content)
        if inner is not None:
            raise ValueError('content of {} contains the marker line for {!r}'.format(name, inner))
        log.debug('adding %s (%d characters)', name, len(content))
        return self.archive.add(name, content)

    def finish(self):
        """Write the archive to our file object."""
        data = self.archive.format()
        if isinstance(self.fileobj, io.TextIOBase):
            self.fileobj.write(data)
        else:
            self.fileobj.write(data.encode(self.encoding))
