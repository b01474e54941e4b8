# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
"""txtar reading support.

This module provides functions to load archives from file objects and paths,
and the ArchiveReader class which is used to read and extract archives.
"""

import io
import logging
import os

from txtar.archive import Archive
from txtar.errors import ArchiveReadError
from txtar.utils import mkdir
from txtar.utils import safejoin

log = logging.getLogger(__name__)


def read(fileobj, encoding='utf-8'):
    """Read an entire file object and parse it as an archive.

    Args:
        fileobj (file object): A file-like object open in read mode. Binary
            streams are decoded using `encoding`; text streams are used as-is.
        encoding (str, optional): encoding of binary data. Defaults to 'utf-8'.

    Returns:
        Archive

    Raises:
        ArchiveReadError if reading or decoding fails.

    """
    try:
        data = fileobj.read()
    except (IOError, OSError) as e:
        raise ArchiveReadError('Error reading archive: {}'.format(e)) from e
    except UnicodeDecodeError as e:
        raise ArchiveReadError('Error decoding archive: {}'.format(e)) from e

    if isinstance(data, bytes):
        try:
            data = data.decode(encoding)
        except UnicodeDecodeError as e:
            raise ArchiveReadError('Error decoding archive as {}: {}'.format(encoding, e)) from e

    log.debug('read %d characters of txtar data', len(data))
    return Archive.parse(data)


def from_file(path, encoding='utf-8'):
    """Read the archive stored in the file at `path`.

    Args:
        path (str): path to the archive on disk
        encoding (str, optional): encoding of the file. Defaults to 'utf-8'.

    Returns:
        Archive

    Raises:
        ArchiveReadError if the file can't be opened, read or decoded. The
        error's `path` attribute is set to `path`.

    """
    try:
        f = open(path, 'rb')
    except (IOError, OSError) as e:
        raise ArchiveReadError('Error opening {}: {}'.format(path, e), path) from e

    with f:
        try:
            return read(f, encoding)
        except ArchiveReadError as e:
            e.path = path
            raise


class ArchiveReader(object):
    """Support for reading and extracting txtar archives.

    Example::
        with ArchiveReader(open('test.txtar', 'rb')) as t:
            t.extract('/tmp/extracted')
    """

    def __init__(self, fileobj, encoding='utf-8'):
        """Initialize a new ArchiveReader object.

        Args:
            fileobj (file object): A file-like object open in read mode where
                the archive will be read from.
            encoding (str, optional): encoding used for binary file objects.
                Defaults to 'utf-8'.
        """
        self.fileobj = fileobj
        self.archive = read(fileobj, encoding)

    def __enter__(self):
        """Support the context manager protocol."""
        return self

    def __exit__(self, type_, value, tb):
        """Support the context manager protocol."""
        pass

    def extract_file(self, f, destdir):
        """Write the archive member `f` under `destdir`.

        Args:
            f (:obj:`txtar.archive.File`): archive member to write
            destdir (str): directory to extract into

        Returns:
            path of the written file

        Raises:
            ValueError if `f` has an empty name, or a name that resolves to
            `destdir` itself or points outside of it.

        """
        if not f.name:
            raise ValueError("can't extract a file with an empty name")
        path = safejoin(destdir, f.name)
        if path == os.path.normpath(os.path.abspath(destdir)):
            raise ValueError("{!r} doesn't name a file under {}".format(f.name, destdir))
        mkdir(os.path.dirname(path))
        # newline='' keeps any \r in the content
        with io.open(path, 'w', encoding='utf-8', newline='') as out:
            out.write(f.content)
        log.debug('extracted %s to %s', f.name, path)
        return path

    def extract(self, destdir, names=None):
        """Extract the archive into a directory.

        Args:
            destdir (str): A local directory on disk into which the files of
                this archive will be extracted. Required parent directories
                will be created as necessary.
            names (list of str, optional): only extract files with these
                names. Defaults to extracting every file.

        Returns:
            list of paths written

        """
        written = []
        seen = set()
        for f in self.archive.files:
            if names is not None and f.name not in names:
                continue
            if f.name in seen:
                log.warning('%s appears more than once; overwriting', f.name)
            seen.add(f.name)
            written.append(self.extract_file(f, destdir))
        return written
