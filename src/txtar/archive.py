# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
"""In-memory txtar archives.

This module provides the Archive and File classes, and the parser that turns
txtar text into an Archive.

Example::
    archive = Archive.parse(text)
    if 'go.mod' in archive:
        print(archive['go.mod'].content)
"""

from txtar.format import find_next_marker
from txtar.format import fix_newline
from txtar.format import format_marker


class File(object):
    """A single file stored in an Archive.

    Files are immutable; equality compares both name and content.
    """

    __slots__ = ('_name', '_content')

    def __init__(self, name, content):
        """Initialize a new File.

        Args:
            name (str): name of this file in the archive
            content (str): file content
        """
        self._name = name
        self._content = content

    @property
    def name(self):
        """Return the name of this file."""
        return self._name

    @property
    def content(self):
        """Return the content of this file."""
        return self._content

    def __eq__(self, other):
        if not isinstance(other, File):
            return NotImplemented
        return (self.name, self.content) == (other.name, other.content)

    def __hash__(self):
        return hash((self.name, self.content))

    def __repr__(self):
        return 'File({!r}, {!r})'.format(self.name, self.content)


class Archive(object):
    """A txtar archive: a comment followed by a list of files.

    File names don't need to be unique. Lookups by name return the first
    matching file.
    """

    def __init__(self, comment='', files=None):
        """Initialize a new Archive.

        Args:
            comment (str, optional): text preceding the first file.
                Defaults to ''.
            files (iterable of File, optional): files in this archive.
                Defaults to no files.
        """
        self.comment = comment
        self.files = list(files) if files is not None else []

    @classmethod
    def parse(cls, text):
        """Parse `text` into a new Archive.

        Parsing never fails; text without any marker lines becomes an archive
        with only a comment.

        Args:
            text (str): txtar data

        Returns:
            Archive

        """
        comment, name, after = find_next_marker(text)
        files = []
        while name is not None:
            data, next_name, after = find_next_marker(after)
            files.append(File(name, fix_newline(data)))
            name = next_name

        return cls(comment, files)

    def format(self):
        """Return the txtar representation of this archive.

        The comment and each file's content get a trailing newline if they
        are missing one.
        """
        parts = [fix_newline(self.comment)]
        for f in self.files:
            parts.append(format_marker(f.name))
            parts.append(fix_newline(f.content))
        return ''.join(parts)

    def add(self, name, content):
        """Append a new file to this archive and return it."""
        f = File(name, content)
        self.files.append(f)
        return f

    def contains(self, name):
        """Return True if this archive has a file called `name`."""
        return any(f.name == name for f in self.files)

    def get(self, name, default=None):
        """Return the first file called `name`.

        Args:
            name (str): exact file name to look for
            default (optional): returned when there is no such file.
                Defaults to None.

        Returns:
            File, or `default`

        """
        for f in self.files:
            if f.name == name:
                return f
        return default

    def names(self):
        """Return the list of file names, in archive order."""
        return [f.name for f in self.files]

    def __getitem__(self, name):
        """Return the first file called `name`.

        Raises:
            KeyError if the archive has no such file. Use .get() to avoid
            the exception.

        """
        f = self.get(name)
        if f is None:
            raise KeyError("Archive doesn't contain file: {}".format(name))
        return f

    def __contains__(self, name):
        return self.contains(name)

    def __iter__(self):
        return iter(self.files)

    def __len__(self):
        return len(self.files)

    def __eq__(self, other):
        if not isinstance(other, Archive):
            return NotImplemented
        return self.comment == other.comment and self.files == other.files

    def __str__(self):
        return self.format()

    def __repr__(self):
        return 'Archive(comment={!r}, files={!r})'.format(self.comment, self.files)


def parse(text):
    """Parse `text` into an Archive. See Archive.parse."""
    return Archive.parse(text)
