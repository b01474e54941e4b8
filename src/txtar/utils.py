# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
"""Filesystem utilities for reading and writing txtar archives."""
import os


def mkdir(path):
    """Make a directory and its parents.

    Args:
        path (str): path to create

    Returns:
        None

    Raises:
        OSError if the directory cannot be created.

    """
    try:
        os.makedirs(path)
        # sanity check
        if not os.path.isdir(path):  # pragma: no cover
            raise IOError('path is not a directory')
    except OSError as e:
        # EEXIST
        if e.errno == 17 and os.path.isdir(path):
            return
        raise


def path_is_inside(path, dirname):
    """Return True if path is under dirname."""
    path = os.path.abspath(path)
    dirname = os.path.abspath(dirname)
    while len(path) >= len(dirname):
        if path == dirname:
            return True
        newpath = os.path.dirname(path)
        if newpath == path:
            return False
        path = newpath
    return False


def safejoin(base, *elements):
    """Safely joins paths together.

    The result will always be a subdirectory under `base`, otherwise ValueError
    is raised.

    Args:
        base (str): base path
        elements (list of strings): path elements to join to base

    Returns:
        elements joined to base

    """
    base = os.path.abspath(base)
    path = os.path.join(base, *elements)
    path = os.path.normpath(path)
    if not path_is_inside(path, base):
        raise ValueError('target path is outside of the base path')
    return path


def archive_name(path, start=None):
    """Return the archive member name for the file at `path`.

    Names are relative to `start` when given, and always use / as the
    separator.
    """
    if start is not None:
        path = os.path.relpath(path, start)
    # very difficult to mock this out for coverage on linux
    if os.sep == '\\':  # pragma: no cover
        path = path.replace('\\', '/')
    return path
