# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
"""Marker line scanning for txtar data.

A txtar archive is zero or more comment lines followed by a sequence of file
entries. Each entry starts with a marker line of the form "-- NAME --" and
runs until the next marker line or the end of the input.

There are no syntax errors in this format; the functions here never raise.
"""

MARKER = '-- '
NEWLINE_MARKER = '\n-- '
MARKER_END = ' --'


def parse_leading_marker(text, start=0):
    """Parse a marker line starting at offset `start` of `text`.

    Args:
        text (str): text to inspect
        start (int, optional): offset of the line to inspect. Defaults to 0.

    Returns:
        (name, after) if a marker line starts at `start`, where `after` is
        everything following the marker line's newline. (None, '') otherwise.

    """
    if not text.startswith(MARKER, start):
        return None, ''

    end = text.find('\n', start)
    if end == -1:
        end = len(text)
    stop = end
    if stop > start and text[stop - 1] == '\r':
        stop -= 1

    if (not text.endswith(MARKER_END, start, stop) or
            stop - start <= len(MARKER) + len(MARKER_END)):
        return None, ''

    name = text[start + len(MARKER):stop - len(MARKER_END)].strip()
    return name, text[end + 1:]


def find_next_marker(text):
    """Find the next marker line in `text`.

    Marker lines are only recognized at the start of `text` or right after a
    newline. Lines that look like markers but aren't stay part of `before`.

    Args:
        text (str): text to search

    Returns:
        (before, name, after) where `before` is the text up to the marker
        line, `name` the trimmed file name and `after` the text following the
        marker line. (text, None, '') if there is no marker.

    """
    i = 0
    while True:
        name, after = parse_leading_marker(text, i)
        if name is not None:
            return text[:i], name, after

        j = text.find(NEWLINE_MARKER, i)
        if j == -1:
            return text, None, ''
        i = j + 1


def fix_newline(text):
    """Return `text` with a trailing newline, unless it is empty."""
    if text and not text.endswith('\n'):
        return text + '\n'
    return text


def format_marker(name):
    """Return the marker line introducing the file `name`.

    An empty name is padded so the line stays long enough to be a marker.
    """
    if not name:
        name = ' '
    return '{}{}{}\n'.format(MARKER, name, MARKER_END)
