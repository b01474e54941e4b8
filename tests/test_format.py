# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
import hypothesis.strategies as st
import pytest
from hypothesis import assume
from hypothesis import given

from txtar.format import find_next_marker
from txtar.format import fix_newline
from txtar.format import format_marker
from txtar.format import parse_leading_marker


@pytest.mark.parametrize('text, expected', [
    ('-- hello --\nworld\n', ('hello', 'world\n')),
    ('-- hello --', ('hello', '')),
    ('-- hello --\r\nworld', ('hello', 'world')),
    ('--   spaced  name   --\n', ('spaced  name', '')),
    ('--    --\nx', ('', 'x')),
    ('-- x- --\n', ('x-', '')),
    ('-- foo ---\n', (None, '')),
    ('-- --\n', (None, '')),
    ('--  --\n', (None, '')),
    ('-- a --\r\r\n', (None, '')),
    ('--a --\n', (None, '')),
    ('x -- a --\n', (None, '')),
    ('', (None, '')),
])
def test_parse_leading_marker(text, expected):
    assert parse_leading_marker(text) == expected


def test_find_next_marker_at_start():
    assert find_next_marker('-- a --\nbody\n') == ('', 'a', 'body\n')


def test_find_next_marker_after_comment():
    assert find_next_marker('one\ntwo\n-- a --\nbody\n') == ('one\ntwo\n', 'a', 'body\n')


def test_find_next_marker_skips_malformed():
    text = 'c\n-- bad ---\n-- --\n-- good --\nrest'
    assert find_next_marker(text) == ('c\n-- bad ---\n-- --\n', 'good', 'rest')


def test_find_next_marker_not_at_line_start():
    text = 'c -- a --\nd'
    assert find_next_marker(text) == (text, None, '')


def test_find_next_marker_none():
    assert find_next_marker('') == ('', None, '')
    assert find_next_marker('just text\n') == ('just text\n', None, '')


def test_find_next_marker_last_line():
    assert find_next_marker('x\n-- end --') == ('x\n', 'end', '')


@given(st.text())
def test_find_next_marker_total(text):
    before, name, after = find_next_marker(text)
    if name is None:
        assert before == text
        assert after == ''
    else:
        assert text.startswith(before)
        assert text.endswith(after)


@given(st.text())
def test_find_next_marker_no_markers(text):
    assume(not any(line.startswith('-- ') for line in text.split('\n')))
    assert find_next_marker(text) == (text, None, '')


def test_fix_newline():
    assert fix_newline('') == ''
    assert fix_newline('a') == 'a\n'
    assert fix_newline('a\n') == 'a\n'
    assert fix_newline('\n') == '\n'
    assert fix_newline('a\r') == 'a\r\n'


def test_format_marker():
    assert format_marker('file 1') == '-- file 1 --\n'
    assert parse_leading_marker(format_marker('file 1')) == ('file 1', '')


def test_format_marker_empty_name():
    assert format_marker('') == '--   --\n'
    assert parse_leading_marker(format_marker('')) == ('', '')


def test_parse_leading_marker_offset():
    text = 'abc\n-- a --\r\nrest'
    assert parse_leading_marker(text, 4) == ('a', 'rest')
    assert parse_leading_marker(text, 0) == (None, '')
    assert parse_leading_marker(text, 5) == (None, '')


def test_find_next_marker_many_candidates():
    text = '-- x\n' * 20000 + '-- end --\ntail'
    assert find_next_marker(text) == ('-- x\n' * 20000, 'end', 'tail')
