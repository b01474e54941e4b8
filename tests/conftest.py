import pytest

from txtar.writer import ArchiveWriter

BASIC = (
    "comment1\n"
    "comment2\n"
    "-- file1 --\n"
    "File 1 text.\n"
    "-- foo ---\n"
    "More file 1 text.\n"
    "-- file 2 --\n"
    "File 2 text.\n"
    "-- empty --\n"
    "-- empty filename line --\n"
    "some content\n"
    "-- --\n"
    "-- noNL --\n"
    "hello world"
)


@pytest.fixture
def basic_text():
    return BASIC


@pytest.fixture(scope='session')
def basic_txtar(tmpdir_factory):
    """The basic example archive, on disk"""
    tmpdir = tmpdir_factory.mktemp('data')
    archive_p = tmpdir.join('basic.txtar')
    archive_p.write_binary(BASIC.encode('utf-8'))
    return archive_p


@pytest.fixture(scope='session')
def tree_txtar(tmpdir_factory):
    """Archive created from a small directory tree"""
    tmpdir = tmpdir_factory.mktemp('tree')
    tmpdir.join('hello.txt').write('hello world')
    tmpdir.join('src', 'main.go').write('package main\n', ensure=True)
    archive_p = tmpdir.join('tree.txtar')
    with archive_p.open('wb') as f:
        with ArchiveWriter(f, comment='a tree\n') as t:
            with tmpdir.as_cwd():
                t.add('hello.txt')
                t.add('src')
    return archive_p
