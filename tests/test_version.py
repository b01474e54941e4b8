import os
import re

from importlib.metadata import distribution

import txtar


def test_version_in_setuppy():
    dist = distribution('txtar')
    assert txtar.version_str == dist.version
    assert ".".join(str(_) for _ in txtar.version) == dist.version


def test_version_in_changelog():
    here = os.path.abspath(os.path.dirname(__file__))
    changelog_path = os.path.join(here, '..', 'CHANGELOG.rst')
    with open(changelog_path) as f:
        changelog = f.read()
    assert re.search('^{}'.format(re.escape(txtar.version_str)), changelog,
                     re.M)
