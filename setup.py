# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
from setuptools import setup, find_packages

setup(
    name="txtar",
    version="1.0.0",
    packages=find_packages('src'),
    package_dir={'': 'src'},
    license="MPL 2.0",
    description="txtar (text archive) Python implementation",
    install_requires=open('requirements.txt').readlines(),
    extras_require={
        'test': open('requirements-test.txt').readlines(),
    },
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    python_requires='>=3.8',
    entry_points={
        'console_scripts': ['txtar=txtar.cli:main'],
    },
)
