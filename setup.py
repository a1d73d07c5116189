#!/usr/bin/env python3
"""
Sharp BASIC tools install script

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

import os
import json

from setuptools import find_packages, setup


###############################################################################
# metadata

HERE = os.path.abspath(os.path.dirname(__file__))

# read from the data file: importing the package may fail before install
with open(os.path.join(HERE, 'sharpbasic', 'basic', 'data', 'meta.json'), 'r') as meta:
    _METADATA = json.load(meta)
    VERSION = _METADATA['version']
    AUTHOR = _METADATA['author']


###############################################################################
# options

SETUP_OPTIONS = dict(
    name='sharpbasic',
    version=VERSION,
    author=AUTHOR,
    description='Tokeniser and reformatters for Sharp PC-1500 BASIC',
    license='GPLv3',
    python_requires='>=3.9',

    # contents
    # only include subpackages of sharpbasic: exclude tests etc
    packages=find_packages(include=['sharpbasic', 'sharpbasic.*']),
    package_data={
        'sharpbasic.basic.data': ['*.json'],
        'sharpbasic.data': ['*.txt'],
    },
    install_requires=[],
    extras_require=dict(
        test=['coverage'],
    ),
    # launchers
    entry_points=dict(
        console_scripts=['sharpbasic=sharpbasic:main'],
    ),
)

###############################################################################
# install

setup(**SETUP_OPTIONS)
