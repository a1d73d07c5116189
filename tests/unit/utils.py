"""
Sharp BASIC tools - tests.utils
Test case base with a scratch directory per test class

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

import unittest
import os
import shutil
from unittest import main as run_tests


HERE = os.path.dirname(os.path.abspath(__file__))


class TestCase(unittest.TestCase):
    """Test case with files in output/<tag>/."""

    tag = None

    def setUp(self):
        """Start each test with an empty scratch directory."""
        self._dir = os.path.join(HERE, 'output', self.tag or 'misc')
        shutil.rmtree(self._dir, ignore_errors=True)
        os.makedirs(self._dir, exist_ok=True)

    def output_path(self, *names):
        """Path in the scratch directory."""
        return os.path.join(self._dir, *names)

    def write_file(self, name, text, encoding='utf-8'):
        """Write a text file to the scratch directory, keeping line endings; return its path."""
        path = self.output_path(name)
        with open(path, 'w', encoding=encoding, newline='') as f:
            f.write(text)
        return path

    def read_file(self, name, encoding='utf-8'):
        """Read a text file from the scratch directory, keeping line endings."""
        with open(self.output_path(name), 'r', encoding=encoding, newline='') as f:
            return f.read()
