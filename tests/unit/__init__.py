"""
Sharp BASIC tools - tests.unit
unit tests

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

from .unittestrunner import run_unit_tests
