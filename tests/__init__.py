"""
Sharp BASIC tools - tests

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""
