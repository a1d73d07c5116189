"""
Sharp BASIC tools - lexer and reformatters for Sharp PC-1500 BASIC

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

from .main import main, script_entry_point_guard

with script_entry_point_guard():
    main()
