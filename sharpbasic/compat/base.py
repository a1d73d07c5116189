"""
Sharp BASIC tools - compat.base
Cross-platform compatibility utilities

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

import os
import sys


# platform constants
WIN32 = sys.platform == 'win32'
MACOS = sys.platform == 'darwin'

# user configuration directory
HOME_DIR = os.path.expanduser('~')

if WIN32:
    USER_CONFIG_HOME = os.getenv('APPDATA', default='')
elif MACOS:
    USER_CONFIG_HOME = os.path.join(HOME_DIR, 'Library', 'Application Support')
else:
    USER_CONFIG_HOME = os.environ.get('XDG_CONFIG_HOME') or os.path.join(HOME_DIR, '.config')
