"""
Sharp BASIC tools - lexer and reformatters for Sharp PC-1500 BASIC

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

from .basic import __version__
from .basic import NAME, VERSION, AUTHOR, COPYRIGHT
from .basic import Converter, KEYWORDS
from .basic import tokenise, reformat_canonical, reformat_compact
from .basic import lookup_keyword, all_keywords, by_category, by_type
from .basic import KeywordCategory, KeywordType, TokenKind
from .main import main, script_entry_point_guard
