"""
Sharp BASIC tools - lexer and reformatters for Sharp PC-1500 BASIC

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

from .data import NAME, VERSION, AUTHOR, COPYRIGHT
from .api import Converter, KEYWORDS
from .api import tokenise, reformat_canonical, reformat_compact
from .api import lookup_keyword, all_keywords, by_category, by_type
from .base.keywords import Keyword, KeywordTable, KeywordCategory, KeywordType
from .base.tokens import Token, TokenKind, TokenStream

__version__ = VERSION
