"""
Sharp BASIC tools - converter
Tokenise and reformat plain-text BASIC programs

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

from .folding import Folder, FoldedText
from .tokeniser import Tokeniser, RawTokeniser
from .lister import Lister
from .compactor import Compactor
