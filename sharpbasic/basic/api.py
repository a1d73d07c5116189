"""
Sharp BASIC tools - api.py
Tokeniser and reformatter API

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

from .base.keywords import KeywordTable, KeywordCategory, KeywordType
from .converter.tokeniser import Tokeniser
from .converter.lister import Lister
from .converter.compactor import Compactor


# built once, shared by all converters
KEYWORDS = KeywordTable()


class Converter(object):
    """Public API to the tokeniser and reformatters."""

    def __init__(self, line_ending=None, keywords=KEYWORDS):
        """Set up converter; line_ending is used for text without any terminator."""
        self._keywords = keywords
        self._tokeniser = Tokeniser(keywords)
        self._lister = Lister(keywords, line_ending)
        self._compactor = Compactor(keywords, line_ending)

    @property
    def keywords(self):
        """Keyword table in use."""
        return self._keywords

    def tokenise(self, text):
        """Split text into a gap-free TokenStream."""
        return self._tokeniser.tokenise(text)

    def reformat_canonical(self, text):
        """Reformat text in the device's listing format."""
        return self._lister.format(text)

    def reformat_compact(self, text):
        """Reformat text in its shortest form."""
        return self._compactor.format(text)

    def convert(self, text, mode):
        """Reformat text in the given mode, 'canonical' or 'compact'."""
        if mode == 'compact':
            return self.reformat_compact(text)
        return self.reformat_canonical(text)


_CONVERTER = Converter()


def tokenise(text):
    """Split text into a gap-free TokenStream."""
    return _CONVERTER.tokenise(text)

def reformat_canonical(text):
    """Reformat text in the device's listing format."""
    return _CONVERTER.reformat_canonical(text)

def reformat_compact(text):
    """Reformat text in its shortest form."""
    return _CONVERTER.reformat_compact(text)

def lookup_keyword(text):
    """Keyword descriptor for a name or abbreviation, case-insensitive; None if unknown."""
    return KEYWORDS.lookup(text)

def all_keywords():
    """All keyword descriptors."""
    return list(KEYWORDS.keywords)

def by_category(category):
    """Keyword descriptors for a hardware tier."""
    return KEYWORDS.by_category(KeywordCategory(category))

def by_type(kwtype):
    """Keyword descriptors of a syntactic role."""
    return KEYWORDS.by_type(KeywordType(kwtype))
