"""
Sharp BASIC tools - keywords.py
Keyword table for the Sharp PC-1500 and its CE-150 and CE-158 extensions

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

import logging
from enum import Enum


class KeywordCategory(Enum):
    """Hardware tier that provides a keyword."""

    PC1500_CORE = 'pc1500'
    CE150_EXTENSION = 'ce150'
    CE158_EXTENSION = 'ce158'


class KeywordType(Enum):
    """Syntactic role of a keyword."""

    STATEMENT = 'statement'
    FUNCTION = 'function'
    OPERATOR = 'operator'
    KEYWORD = 'keyword'


PC1500_CORE = KeywordCategory.PC1500_CORE
CE150_EXTENSION = KeywordCategory.CE150_EXTENSION
CE158_EXTENSION = KeywordCategory.CE158_EXTENSION

STATEMENT = KeywordType.STATEMENT
FUNCTION = KeywordType.FUNCTION
OPERATOR = KeywordType.OPERATOR
KEYWORD = KeywordType.KEYWORD

# type characters that may end a keyword name
SIGILS = ('$', '#')

# the only sigil that is kept in abbreviated form
HASH_SIGIL = '#'

KW_REM = 'REM'


# name, abbreviation, token code, type
# abbreviation is None where the keyword has no shorter input form
PC1500_KEYWORDS = (
    # functions
    ('ABS', 'AB', 0xF170, FUNCTION),
    ('ACS', 'AC', 0xF174, FUNCTION),
    ('ASC', None, 0xF160, FUNCTION),
    ('ASN', 'AS', 0xF173, FUNCTION),
    ('ATN', 'AT', 0xF175, FUNCTION),
    ('CHR$', 'CH', 0xF163, FUNCTION),
    ('COS', None, 0xF17E, FUNCTION),
    ('DEG', None, 0xF165, FUNCTION),
    ('DMS', 'DM', 0xF166, FUNCTION),
    ('ERL', None, 0xF053, FUNCTION),
    ('ERN', None, 0xF052, FUNCTION),
    ('EXP', 'EX', 0xF178, FUNCTION),
    ('INKEY$', 'INK', 0xF15C, FUNCTION),
    ('INT', None, 0xF171, FUNCTION),
    ('LEFT$', 'LEF', 0xF17A, FUNCTION),
    ('LEN', 'LEN', 0xF164, FUNCTION),
    ('LN', 'LN', 0xF176, FUNCTION),
    ('LOG', 'LO', 0xF177, FUNCTION),
    ('MEM', 'M', 0xF158, FUNCTION),
    ('MID$', 'MI', 0xF17B, FUNCTION),
    ('PEEK', None, 0xF16F, FUNCTION),
    ('PEEK#', 'PE', 0xF16E, FUNCTION),
    ('PI', None, 0xF15D, FUNCTION),
    ('POINT', 'POI', 0xF168, FUNCTION),
    ('RIGHT$', 'RI', 0xF172, FUNCTION),
    ('RND', 'RN', 0xF17C, FUNCTION),
    ('SGN', 'SG', 0xF179, FUNCTION),
    ('SIN', 'SI', 0xF17D, FUNCTION),
    ('SPACE$', None, 0xF061, FUNCTION),
    ('SQR', 'SQ', 0xF16B, FUNCTION),
    ('STATUS', 'STA', 0xF167, FUNCTION),
    ('STR$', 'STR', 0xF161, FUNCTION),
    ('TAN', 'TA', 0xF17F, FUNCTION),
    ('TIME', 'TI', 0xF15B, FUNCTION),
    ('VAL', 'V', 0xF162, FUNCTION),
    # statements
    ('AREAD', 'A', 0xF180, STATEMENT),
    ('ARUN', 'ARU', 0xF181, STATEMENT),
    ('BEEP', 'B', 0xF182, STATEMENT),
    ('BREAK', None, 0xF0B3, STATEMENT),
    ('CALL', 'CA', 0xF18A, STATEMENT),
    ('CHAIN', 'CHA', 0xF0B2, STATEMENT),
    ('CLEAR', 'CL', 0xF187, STATEMENT),
    ('CLOAD', 'CLO', 0xF089, STATEMENT),
    ('CLS', None, 0xF088, STATEMENT),
    ('CONSOLE', None, 0xF0B1, STATEMENT),
    ('CONT', 'C', 0xF183, STATEMENT),
    ('CSAVE', 'CS', 0xF095, STATEMENT),
    ('CURSOR', 'CU', 0xF084, STATEMENT),
    ('DATA', 'DA', 0xF18D, STATEMENT),
    ('DEGREE', 'DE', 0xF18C, STATEMENT),
    ('DIM', 'D', 0xF18B, STATEMENT),
    ('END', 'E', 0xF18E, STATEMENT),
    ('ERROR', 'ER', 0xF1B4, STATEMENT),
    ('FEED', None, 0xF0B0, STATEMENT),
    ('FOR', 'F', 0xF1A5, STATEMENT),
    ('GOSUB', 'GOS', 0xF194, STATEMENT),
    ('GOTO', 'G', 0xF192, STATEMENT),
    ('GRAD', 'GR', 0xF186, STATEMENT),
    ('IF', None, 0xF196, STATEMENT),
    ('INPUT', 'I', 0xF091, STATEMENT),
    ('LET', 'LE', 0xF198, STATEMENT),
    ('LF', 'LF', 0xF0B6, STATEMENT),
    ('LIST', 'L', 0xF090, STATEMENT),
    ('LOCK', 'LOC', 0xF1B5, STATEMENT),
    ('MERGE', 'MER', 0xF08F, STATEMENT),
    ('NEW', None, 0xF19B, STATEMENT),
    ('NEXT', 'N', 0xF19A, STATEMENT),
    ('OFF', None, 0xF19E, STATEMENT),
    ('ON', 'O', 0xF19C, STATEMENT),
    ('OPN', None, 0xF19D, STATEMENT),
    ('PAUSE', 'PA', 0xF1A2, STATEMENT),
    ('POKE', None, 0xF1A1, STATEMENT),
    ('POKE#', 'PO', 0xF1A0, STATEMENT),
    ('PRINT', 'P', 0xF097, STATEMENT),
    ('RADIAN', 'RAD', 0xF1AA, STATEMENT),
    ('RANDOM', 'RA', 0xF1A8, STATEMENT),
    ('READ', 'REA', 0xF1A6, STATEMENT),
    ('REM', None, 0xF1AB, STATEMENT),
    ('RESTORE', 'RES', 0xF1A7, STATEMENT),
    ('RETURN', 'RE', 0xF199, STATEMENT),
    ('RUN', 'R', 0xF1A4, STATEMENT),
    ('STOP', 'S', 0xF1AC, STATEMENT),
    ('TAB', None, 0xF0BB, STATEMENT),
    ('TROFF', 'TROF', 0xF1B0, STATEMENT),
    ('TRON', 'TR', 0xF1AF, STATEMENT),
    ('UNLOCK', 'UN', 0xF1B6, STATEMENT),
    ('USING', 'U', 0xF085, STATEMENT),
    ('WAIT', 'W', 0xF1B3, STATEMENT),
    ('ZONE', None, 0xF0B4, STATEMENT),
    # operators
    ('AND', 'AN', 0xF150, OPERATOR),
    ('NOT', 'NO', 0xF16D, OPERATOR),
    ('OR', None, 0xF151, OPERATOR),
    # grammar particles
    ('STEP', 'STE', 0xF1AD, KEYWORD),
    ('THEN', 'T', 0xF1AE, KEYWORD),
    ('TO', None, 0xF1B1, KEYWORD),
)

# CE-150 graphics printer and cassette interface
CE150_KEYWORDS = (
    ('COLOR', 'COL', 0xF0B5, STATEMENT),
    ('CSIZE', 'CSI', 0xE680, STATEMENT),
    ('GCURSOR', 'GCU', 0xF093, STATEMENT),
    ('GLCURSOR', 'GL', 0xE682, STATEMENT),
    ('GPRINT', 'GP', 0xF09F, STATEMENT),
    ('GRAPH', 'GRAP', 0xE681, STATEMENT),
    ('LCURSOR', 'LCU', 0xE683, STATEMENT),
    ('LINE', 'LIN', 0xF0B7, STATEMENT),
    ('LLIST', 'LL', 0xF0B8, STATEMENT),
    ('LPRINT', 'LP', 0xF0B9, STATEMENT),
    ('RLINE', 'RL', 0xF0BA, STATEMENT),
    ('ROTATE', 'RO', 0xE685, STATEMENT),
    ('SORGN', 'SO', 0xE684, STATEMENT),
    ('TEXT', 'TEX', 0xE686, STATEMENT),
)

# CE-158 RS-232C and parallel interface
CE158_KEYWORDS = (
    ('COM$', None, 0xE858, FUNCTION),
    ('DEV$', None, 0xE857, FUNCTION),
    ('INSTAT', None, 0xE859, FUNCTION),
    ('OUTSTAT', None, 0xE880, FUNCTION),
    ('RINKEY$', None, 0xE85A, FUNCTION),
    ('DTE', None, 0xE884, STATEMENT),
    ('PROTOCOL', None, 0xE881, STATEMENT),
    ('RMT', 'RM', 0xE7A9, STATEMENT),
    ('SETCOM', None, 0xE882, STATEMENT),
    ('SETDEV', None, 0xE886, STATEMENT),
    ('TERMINAL', None, 0xE883, STATEMENT),
    ('TRANSMIT', None, 0xE885, STATEMENT),
    ('TEST', 'TE', 0xF0BC, STATEMENT),
)

KEYWORD_GROUPS = (
    (PC1500_CORE, PC1500_KEYWORDS),
    (CE150_EXTENSION, CE150_KEYWORDS),
    (CE158_EXTENSION, CE158_KEYWORDS),
)


class Keyword(object):
    """Keyword descriptor."""

    __slots__ = ('_name', '_abbreviation', '_code', '_category', '_type')

    def __init__(self, name, abbreviation, code, category, kwtype):
        """Initialise descriptor; abbreviation None means same as name."""
        self._name = name
        self._abbreviation = abbreviation or name
        self._code = code
        self._category = category
        self._type = kwtype

    def __repr__(self):
        """Debugging representation."""
        return '<Keyword %s (%s) %04X>' % (self._name, self.display_abbreviation, self._code)

    @property
    def name(self):
        """Canonical full name."""
        return self._name

    @property
    def abbreviation(self):
        """Raw abbreviation, without period."""
        return self._abbreviation

    @property
    def code(self):
        """Two-byte token code."""
        return self._code

    @property
    def category(self):
        """Hardware tier."""
        return self._category

    @property
    def type(self):
        """Syntactic role."""
        return self._type

    @property
    def has_abbreviation(self):
        """Keyword has a distinct abbreviation."""
        return self._abbreviation != self._name

    @property
    def display_abbreviation(self):
        """Abbreviation with period if strictly shorter than the name, else the name."""
        candidate = self._abbreviation + '.'
        if len(candidate) < len(self._name):
            return candidate
        return self._name

    @property
    def compact_form(self):
        """Shortest spelling; a trailing # goes between abbreviation and period."""
        if self.has_abbreviation and self._name.endswith(HASH_SIGIL):
            candidate = self._abbreviation + HASH_SIGIL + '.'
            if len(candidate) < len(self._name):
                return candidate
            return self._name
        return self.display_abbreviation

    def forms(self):
        """Spellings under which the keyword is registered, in uppercase."""
        forms = [self._name.upper()]
        if self.has_abbreviation:
            abbrev = self._abbreviation.upper()
            # single-letter abbreviations need the period, or they'd be variable names
            forms.append(abbrev + '.')
            if len(abbrev) >= 2:
                forms.append(abbrev)
            if self._name.endswith(HASH_SIGIL):
                forms.append(abbrev + HASH_SIGIL + '.')
        return forms


class KeywordTable(object):
    """Immutable registry of keyword descriptors."""

    def __init__(self, groups=KEYWORD_GROUPS):
        """Build the registry from (category, entries) groups."""
        self._keywords = tuple(
            Keyword(_name, _abbrev, _code, _category, _type)
            for _category, _entries in groups
            for _name, _abbrev, _code, _type in _entries
        )
        self._forms = {}
        for keyword in self._keywords:
            for form in keyword.forms():
                if form in self._forms:
                    logging.warning(
                        'Keyword form `%s` of %s shadows %s', form, keyword, self._forms[form]
                    )
                self._forms[form] = keyword
        self._max_length = max(len(_form) for _form in self._forms) if self._forms else 0

    def __len__(self):
        """Number of keywords."""
        return len(self._keywords)

    def __iter__(self):
        """Iterate over keywords in registration order."""
        return iter(self._keywords)

    def __contains__(self, text):
        """Text is a registered keyword form (case-insensitive)."""
        return self.lookup(text) is not None

    @property
    def keywords(self):
        """All keywords, in registration order."""
        return self._keywords

    @property
    def forms(self):
        """All registered forms, sorted."""
        return sorted(self._forms)

    @property
    def max_length(self):
        """Length of the longest registered form."""
        return self._max_length

    def lookup(self, text):
        """Look up a keyword by full name or abbreviation (case-insensitive); None if unknown."""
        if not text:
            return None
        return self._forms.get(text.upper())

    def by_category(self, category):
        """Keywords provided by a hardware tier."""
        return [_kw for _kw in self._keywords if _kw.category == category]

    def by_type(self, kwtype):
        """Keywords of a given syntactic role."""
        return [_kw for _kw in self._keywords if _kw.type == kwtype]

    def match(self, text, pos=0, limit=None):
        """
        Longest registered form at text[pos:], matched case-sensitively.
        At most `limit` characters are considered. Returns (form, keyword) or ('', None).
        """
        longest = self._max_length if limit is None else min(self._max_length, limit)
        for length in range(min(longest, len(text) - pos), 0, -1):
            form = text[pos:pos+length]
            # registered forms are uppercase; lowercase input never matches
            keyword = self._forms.get(form)
            if keyword is not None:
                return form, keyword
        return '', None
