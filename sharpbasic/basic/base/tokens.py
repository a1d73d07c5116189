"""
Sharp BASIC tools - tokens.py
Character classes and lexical token types

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

from enum import Enum


# character classes
DIGITS = '0123456789'
UPPERCASE = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
LOWERCASE = UPPERCASE.lower()
LETTERS = UPPERCASE + LOWERCASE
# hex literals are written in uppercase on the device
HEXDIGITS = DIGITS + 'ABCDEF'

# whitespace that is insignificant outside strings and comments
BLANKS = ' \t'
# line terminators, longest first
LINE_ENDINGS = ('\r\n', '\r', '\n')
END_LINE_CHARS = '\r\n'

# string-type sigil on identifiers
STRING_SIGIL = '$'

# line numbers
MAX_LINE_NUMBER = 65535


class TokenKind(Enum):
    """Closed set of lexical token kinds."""

    KEYWORD = 'keyword'
    LINE_NUMBER = 'line number'
    NUMBER = 'number'
    STRING = 'string'
    IDENTIFIER = 'identifier'
    COMMENT = 'comment'
    PLUS = '+'
    MINUS = '-'
    MULT = '*'
    DIV = '/'
    POWER = '^'
    EQ = '='
    LT = '<'
    GT = '>'
    LE = '<='
    GE = '>='
    NE = '<>'
    LPAREN = '('
    RPAREN = ')'
    COMMA = ','
    SEMICOLON = ';'
    COLON = ':'
    HASH = '#'
    LINE_TERMINATOR = 'line terminator'
    WHITESPACE = 'whitespace'


# punctuation and operator symbols, two-character symbols first
SYMBOLS = (
    ('<=', TokenKind.LE),
    ('>=', TokenKind.GE),
    ('<>', TokenKind.NE),
    ('+', TokenKind.PLUS),
    ('-', TokenKind.MINUS),
    ('*', TokenKind.MULT),
    ('/', TokenKind.DIV),
    ('^', TokenKind.POWER),
    ('=', TokenKind.EQ),
    ('<', TokenKind.LT),
    ('>', TokenKind.GT),
    ('(', TokenKind.LPAREN),
    (')', TokenKind.RPAREN),
    (',', TokenKind.COMMA),
    (';', TokenKind.SEMICOLON),
    (':', TokenKind.COLON),
    ('#', TokenKind.HASH),
)

COMPARISONS = (TokenKind.LT, TokenKind.GT, TokenKind.LE, TokenKind.GE, TokenKind.NE)

# tokens that can end or start an operand
OPERANDS = (
    TokenKind.IDENTIFIER, TokenKind.NUMBER, TokenKind.LINE_NUMBER,
    TokenKind.STRING, TokenKind.RPAREN,
)


class Token(object):
    """Lexical token with its span in the original text."""

    __slots__ = ('kind', 'start', 'end', 'text', 'keyword')

    def __init__(self, kind, start, end, text, keyword=None):
        """Create a token."""
        self.kind = kind
        self.start = start
        self.end = end
        # lexeme as read from the folded buffer
        self.text = text
        # keyword descriptor, for KEYWORD tokens
        self.keyword = keyword

    def __repr__(self):
        """Debugging representation."""
        return '<Token %s [%d,%d) %r>' % (self.kind.name, self.start, self.end, self.text)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (
            (self.kind, self.start, self.end, self.text, self.keyword)
            == (other.kind, other.start, other.end, other.text, other.keyword)
        )

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def is_keyword(self, name=None):
        """Token is a keyword, optionally with the given canonical name."""
        if self.kind != TokenKind.KEYWORD:
            return False
        return name is None or self.keyword.name == name


class TokenStream(object):
    """Ordered tokens covering a source text without gaps."""

    def __init__(self, source, tokens):
        """Wrap a list of tokens over their source text."""
        self._source = source
        self._tokens = list(tokens)

    def __len__(self):
        return len(self._tokens)

    def __iter__(self):
        return iter(self._tokens)

    def __getitem__(self, index):
        return self._tokens[index]

    def __repr__(self):
        return '<TokenStream %d tokens over %d chars>' % (len(self._tokens), len(self._source))

    @property
    def source(self):
        """Original text."""
        return self._source

    @property
    def tokens(self):
        """List of tokens."""
        return list(self._tokens)

    def original_text(self, token):
        """Slice of the original text covered by a token."""
        return self._source[token.start:token.end]

    def kinds(self):
        """Token kinds, in order."""
        return [_tok.kind for _tok in self._tokens]

    def significant(self):
        """Tokens other than whitespace and line terminators."""
        return [
            _tok for _tok in self._tokens
            if _tok.kind not in (TokenKind.WHITESPACE, TokenKind.LINE_TERMINATOR)
        ]

    def is_contiguous(self):
        """Spans partition the source text without gaps or overlaps."""
        pos = 0
        for token in self._tokens:
            if token.start != pos or token.end <= token.start:
                return False
            pos = token.end
        return pos == len(self._source)
