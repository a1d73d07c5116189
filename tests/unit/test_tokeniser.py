"""
Sharp BASIC tools - test_tokeniser
unit tests for tokeniser

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

import unittest

from sharpbasic import tokenise, TokenKind
from sharpbasic.basic import KEYWORDS
from sharpbasic.basic.converter.tokeniser import RawTokeniser


KW = TokenKind.KEYWORD
ID = TokenKind.IDENTIFIER


def significant(text):
    """Kinds and lexemes of the significant tokens."""
    return [(_tok.kind, _tok.text) for _tok in tokenise(text).significant()]


class TokeniserTest(unittest.TestCase):
    """Unit tests for tokeniser."""

    def test_line_number(self):
        """Leading digits are a line number."""
        assert significant('10 PRINT') == [(TokenKind.LINE_NUMBER, '10'), (KW, 'PRINT')]
        assert significant('32767 END') == [(TokenKind.LINE_NUMBER, '32767'), (KW, 'END')]

    def test_number_after_keyword(self):
        """Digits elsewhere are a number."""
        assert significant('GOTO 260') == [(KW, 'GOTO'), (TokenKind.NUMBER, '260')]

    def test_statements(self):
        """Colon separates statements."""
        assert significant('PRINT:FOR') == [(KW, 'PRINT'), (TokenKind.COLON, ':'), (KW, 'FOR')]

    def test_sigil_keyword(self):
        """Keywords can end in a sigil."""
        assert significant('INKEY$') == [(KW, 'INKEY$')]
        assert significant('IFINKEY$') == [(KW, 'IF'), (KW, 'INKEY$')]
        assert significant('POKE# 64000,255') == [
            (KW, 'POKE#'), (TokenKind.NUMBER, '64000'),
            (TokenKind.COMMA, ','), (TokenKind.NUMBER, '255'),
        ]

    def test_string_identifier(self):
        """Identifiers may carry a $."""
        assert significant('AND C$') == [(KW, 'AND'), (ID, 'C$')]
        assert significant('A$,B$') == [(ID, 'A$'), (TokenKind.COMMA, ','), (ID, 'B$')]

    def test_full_line(self):
        """A complete program line."""
        assert significant('10 IF INKEY$ <> "" AND C$="BEGIN" GOTO 260') == [
            (TokenKind.LINE_NUMBER, '10'), (KW, 'IF'), (KW, 'INKEY$'),
            (TokenKind.NE, '<>'), (TokenKind.STRING, '""'), (KW, 'AND'), (ID, 'C$'),
            (TokenKind.EQ, '='), (TokenKind.STRING, '"BEGIN"'), (KW, 'GOTO'),
            (TokenKind.NUMBER, '260'),
        ]

    def test_split_identifiers(self):
        """Runs of letters that aren't keywords split into single letters."""
        assert significant('ZZ') == [(ID, 'Z'), (ID, 'Z')]
        assert significant('X1') == [(ID, 'X'), (TokenKind.NUMBER, '1')]

    def test_adjacent_keywords(self):
        """Keywords need no separators."""
        assert significant('FORPRINT') == [(KW, 'FOR'), (KW, 'PRINT')]
        assert significant('PRINTFORPRINT') == [(KW, 'PRINT'), (KW, 'FOR'), (KW, 'PRINT')]
        assert significant('AFORLET') == [(ID, 'A'), (KW, 'FOR'), (KW, 'LET')]
        assert significant('FORI') == [(KW, 'FOR'), (ID, 'I')]

    def test_bare_abbreviation(self):
        """Multi-letter abbreviations need no period."""
        tokens = tokenise('LPRINTAB').significant()
        assert [(_tok.kind, _tok.text) for _tok in tokens] == [(KW, 'LPRINT'), (KW, 'AB')]
        assert tokens[1].keyword.name == 'ABS'

    def test_abbreviation(self):
        """Single-letter abbreviations take a period."""
        tokens = tokenise('P."HI"').significant()
        assert tokens[0].kind == KW
        assert tokens[0].text == 'P.'
        assert tokens[0].keyword.name == 'PRINT'
        assert tokens[1].kind == TokenKind.STRING

    def test_rem(self):
        """REM swallows the rest of the line."""
        assert significant('220REMFOR I=1 TO 100') == [
            (TokenKind.LINE_NUMBER, '220'), (KW, 'REM'), (TokenKind.COMMENT, 'FOR I=1 TO 100'),
        ]
        assert significant('REM') == [(KW, 'REM')]

    def test_spaced_rem(self):
        """R E M with blanks is REM."""
        stream = tokenise('PRINT I: R  E M This is a test')
        tokens = stream.significant()
        assert [(_tok.kind, _tok.text) for _tok in tokens] == [
            (KW, 'PRINT'), (ID, 'I'), (TokenKind.COLON, ':'),
            (KW, 'REM'), (TokenKind.COMMENT, ' This is a test'),
        ]
        assert stream.original_text(tokens[3]) == ' R  E M'
        assert stream.original_text(tokens[4]) == ' This is a test'

    def test_keyword_stops_at_rem(self):
        """A keyword match doesn't run into REM."""
        assert significant('PREM X') == [(ID, 'P'), (KW, 'REM'), (TokenKind.COMMENT, ' X')]

    def test_apostrophe(self):
        """Apostrophe comment includes the apostrophe."""
        assert significant("PRINT 'hi there") == [(KW, 'PRINT'), (TokenKind.COMMENT, "'hi there")]

    def test_comment_ends_at_line(self):
        """Comments end at the line terminator."""
        assert tokenise('REM x\n20 END').kinds() == [
            KW, TokenKind.COMMENT, TokenKind.LINE_TERMINATOR, TokenKind.LINE_NUMBER, KW,
        ]

    def test_case_sensitive(self):
        """Lowercase text never yields keywords."""
        for text in ('print', 'rem hello', 'Print', 'goto 10'):
            kinds = [_tok.kind for _tok in tokenise(text).significant()]
            assert KW not in kinds, text
            assert TokenKind.COMMENT not in kinds, text
        assert significant('print')[0] == (ID, 'p')
        assert len(significant('print')) == 5

    def test_strings(self):
        """Strings include their quotes and may be unterminated."""
        assert significant('"A B"') == [(TokenKind.STRING, '"A B"')]
        assert significant('"ABC') == [(TokenKind.STRING, '"ABC')]
        assert tokenise('"AB\nC').kinds() == [TokenKind.STRING, TokenKind.LINE_TERMINATOR, ID]

    def test_numbers(self):
        """Decimal, exponent and hex literals."""
        assert significant('A=1.5E-3') == [
            (ID, 'A'), (TokenKind.EQ, '='), (TokenKind.NUMBER, '1.5E-3')
        ]
        assert significant('A=.5') == [(ID, 'A'), (TokenKind.EQ, '='), (TokenKind.NUMBER, '.5')]
        assert significant('A=&FF') == [(ID, 'A'), (TokenKind.EQ, '='), (TokenKind.NUMBER, '&FF')]
        # no digits after E: not an exponent
        assert significant('A=1E') == [
            (ID, 'A'), (TokenKind.EQ, '='), (TokenKind.NUMBER, '1'), (ID, 'E')
        ]
        assert significant('A=&G') == [(ID, 'A'), (TokenKind.EQ, '='), (ID, '&'), (ID, 'G')]

    def test_symbols(self):
        """Operators and punctuation."""
        assert tokenise('<=>=<>').kinds() == [TokenKind.LE, TokenKind.GE, TokenKind.NE]
        assert tokenise('><').kinds() == [TokenKind.GT, TokenKind.LT]
        assert tokenise('+-*/^=(),;:#').kinds() == [
            TokenKind.PLUS,TokenKind.MINUS, TokenKind.MULT, TokenKind.DIV, TokenKind.POWER,
            TokenKind.EQ, TokenKind.LPAREN, TokenKind.RPAREN, TokenKind.COMMA,
            TokenKind.SEMICOLON, TokenKind.COLON, TokenKind.HASH,
        ]

    def test_unknown_character(self):
        """Anything else is a single-character identifier."""
        assert significant('@?') == [(ID, '@'), (ID, '?')]

    def test_line_terminators(self):
        """Each terminator is one token and restarts line numbering."""
        assert tokenise('10 A\r\n20 B\r30 C\n').kinds() == [
            TokenKind.LINE_NUMBER, ID, TokenKind.LINE_TERMINATOR,
            TokenKind.LINE_NUMBER, ID, TokenKind.LINE_TERMINATOR,
            TokenKind.LINE_NUMBER, ID, TokenKind.LINE_TERMINATOR,
        ]
        assert tokenise('10 A\r\n')[2].text == '\r\n'

    def test_whitespace_only(self):
        """Blank input is one whitespace token."""
        stream = tokenise('  \t ')
        assert stream.kinds() == [TokenKind.WHITESPACE]
        assert (stream[0].start, stream[0].end) == (0, 4)
        assert len(tokenise('')) == 0

    def test_spans(self):
        """Removed blanks are absorbed into adjacent tokens."""
        stream = tokenise('10 PRINT  ')
        assert [(_tok.start, _tok.end) for _tok in stream] == [(0, 2), (2, 10)]
        stream = tokenise(' A = 1')
        assert [stream.original_text(_tok) for _tok in stream] == [' A', ' =', ' 1']

    def test_coverage(self):
        """Token spans partition the input."""
        texts = (
            '', ' ', '\r\n', '10 A=1\r\n20 B=2\n', 'R E M', ' "x', '@@~',
            '10 IF INKEY$ <> "" AND C$="BEGIN" GOTO 260',
            'PRINT I: R  E M This is a test\n  20 P . "A" ',
            "10 A=1 ' note \r\n\r\n 30 FOR I = 1 TO 10 : N. I  ",
            '1 0 0  L P R I N T A B ( 3 ) ; "  x  "',
        )
        for text in texts:
            stream = tokenise(text)
            assert stream.is_contiguous(), (text, stream.tokens)
            assert ''.join(stream.original_text(_tok) for _tok in stream) == text

    def test_raw_tokeniser(self):
        """Raw tokens are in folded coordinates."""
        tokens = RawTokeniser(KEYWORDS).tokenise('10PRINT"A"')
        assert [(_tok.start, _tok.end) for _tok in tokens] == [(0, 2), (2, 7), (7, 10)]


if __name__ == '__main__':
    unittest.main()
