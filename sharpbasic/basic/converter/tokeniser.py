"""
Sharp BASIC tools - tokeniser.py
Convert plain-text BASIC code to a token stream

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

import logging

from ..base import codestream
from ..base.tokens import DIGITS, LETTERS, END_LINE_CHARS, STRING_SIGIL, SYMBOLS
from ..base.tokens import TokenKind, Token, TokenStream
from ..base.keywords import KW_REM
from .folding import Folder


class PlainTextStream(codestream.CodeStream):
    """Stream of folded plain-text BASIC code."""

    def read_symbol(self):
        """Read an operator or punctuation symbol; return (symbol, kind) or ('', None)."""
        for symbol, kind in SYMBOLS:
            if self.peek(len(symbol)) == symbol:
                return self.read(len(symbol)), kind
        return '', None

    def read_comment(self):
        """Read everything up to the line terminator."""
        return self.read_to(self.end_line)


class RawTokeniser(object):
    """Longest-match tokeniser over folded text; spans are in folded coordinates."""

    def __init__(self, keyword_table):
        """Initialise tokeniser."""
        self._keywords = keyword_table

    def tokenise(self, text):
        """Split folded text into tokens; never fails."""
        ins = PlainTextStream(text)
        tokens = []
        line_start = True
        while True:
            pos = ins.tell()
            c = ins.peek()
            if not c:
                break
            # line terminator
            if c in END_LINE_CHARS:
                ending = ins.read_line_ending()
                tokens.append(Token(TokenKind.LINE_TERMINATOR, pos, ins.tell(), ending))
                line_start = True
                continue
            # leading digits are a line number
            if line_start and c in DIGITS:
                word = ins.read_while(DIGITS)
                tokens.append(Token(TokenKind.LINE_NUMBER, pos, ins.tell(), word))
            # string literals, may be unterminated
            elif c == '"':
                word = ins.read_string()
                tokens.append(Token(TokenKind.STRING, pos, ins.tell(), word))
            # REM swallows the rest of the line
            elif ins.peek(len(KW_REM)) == KW_REM:
                ins.read(len(KW_REM))
                tokens.append(Token(
                    TokenKind.KEYWORD, pos, ins.tell(), KW_REM, self._keywords.lookup(KW_REM)
                ))
                self._tokenise_comment(ins, tokens)
            # apostrophe comment, including the apostrophe
            elif c == "'":
                self._tokenise_comment(ins, tokens)
            else:
                self._tokenise_item(ins, tokens)
            line_start = False
        return tokens

    def _tokenise_comment(self, ins, tokens):
        """Pass anything up to the line terminator as a comment."""
        pos = ins.tell()
        word = ins.read_comment()
        if word:
            tokens.append(Token(TokenKind.COMMENT, pos, ins.tell(), word))

    def _tokenise_item(self, ins, tokens):
        """Convert a number, keyword, identifier or symbol."""
        pos = ins.tell()
        word = ins.read_number()
        if word:
            tokens.append(Token(TokenKind.NUMBER, pos, ins.tell(), word))
            return
        word, keyword = self._match_keyword(ins)
        if keyword:
            tokens.append(Token(TokenKind.KEYWORD, pos, ins.tell(), word, keyword))
            return
        c = ins.peek()
        if c in LETTERS:
            # variable names are a single letter; anything longer is split
            word = ins.read(1)
            if ins.peek() == STRING_SIGIL:
                word += ins.read(1)
            tokens.append(Token(TokenKind.IDENTIFIER, pos, ins.tell(), word))
            return
        word, kind = ins.read_symbol()
        if kind:
            tokens.append(Token(kind, pos, ins.tell(), word))
            return
        # anything else passes as a single-character identifier
        word = ins.read(1)
        tokens.append(Token(TokenKind.IDENTIFIER, pos, ins.tell(), word))

    def _match_keyword(self, ins):
        """Read the longest keyword form at the stream position; ('', None) if none."""
        pos = ins.tell()
        text = ins.getvalue()
        limit = None
        # a keyword can't run into a REM, which always starts a comment
        rem_pos = text.find(KW_REM, pos + 1, pos + self._keywords.max_length + len(KW_REM))
        if rem_pos >= 0:
            limit = rem_pos - pos
        word, keyword = self._keywords.match(text, pos, limit)
        if keyword:
            ins.read(len(word))
        return word, keyword


class Tokeniser(object):
    """BASIC tokeniser: folds whitespace, tokenises and maps spans back to the source."""

    def __init__(self, keyword_table):
        """Initialise tokeniser."""
        self._folder = Folder()
        self._raw = RawTokeniser(keyword_table)

    def tokenise(self, text):
        """Convert plain text to a gap-free TokenStream in original coordinates."""
        folded = self._folder.fold(text)
        raw_tokens = self._raw.tokenise(folded.text)
        tokens = []
        prev_end = 0
        for i, raw in enumerate(raw_tokens):
            if i == len(raw_tokens) - 1:
                # trailing whitespace belongs to the last token
                end = len(text)
            else:
                end = folded.offsets[raw.end - 1] + 1
            # leading whitespace belongs to the token that follows it
            tokens.append(Token(raw.kind, prev_end, end, raw.text, raw.keyword))
            prev_end = end
        if not tokens and text:
            tokens.append(Token(TokenKind.WHITESPACE, 0, len(text), text))
        logging.debug('Tokenised %d characters into %d tokens', len(text), len(tokens))
        return TokenStream(text, tokens)

    def tokenise_line(self, line):
        """Tokenise a single program line and return its significant tokens."""
        return self.tokenise(line).significant()
