"""
Sharp BASIC tools - codestream.py
Code stream utilities

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

import io

from .tokens import DIGITS, HEXDIGITS, BLANKS, END_LINE_CHARS, LINE_ENDINGS, MAX_LINE_NUMBER


class CodeStream(io.StringIO):
    """Stream of plain-text BASIC code."""

    # whitespace
    blanks = BLANKS
    # line end characters for this stream type
    end_line = END_LINE_CHARS

    def __init__(self, text):
        """Initialise the stream."""
        # no newline translation: offsets must match the source text
        io.StringIO.__init__(self, text, newline='')

    def back(self, n=1):
        """Move the stream position back by n characters."""
        self.seek(self.tell() - n)

    def peek(self, n=1):
        """Peek next chars in stream."""
        d = self.read(n)
        self.back(len(d))
        return d

    def skip_read(self, skip_range, n=1):
        """Skip chars in skip_range, then read next."""
        while True:
            d = self.read(1)
            # skip_range must not include ''
            if d == '' or d not in skip_range:
                return d + self.read(n-1)

    def skip_blank(self, n=1):
        """Skip whitespace, then peek next."""
        d = self.skip_read(self.blanks, n)
        self.back(len(d))
        return d

    def read_to(self, findrange):
        """Read until a character from a given range is found."""
        out = []
        while True:
            d = self.read(1)
            if d == '':
                break
            if d in findrange:
                self.back()
                break
            out.append(d)
        return ''.join(out)

    def read_while(self, in_range):
        """Read as long as characters are in a given range."""
        out = []
        while True:
            d = self.read(1)
            if d == '':
                break
            if d not in in_range:
                self.back()
                break
            out.append(d)
        return ''.join(out)

    def read_line_ending(self):
        """Read a line terminator if one follows; empty string otherwise."""
        for ending in LINE_ENDINGS:
            if self.peek(len(ending)) == ending:
                return self.read(len(ending))
        return ''

    def read_string(self):
        """Read a string literal, up to the closing quote or the end of the line."""
        word = self.read(1)
        if not word or word != '"':
            self.back(len(word))
            return ''
        word += self.read_to('"' + self.end_line)
        delim = self.read(1)
        if delim == '"':
            word += delim
        else:
            self.back(len(delim))
        return word

    def read_number(self):
        """Read numeric literal."""
        c = self.peek()
        if c == '&':
            return self._read_hex()
        elif c and c in DIGITS + '.':
            return self._read_dec()
        return ''

    def _read_dec(self):
        """Read decimal literal: digits, optional fraction, optional exponent."""
        pos = self.tell()
        word = self.read_while(DIGITS)
        if self.peek(2)[:1] == '.' and (word or self.peek(2)[1:] in tuple(DIGITS)):
            word += self.read(1) + self.read_while(DIGITS)
        if not word or word == '.':
            self.seek(pos)
            return ''
        # exponent only counts if at least one digit follows
        exp = self.peek(3)
        if exp[:1] == 'E':
            if exp[1:2] in tuple(DIGITS):
                word += self.read(1) + self.read_while(DIGITS)
            elif exp[1:2] in ('+', '-') and exp[2:3] in tuple(DIGITS):
                word += self.read(2) + self.read_while(DIGITS)
        return word

    def _read_hex(self):
        """Read hexadecimal literal &XXXX."""
        lead = self.read(1)
        word = ''
        while len(word) < 4:
            c = self.peek()
            if c and c in HEXDIGITS:
                word += self.read(1)
            else:
                break
        if not word:
            # a lone & is not a number
            self.back(len(lead))
            return ''
        return lead + word

    def read_line_number(self):
        """Read a line number, tolerating blanks between digits; return as int or None."""
        pos = self.tell()
        self.skip_blank()
        word = ''
        nblanks = 0
        while True:
            c = self.peek()
            if c and c in DIGITS:
                word += self.read(1)
                nblanks = 0
            elif word and c and c in self.blanks:
                self.read(1)
                nblanks += 1
            else:
                break
        # don't claim trailing w/s
        self.back(nblanks)
        if word:
            linenum = int(word)
            if 0 < linenum <= MAX_LINE_NUMBER:
                return linenum
        self.seek(pos)
        return None
