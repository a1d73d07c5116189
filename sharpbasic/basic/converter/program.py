"""
Sharp BASIC tools - program.py
Line splitting and line-ending detection shared by the reformatters

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

import os
import re
import logging

from ..base import codestream
from ..base.tokens import BLANKS, LINE_ENDINGS
from .tokeniser import Tokeniser


# split on any of the three conventions, CR LF first
_LINE_SPLIT = re.compile('\r\n|\r|\n')


def detect_line_ending(text, default=os.linesep):
    """Return the first line terminator found in the text, or the default."""
    match = _LINE_SPLIT.search(text)
    if match:
        return match.group(0)
    return default


def split_lines(text):
    """Split text on any line terminator; a trailing terminator leaves an empty last line."""
    return _LINE_SPLIT.split(text)


def is_blank(line):
    """Line is empty or holds only spaces and tabs."""
    return not line.strip(BLANKS)


class ProgramFormatter(object):
    """Base class for whole-program reformatters."""

    def __init__(self, keyword_table, line_ending=None):
        """Initialise formatter with a shared keyword table."""
        self._keywords = keyword_table
        self._tokeniser = Tokeniser(keyword_table)
        self._default_line_ending = line_ending or os.linesep
        if self._default_line_ending not in LINE_ENDINGS:
            logging.warning('Ignoring unknown line ending %r', self._default_line_ending)
            self._default_line_ending = os.linesep

    def format(self, text):
        """Reformat a whole program, keeping the line-ending convention of the input."""
        if not text:
            return text
        line_ending = detect_line_ending(text, self._default_line_ending)
        logging.debug('Using line ending %r', line_ending)
        return line_ending.join(self.format_line(_line) for _line in split_lines(text))

    def format_line(self, line):
        """Reformat a single line; blank lines pass through unchanged."""
        if is_blank(line):
            return line
        ins = codestream.CodeStream(line)
        linenum = ins.read_line_number()
        body = ins.read()
        return self.format_body(linenum, self._tokeniser.tokenise_line(body))

    def format_body(self, linenum, tokens):
        """Render a line number (or None) and the tokens of the line body."""
        raise NotImplementedError()
