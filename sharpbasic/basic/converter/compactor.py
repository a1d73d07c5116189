"""
Sharp BASIC tools - compactor.py
Convert plain-text BASIC code to its shortest form

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

from ..base.tokens import TokenKind
from .program import ProgramFormatter


class Compactor(ProgramFormatter):
    """Compact reformatter: shortest keyword spellings, no spacing."""

    def format_body(self, linenum, tokens):
        """Render a line number (or None) and the tokens of the line body."""
        output = []
        if linenum is not None:
            output.append('%d' % (linenum,))
        for token in tokens:
            if token.kind == TokenKind.KEYWORD:
                output.append(token.keyword.compact_form)
            else:
                # comments are kept as they are
                output.append(token.text)
        return ''.join(output)
