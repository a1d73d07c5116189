"""
Sharp BASIC tools - lister.py
Convert plain-text BASIC code to the canonical listing format

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

from ..base.tokens import TokenKind, COMPARISONS, OPERANDS, BLANKS
from ..base.keywords import KW_REM
from .program import ProgramFormatter


class Lister(ProgramFormatter):
    """Canonical reformatter: full keyword names, device listing spacing."""

    def format_body(self, linenum, tokens):
        """Render a line number (or None) and the tokens of the line body."""
        output = []
        if linenum is not None:
            output.append('%d ' % (linenum,))
        for i, token in enumerate(tokens):
            nxt = tokens[i+1] if i+1 < len(tokens) else None
            if token.kind == TokenKind.COMMENT:
                # apostrophe comment, passed verbatim
                output.append(token.text)
                break
            elif token.is_keyword(KW_REM):
                output.append(KW_REM)
                if nxt is not None:
                    # REM gets exactly one space before its comment
                    if nxt.text[:1] not in tuple(BLANKS):
                        output.append(' ')
                    output.append(nxt.text)
                break
            output.append(self._detokenise(token))
            output.append(self._separator(token, nxt))
        return ''.join(output)

    def _detokenise(self, token):
        """Text of a token in canonical form."""
        if token.kind == TokenKind.KEYWORD:
            # expand abbreviations
            return token.keyword.name
        return token.text

    def _separator(self, token, nxt):
        """Spacing between two consecutive tokens."""
        if nxt is None:
            return ''
        # keyword is followed by a space, except before comma and semicolon
        if token.kind == TokenKind.KEYWORD:
            if nxt.kind in (TokenKind.COMMA, TokenKind.SEMICOLON):
                return ''
            return ' '
        # comparison operators are padded where they touch an operand
        if nxt.kind in COMPARISONS and token.kind in OPERANDS:
            return ' '
        if token.kind in COMPARISONS and (nxt.kind in OPERANDS or nxt.kind == TokenKind.KEYWORD):
            return ' '
        return ''
