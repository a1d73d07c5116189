"""
Sharp BASIC tools - folding.py
Fold insignificant whitespace out of plain-text BASIC code

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

from ..base import codestream
from ..base.tokens import BLANKS, END_LINE_CHARS
from ..base.keywords import KW_REM


class FoldedText(object):
    """Whitespace-folded copy of a text with a map back to original offsets."""

    __slots__ = ('text', 'offsets', 'source')

    def __init__(self, source, text, offsets):
        """Wrap folded text."""
        self.source = source
        self.text = text
        # original offset of each retained character
        self.offsets = offsets

    def __len__(self):
        return len(self.text)

    def __repr__(self):
        return '<FoldedText %r>' % (self.text,)

    def original_offset(self, pos):
        """Original offset for a folded position; the end of the folded text maps to the end of the source."""
        if pos >= len(self.offsets):
            return len(self.source)
        return self.offsets[pos]


class Folder(object):
    """Remove spaces and tabs outside string literals and comments."""

    def fold(self, text):
        """Fold a text; return a FoldedText."""
        ins = codestream.CodeStream(text)
        out = []
        offsets = []
        in_string, in_comment = False, False
        while True:
            pos = ins.tell()
            c = ins.read(1)
            if not c:
                break
            if c in END_LINE_CHARS:
                # line terminators end comments and unterminated strings
                in_string, in_comment = False, False
                out.append(c)
                offsets.append(pos)
            elif in_comment:
                out.append(c)
                offsets.append(pos)
            elif c == '"':
                in_string = not in_string
                out.append(c)
                offsets.append(pos)
            elif in_string:
                out.append(c)
                offsets.append(pos)
            elif c == 'R':
                rem_offsets = self._read_spaced_rem(ins, pos)
                if rem_offsets:
                    out.append(KW_REM)
                    offsets.extend(rem_offsets)
                    in_comment = True
                else:
                    out.append(c)
                    offsets.append(pos)
            elif c == "'":
                in_comment = True
                out.append(c)
                offsets.append(pos)
            elif c in BLANKS:
                pass
            else:
                out.append(c)
                offsets.append(pos)
        return FoldedText(text, ''.join(out), offsets)

    def _read_spaced_rem(self, ins, r_pos):
        """After an R, read blank-separated E and M; return their offsets or None and rewind."""
        after_r = ins.tell()
        ins.skip_blank()
        e_pos = ins.tell()
        if ins.read(1) != 'E':
            ins.seek(after_r)
            return None
        ins.skip_blank()
        m_pos = ins.tell()
        if ins.read(1) != 'M':
            ins.seek(after_r)
            return None
        return [r_pos, e_pos, m_pos]


def fold(text):
    """Fold a text with the default folder."""
    return Folder().fold(text)
