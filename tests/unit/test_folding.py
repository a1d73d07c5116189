"""
Sharp BASIC tools - test_folding
unit tests for whitespace folding

(c) 2025--2026 the sharpbasic authors
This file is released under the GNU GPL version 3 or later.
"""

import unittest

from sharpbasic.basic.converter.folding import fold


class FoldingTest(unittest.TestCase):
    """Unit tests for whitespace folding."""

    def test_drop_blanks(self):
        """Spaces and tabs outside strings are dropped."""
        folded = fold('1 0 P R\tINT A')
        assert folded.text == '10PRINTA'
        assert folded.offsets == [0, 2, 4, 6, 8, 9, 10, 12]

    def test_string(self):
        """Blanks inside strings are kept."""
        assert fold('PRINT "A  B" ; C').text == 'PRINT"A  B";C'

    def test_unterminated_string(self):
        """Strings end at the line terminator."""
        assert fold('"A B\nC D').text == '"A B\nCD'

    def test_spaced_rem(self):
        """R E M with blanks folds to REM and starts a comment."""
        folded = fold('PRINT I: R  E M This is a test')
        assert folded.text == 'PRINTI:REM This is a test'
        assert folded.offsets[:7] == [0, 1, 2, 3, 4, 6, 7]
        assert folded.offsets[7:10] == [9, 12, 14]
        assert folded.offsets[10] == 15

    def test_rem_case(self):
        """Only uppercase REM starts a comment."""
        assert fold('r e m  x y').text == 'remxy'
        assert fold('R e M  x y').text == 'ReMxy'

    def test_rem_lookalike(self):
        """R not followed by E and M is an ordinary letter."""
        assert fold('PRINT RE TURN').text == 'PRINTRETURN'

    def test_apostrophe(self):
        """Apostrophe starts a comment."""
        assert fold("A = 1 ' a  b").text == "A=1' a  b"

    def test_quote_in_comment(self):
        """Quotes inside a comment don't open a string."""
        assert fold('REM "a  b\nC D').text == 'REM "a  b\nCD'

    def test_comment_ends_at_line(self):
        """Line terminators end comments."""
        assert fold('REM a b\r\n1 0 P').text == 'REM a b\r\n10P'
        assert fold("' a b\r2 0 P").text == "' a b\r20P"

    def test_offsets(self):
        """One increasing offset per retained character."""
        for text in ('', '   ', '10 A = 1\r\n20 REM  x', 'R E M', ' " a " '):
            folded = fold(text)
            assert len(folded.offsets) == len(folded.text), text
            assert folded.offsets == sorted(set(folded.offsets)), text
            for pos, offset in enumerate(folded.offsets):
                if folded.text[pos] not in 'REM':
                    assert text[offset] == folded.text[pos], text

    def test_original_offset(self):
        """Past the end of the folded text maps to the end of the source."""
        folded = fold('A B  ')
        assert folded.original_offset(1) == 2
        assert folded.original_offset(2) == 5


if __name__ == '__main__':
    unittest.main()
