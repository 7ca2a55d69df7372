"""
Tests for JSON comment stripping.

Comments must disappear; string contents must survive untouched.
"""

import json

from rho.jsonc import strip_comments


class TestStripComments:
    """Test the preprocessing pass."""

    def test_plain_json_unchanged(self):
        text = '{"a": 1, "b": [1, 2, 3]}'
        assert strip_comments(text) == text

    def test_line_comments(self):
        text = '{\n  // width in px\n  "width": 100 // trailing\n}'
        assert json.loads(strip_comments(text)) == {"width": 100}

    def test_block_comments(self):
        text = '{/* header */ "a": /* inline */ 1, /*\n multi\n line\n */ "b": 2}'
        assert json.loads(strip_comments(text)) == {"a": 1, "b": 2}

    def test_comment_markers_inside_strings_kept(self):
        """URLs and glob-like values are not comments."""
        text = '{"url": "http://example.com/a", "glob": "src/*.json", "end": "*/"}'
        assert json.loads(strip_comments(text)) == {
            "url": "http://example.com/a",
            "glob": "src/*.json",
            "end": "*/",
        }

    def test_escaped_quote_inside_string(self):
        """An escaped quote does not end the string early."""
        text = '{"label": "say \\"hi\\" // not a comment"} // comment'
        assert json.loads(strip_comments(text)) == {"label": 'say "hi" // not a comment'}

    def test_block_comment_separates_tokens(self):
        """Removing a block comment never glues two tokens together."""
        assert strip_comments("1/**/2") == "1 2"

    def test_unterminated_block_comment_left_in_place(self):
        """The parser gets to report an unterminated comment."""
        text = '{"a": 1 /* never closed'
        assert "/*" in strip_comments(text)
