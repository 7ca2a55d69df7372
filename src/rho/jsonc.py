"""
Comment stripping for JSON files.

Diagram and style files are plain JSON plus annotations:

    {
        // line comments
        "fill": "#fff", /* and block comments */
        "url": "http://example.com"   // "//" inside strings is kept
    }

Comments are removed before the text reaches json.loads. This is a
preprocessing pass only; the JSON grammar itself is untouched.
"""

import re


# A string literal (kept), a line comment or a block comment (dropped).
# Strings are matched first so that comment markers inside them survive.
_TOKEN_RE = re.compile(
    r'("(?:\\.|[^"\\])*")'
    r'|(//[^\n]*)'
    r'|(/\*.*?\*/)',
    re.DOTALL,
)


def _replace(match: "re.Match[str]") -> str:
    string_literal, line_comment, _block_comment = match.groups()
    if string_literal is not None:
        return string_literal
    if line_comment is not None:
        return ""
    # Keep tokens on either side of a block comment apart.
    return " "


def strip_comments(text: str) -> str:
    """
    Remove // and /* */ comments outside of string literals.

    An unterminated block comment is left in place so the JSON parser
    reports it instead of silently swallowing the rest of the file.

    Args:
        text: Raw file contents

    Returns:
        Text with comments removed, line structure preserved for line comments
    """
    return _TOKEN_RE.sub(_replace, text)


__all__ = ["strip_comments"]
