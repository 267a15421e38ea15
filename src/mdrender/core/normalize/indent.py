"""Widen two-space continuation indents to four spaces"""

import re


TWO_SPACE_INDENT_RE = re.compile(r'\n  (\S)')


def normalize_indentation(text: str) -> str:
    """Rewrite a newline + exactly two spaces + non-space to use four spaces.

    Two-space nesting under list items is read differently by different
    Markdown implementations; four spaces is unambiguous.
    """
    return TWO_SPACE_INDENT_RE.sub(r'\n    \1', text)
