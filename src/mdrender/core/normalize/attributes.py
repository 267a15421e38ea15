"""Attribute-list resolution and relocation of `{:...}` blocks ahead of rendering.

markdown-it honors an attribute block only when it sits on the same line as the
construct it annotates, only the first block on that line, and only with
double-quoted values. The passes here rewrite kramdown-style source into that
shape without touching text outside `{:` ... `}` spans.
"""

import re

from mdrender.core.utils.rewrite import rewrite_to_fixed_point


# {:name: value} alone on its line; the colon after the name marks a definition
ALD_RE = re.compile(r'^[ \t]*\{:(\w+):[ \t]+([^}\n]+)\}[ \t]*(?:\n|\Z)', re.MULTILINE)
ATTR_BLOCK_RE = re.compile(r'\{:[^}\n]*\}')

HEADING_ATTR_RE = re.compile(r'^(#{1,6}[ \t][^\n]*)\n(\{:[^}\n]+\}[^\n]*)$', re.MULTILINE)
ADJACENT_BLOCKS_RE = re.compile(r'\}\s*\{:')
TABLE_ATTR_RE = re.compile(r'^([^\n]*\|[^\n]*\n)(?=\{:)', re.MULTILINE)
SINGLE_QUOTED_BLOCK_RE = re.compile(r"\{:[^}\n]*'[^}\n]*\}")


def resolve_attribute_lists(text: str) -> str:
    """Remove `{:name: value}` definitions and substitute `name` inside remaining attribute blocks.

    A repeated name keeps its last definition. Substituted values are not
    re-scanned for further names.
    """
    definitions: dict[str, str] = {}

    def _collect(m: re.Match) -> str:
        definitions[m.group(1)] = m.group(2).rstrip()
        return ''

    text = ALD_RE.sub(_collect, text)
    if not definitions:
        return text

    names_re = re.compile(r'\b(' + '|'.join(re.escape(n) for n in definitions) + r')\b')

    def _substitute(m: re.Match) -> str:
        return names_re.sub(lambda n: definitions[n.group(1)], m.group(0))

    return ATTR_BLOCK_RE.sub(_substitute, text)


def attach_heading_attributes(text: str) -> str:
    """Join attribute-block lines that follow a heading onto the heading line."""
    return rewrite_to_fixed_point(HEADING_ATTR_RE, text, lambda m: f'{m.group(1)} {m.group(2)}')


def merge_attribute_blocks(text: str) -> str:
    """Collapse `}{:` (with any whitespace between) so adjacent blocks become one."""
    return ADJACENT_BLOCKS_RE.sub(' ', text)


def space_table_attributes(text: str) -> str:
    """Insert a blank line between a table row and an attribute block on the next line."""
    return TABLE_ATTR_RE.sub(lambda m: m.group(1) + '\n', text)


def normalize_attribute_quotes(text: str) -> str:
    """Rewrite single quotes to double quotes inside attribute blocks only."""
    return rewrite_to_fixed_point(
        SINGLE_QUOTED_BLOCK_RE, text, lambda m: m.group(0).replace("'", '"'),
    )


def relocate_attribute_blocks(text: str) -> str:
    """Apply the four relocation passes in order."""
    text = attach_heading_attributes(text)
    text = merge_attribute_blocks(text)
    text = space_table_attributes(text)
    return normalize_attribute_quotes(text)
