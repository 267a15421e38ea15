"""markdown-it plugin applying `{:...}` attribute blocks to tokens.

Three placements are recognized:

* a block directly after an inline element, e.g. ``*em*{:.c}`` or
  ``[link](url){:.ext}``, annotates that element (emphasis, strong, strike,
  link, image, code span);
* a block ending a heading, paragraph, table cell, list item or term, e.g.
  ``# Title {:#intro .lead}``, annotates that block. When several blocks sit on
  the final line only the first is applied and the others stay as text;
* a paragraph holding nothing but a block annotates the construct right before
  it (table, list, blockquote, fence, ...) and is dropped from the output.

Entries are ``.class``, ``#id``, ``key=value``, ``key="value"`` or a bare
``key``, separated by whitespace or commas; a quoted string right after a bare
key becomes that key's value.
"""

import re

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.token import Token

from mdrender.core.utils.tokens import find_opener


ATTR_BLOCK_RE = re.compile(r'\{:([^}\n]*)\}')
ATTR_LEAD_RE = re.compile(r'^\{:([^}\n]*)\}')
ATTR_END_RE = re.compile(r'\{:[^}\n]*\}[ \t]*$')
ATTR_ONLY_RE = re.compile(r'^\{:([^}\n]*)\}$')
INLINE_ATOMS = ('image', 'code_inline')
LINE_BREAKS = ('softbreak', 'hardbreak')
BLOCK_OPENERS = ('heading_open', 'th_open', 'td_open', 'dt_open')

ATTR_ENTRY_RE = re.compile(r'''
      (?P<shorthand>[.\#])(?P<ident>[^\s,.\#="]+)
    | (?P<key>[^\s,=".\#][^\s,="]*)(?:=(?:"(?P<quoted>[^"]*)"|(?P<bare>[^\s,"]*)))?
    | "(?P<loose>[^"]*)"
''', re.VERBOSE)


def parse_attributes(body: str) -> list[tuple[str, str]]:
    """Parse the inside of an attribute block into (name, value) pairs."""
    attrs: list[tuple[str, str]] = []
    awaiting_value = False
    for m in ATTR_ENTRY_RE.finditer(body):
        if m.group('shorthand'):
            attrs.append(('class' if m.group('shorthand') == '.' else 'id', m.group('ident')))
            awaiting_value = False
        elif m.group('key'):
            if m.group('quoted') is not None:
                attrs.append((m.group('key'), m.group('quoted')))
                awaiting_value = False
            elif m.group('bare') is not None:
                attrs.append((m.group('key'), m.group('bare')))
                awaiting_value = False
            else:
                attrs.append((m.group('key'), ''))
                awaiting_value = True
        elif awaiting_value:
            attrs[-1] = (attrs[-1][0], m.group('loose'))
            awaiting_value = False
    return attrs


def apply_attributes(token: Token, attrs: list[tuple[str, str]]) -> None:
    for name, value in attrs:
        if name == 'class':
            token.attrJoin('class', value)
        else:
            token.attrSet(name, value)


def _target_for(tokens: list[Token], i: int) -> Token | None:
    """Block token that a trailing block on inline token i should annotate."""
    opener = tokens[i - 1]
    if opener.type in BLOCK_OPENERS:
        return opener
    if opener.type == 'paragraph_open':
        # tight list items render their paragraphs hidden
        if opener.hidden and i >= 2 and tokens[i - 2].type == 'list_item_open':
            return tokens[i - 2]
        return opener
    return None


def _inline_target(children: list[Token], j: int) -> Token | None:
    """Inline element ending at child j, if any."""
    prev = children[j]
    if prev.type in INLINE_ATOMS:
        return prev
    if prev.nesting == -1:
        opener_idx = find_opener(children, j)
        if opener_idx is not None:
            return children[opener_idx]
    return None


def _apply_inline_attributes(children: list[Token]) -> list[Token]:
    for j, child in enumerate(children):
        if child.type != 'text' or j == 0:
            continue
        m = ATTR_LEAD_RE.match(child.content)
        if m is None:
            continue
        target = _inline_target(children, j - 1)
        if target is not None:
            apply_attributes(target, parse_attributes(m.group(1)))
            child.content = child.content[m.end():]
    return [c for c in children if c.type != 'text' or c.content]


def _apply_trailing_attributes(children: list[Token], target: Token) -> list[Token]:
    """Apply the first block on the final line when that line ends with a block."""
    last = children[-1]
    if last.type != 'text' or not ATTR_END_RE.search(last.content):
        return children

    line_start = 0
    for j, child in enumerate(children):
        if child.type in LINE_BREAKS:
            line_start = j + 1

    for child in children[line_start:]:
        m = ATTR_BLOCK_RE.search(child.content) if child.type == 'text' else None
        if m is None:
            continue
        apply_attributes(target, parse_attributes(m.group(1)))
        before = child.content[:m.start()].rstrip(' \t')
        after = child.content[m.end():]
        child.content = before + after if before else after.lstrip(' \t')
        break

    last.content = last.content.rstrip(' \t')
    children = [c for c in children if c.type != 'text' or c.content]
    while children and children[-1].type in LINE_BREAKS:
        children.pop()
    return children


def _attach_to_previous_block(tokens: list[Token], i: int, dropped: set[int], body: str) -> bool:
    """Apply a paragraph holding only a block to the construct before it."""
    if tokens[i - 1].type != 'paragraph_open' or i < 2 or i - 2 in dropped:
        return False
    if tokens[i - 2].nesting > 0:
        return False
    opener_idx = find_opener(tokens, i - 2)
    if opener_idx is None:
        return False
    apply_attributes(tokens[opener_idx], parse_attributes(body))
    dropped.update((i - 1, i, i + 1))
    return True


def _apply_attribute_blocks(state: StateCore) -> None:
    tokens = state.tokens
    dropped: set[int] = set()

    for i, tok in enumerate(tokens):
        if tok.type != 'inline' or i == 0 or not tok.children:
            continue

        only = ATTR_ONLY_RE.match(tok.content)
        if only:
            # with nothing to attach to, the block stays literal
            _attach_to_previous_block(tokens, i, dropped, only.group(1))
            continue

        children = _apply_inline_attributes(tok.children)
        target = _target_for(tokens, i)
        if target is not None and children:
            children = _apply_trailing_attributes(children, target)
        tok.children = children

    if dropped:
        state.tokens = [t for j, t in enumerate(tokens) if j not in dropped]


def attrs_plugin(md: MarkdownIt) -> None:
    """Register the attribute rule once inline content has been parsed."""
    md.core.ruler.after('inline', 'attrs', _apply_attribute_blocks)
