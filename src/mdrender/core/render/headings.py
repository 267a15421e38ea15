"""Heading extraction hook: reports each rendered heading to outline builders"""

import re
from typing import Iterable

from bs4 import BeautifulSoup
from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore

from mdrender.core.outline import OutlineBuilder
from mdrender.core.utils.tokens import heading_level


ENV_KEY = 'heading_extractor'
FOOTNOTE_MARKER_RE = re.compile(r'\[\^[^\]\s]+\]:?')
HEADING_TRIPLE = ('heading_open', 'inline', 'heading_close')


def heading_text(html: str) -> str:
    """Plain text of a heading fragment with footnote references removed."""
    soup = BeautifulSoup(html, 'html.parser')
    for ref in soup.select('sup.footnote-ref'):
        ref.decompose()
    return FOOTNOTE_MARKER_RE.sub('', soup.get_text()).strip()


class HeadingExtractor:
    """Render each heading in isolation and pass (text, level, html) to every builder.

    One instance is created per render call and carried in the markdown-it env,
    so builders never outlive the document they were given for.
    """

    def __init__(self, builders: Iterable[OutlineBuilder] = ()):
        self.builders = list(builders)

    def __call__(self, state: StateCore) -> None:
        if not self.builders:
            return
        tokens = state.tokens
        for i, tok in enumerate(tokens):
            if tok.type != 'heading_open':
                continue
            triple = tokens[i:i + 3]
            if tuple(t.type for t in triple) != HEADING_TRIPLE:
                raise RuntimeError(
                    f"Malformed heading at token {i}: expected {HEADING_TRIPLE}, "
                    f"got {tuple(t.type for t in triple)}"
                )
            html = state.md.renderer.render(triple, state.md.options, state.env)
            text = heading_text(html)
            level = heading_level(tok)
            for builder in self.builders:
                builder.on_heading(text, level, html)


def _run_heading_extractor(state: StateCore) -> None:
    extractor = state.env.get(ENV_KEY)
    if extractor is not None:
        extractor(state)


def heading_outline_plugin(md: MarkdownIt) -> None:
    """Run the env-bound HeadingExtractor once the token stream is complete."""
    md.core.ruler.push('heading_outline', _run_heading_extractor)
