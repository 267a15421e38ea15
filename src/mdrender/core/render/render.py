"""Render orchestration: normalize, render with the heading hook, post-process"""

from typing import Iterable

from markdown_it.token import Token

from mdrender.config import Settings
from mdrender.core.models import RenderResult
from mdrender.core.normalize.pipeline import normalize
from mdrender.core.outline import OutlineBuilder
from mdrender.core.render.headings import ENV_KEY, HeadingExtractor
from mdrender.core.render.parser import make_parser


def escape_single_quotes(html: str) -> str:
    """Replace literal ' with &#39; to match output of the earlier renderer."""
    return html.replace("'", "&#39;")


class Renderer:
    """One configured markdown-it pipeline; use one instance per thread."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self.md = make_parser(self.settings)

    def parse(self, text: str) -> list[Token]:
        """Normalized token stream, without reporting headings."""
        return self.md.parse(normalize(text), {})

    def render(self, text: str, outline_builders: Iterable[OutlineBuilder] = ()) -> RenderResult:
        """Render text to HTML, reporting each heading to outline_builders in order."""
        env = {ENV_KEY: HeadingExtractor(outline_builders)}
        html = self.md.render(normalize(text), env)
        return RenderResult(html=escape_single_quotes(html))


def render(text: str, outline_builders: Iterable[OutlineBuilder] = (), settings: Settings | None = None) -> RenderResult:
    """Convenience wrapper building a fresh Renderer for a single document."""
    return Renderer(settings).render(text, outline_builders)
