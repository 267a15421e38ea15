"""MarkdownIt construction with the plugin set used for rendering"""

from markdown_it import MarkdownIt
from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.footnote import footnote_plugin

from mdrender.config import Settings
from mdrender.core.render.attrs import attrs_plugin
from mdrender.core.render.headings import heading_outline_plugin
from mdrender.core.render.highlight import highlight


def make_parser(settings: Settings) -> MarkdownIt:
    """Build a MarkdownIt instance for the configured preset and options."""
    md = MarkdownIt(settings.parser_preset, options_update={
        "html": settings.html,
        "linkify": settings.linkify,
        "typographer": settings.typographer,
        "highlight": highlight if settings.highlight else None,
    })
    return (
        md.use(attrs_plugin)
          .use(footnote_plugin)
          .use(deflist_plugin)
          .use(heading_outline_plugin)
    )
