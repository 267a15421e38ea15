"""Pygments highlighting for fenced code blocks"""

import logging

import pygments
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound


logger = logging.getLogger(__name__)

_FORMATTER = HtmlFormatter(nowrap=True)


def highlight(code: str, lang: str, attrs: str = '') -> str:
    """Return highlighted HTML for code, or '' so markdown-it escapes it as plain text."""
    if not lang:
        return ''
    try:
        lexer = get_lexer_by_name(lang)
    except ClassNotFound:
        logger.debug("No lexer for language %r; using default escaping", lang)
        return ''
    try:
        return pygments.highlight(code, lexer, _FORMATTER)
    except Exception as e:
        logger.debug("Highlighting %r failed: %s", lang, e)
        return ''
