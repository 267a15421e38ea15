"""Bounded search-and-replace loop for rewrites that must re-scan after each change"""

import logging
import re
from typing import Callable


logger = logging.getLogger(__name__)


def rewrite_to_fixed_point(pattern: re.Pattern, text: str, repl: Callable[[re.Match], str]) -> str:
    """Replace the first match of pattern, re-scan from the start, repeat until none remain.

    Every rewrite must shrink the distance the pattern covers; the loop is capped
    at len(text) + 1 iterations and raises RuntimeError past that.
    """
    limit = len(text) + 1
    for iteration in range(limit):
        m = pattern.search(text)
        if m is None:
            if iteration:
                logger.debug("%s reached a fixed point after %d rewrite(s)", pattern.pattern, iteration)
            return text
        text = text[:m.start()] + repl(m) + text[m.end():]
    raise RuntimeError(f"Rewrite did not converge after {limit} iterations: {pattern.pattern!r}")
