"""Source normalization run before markdown-it sees the document"""

from mdrender.core.normalize.attributes import relocate_attribute_blocks, resolve_attribute_lists
from mdrender.core.normalize.indent import normalize_indentation


def normalize(text: str) -> str:
    """Resolve attribute lists, relocate attribute blocks, then fix indentation.

    Indentation runs last since the attribute passes can shift two-space runs.
    """
    text = resolve_attribute_lists(text)
    text = relocate_attribute_blocks(text)
    return normalize_indentation(text)
