"""Shared markdown-it token utilities"""


def heading_level(token) -> int | None:
    """Return the heading level (1-6) for a heading_open token, else None."""
    if token.type == 'heading_open' and len(token.tag) == 2 and token.tag[0] == 'h' and token.tag[1].isdigit():
        return int(token.tag[1])
    return None


def find_opener(tokens: list, close_idx: int) -> int | None:
    """Return the index of the opening token matched by the closing token at close_idx."""
    depth = 0
    for i in range(close_idx, -1, -1):
        depth += tokens[i].nesting
        if depth == 0:
            return i
    return None
