"""Tag name sets for O(1) classification.

All sets are frozensets built once at import:
- O(1) membership testing
- Immutability (safe to share across threads)
- No per-call allocation

Every tag name falls into exactly one TagKind. Names found in neither
table are BLOCK, so unknown or custom elements get their own line.

Usage:
    from canonhtml.tags import TagKind, classify

    if classify("br") is TagKind.VOID:
        ...
"""

from enum import Enum


class TagKind(Enum):
    """Layout class of an HTML element."""

    VOID = "void"  # No children, no closing tag
    INLINE = "inline"  # Flows within a line of text
    BLOCK = "block"  # Own line, indents its children


# Elements that cannot contain children
VOID_TAGS: frozenset[str] = frozenset(
    (
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    )
)

# Phrasing elements that stay glued to the surrounding text
INLINE_TAGS: frozenset[str] = frozenset(
    (
        "a",
        "abbr",
        "b",
        "bdi",
        "bdo",
        "cite",
        "code",
        "data",
        "del",
        "dfn",
        "em",
        "font",
        "i",
        "ins",
        "kbd",
        "mark",
        "q",
        "s",
        "samp",
        "small",
        "span",
        "strike",
        "strong",
        "sub",
        "sup",
        "time",
        "u",
        "var",
    )
)


def classify(name: str) -> TagKind:
    """Classify a lower-case tag name.

    Void wins over inline; anything unknown (including the empty name of a
    nameless tag) is BLOCK. Never raises.

    """
    if name in VOID_TAGS:
        return TagKind.VOID
    if name in INLINE_TAGS:
        return TagKind.INLINE
    return TagKind.BLOCK


def is_void(name: str) -> bool:
    """Check if tag name is a void element."""
    return name in VOID_TAGS


def is_inline(name: str) -> bool:
    """Check if tag name is an inline element."""
    return name in INLINE_TAGS


__all__ = [
    "INLINE_TAGS",
    "VOID_TAGS",
    "TagKind",
    "classify",
    "is_inline",
    "is_void",
]
