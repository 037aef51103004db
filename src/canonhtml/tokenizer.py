"""Character-scanning HTML tokenizer.

A single forward pass over the source with one flag (inside a tag or not)
and one accumulation buffer. No regex in the scan loop; the only regex is
the inter-tag whitespace pre-pass.

Known limitation: quoting context is not tracked, so a literal ``<`` or
``>`` inside an attribute value (``title="a > b"``) ends the tag early.
Fragments produced by browser rich-text commands never contain those.

Thread Safety:
Tokenizer holds only its source string. Each tokenize() call keeps its
scan state local, so a Tokenizer can be rescanned any number of times.

"""

from __future__ import annotations

import re
from collections.abc import Iterator

from canonhtml.tokens import CloseTag, Markup, OpenTag, Text, Token

_INTERTAG_WHITESPACE = re.compile(r">\s+<")

# ASCII letters and digits: the characters of a tag name
_NAME_CHARS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
)


def collapse_intertag_whitespace(source: str) -> str:
    """Remove whitespace that sits strictly between ``>`` and ``<``.

    Example:
        >>> collapse_intertag_whitespace("<ul>\\n  <li>a</li>\\n</ul>")
        '<ul><li>a</li></ul>'
    """
    return _INTERTAG_WHITESPACE.sub("><", source)


def _tag_token(raw: str) -> Token:
    """Build the token for a complete ``<...>`` span."""
    if raw.startswith("</"):
        parts = raw[2:-1].split(None, 1)
        return CloseTag(name=parts[0].lower() if parts else "", raw=raw)

    if raw.startswith(("<!", "<?")):
        return Markup(raw=raw)

    end = 1
    while end < len(raw) and raw[end] in _NAME_CHARS:
        end += 1
    return OpenTag(
        name=raw[1:end].lower(),
        raw_attributes=raw[end:-1],
        self_closing=raw.endswith("/>"),
        raw=raw,
    )


class Tokenizer:
    """Scans an HTML fragment into OpenTag/CloseTag/Text/Markup tokens.

    Usage:
            >>> for token in Tokenizer("<p>Hi <b>there</b></p>").tokenize():
            ...     print(token)
        OpenTag('p', '', self_closing=False)
        Text('Hi ')
        OpenTag('b', '', self_closing=False)
        Text('there')
        CloseTag('b')
        CloseTag('p')

    The source is scanned verbatim; apply collapse_intertag_whitespace()
    first (or use the module-level tokenize()) to drop indentation between
    tags.

    """

    __slots__ = ("_source",)

    def __init__(self, source: str) -> None:
        self._source = source

    def tokenize(self) -> Iterator[Token]:
        """Scan the source and yield tokens in order.

        Yields:
            Tokens in source order. Blank text runs are never yielded.
        """
        buffer: list[str] = []
        in_tag = False

        for char in self._source:
            if char == "<":
                text = "".join(buffer)
                if text.strip():
                    yield Text(value=text)
                buffer = ["<"]
                in_tag = True
            elif char == ">" and in_tag:
                buffer.append(">")
                yield _tag_token("".join(buffer))
                buffer = []
                in_tag = False
            else:
                buffer.append(char)

        # Trailing text, or an unterminated "<..." kept as text
        text = "".join(buffer)
        if text.strip():
            yield Text(value=text)


def tokenize(source: str) -> list[Token]:
    """Collapse inter-tag whitespace and tokenize.

    Args:
        source: HTML fragment

    Returns:
        List of tokens in source order (empty for blank input)
    """
    return list(Tokenizer(collapse_intertag_whitespace(source)).tokenize())


__all__ = [
    "Tokenizer",
    "collapse_intertag_whitespace",
    "tokenize",
]
