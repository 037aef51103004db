"""Token definitions for the canonhtml tokenizer.

The tokenizer produces a flat stream of tokens in source order; the
formatter consumes it. There are four cases:

- OpenTag: ``<name ...>`` or ``<name .../>``
- CloseTag: ``</name>``
- Text: characters outside any ``<...>`` span
- Markup: comments, doctypes and processing instructions (``<!...>``, ``<?...>``)

Thread Safety:
All tokens are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, TypeAlias


class TokenType(Enum):
    """Token types produced by the tokenizer."""

    OPEN_TAG = auto()
    CLOSE_TAG = auto()
    TEXT = auto()
    MARKUP = auto()


@dataclass(frozen=True, slots=True)
class OpenTag:
    """An opening (or self-closing) tag.

    Attributes:
        name: Lower-cased leading alphanumeric run after ``<``; empty when the
            tag has no name (e.g. ``< b>``)
        raw_attributes: Untouched text between the name and the closing ``>``
        self_closing: True iff the raw tag text ends with ``/>``
        raw: Full source text of the tag, emitted as-is by the formatter

    """

    type: ClassVar[TokenType] = TokenType.OPEN_TAG

    name: str
    raw_attributes: str
    self_closing: bool
    raw: str

    def __repr__(self) -> str:
        return f"OpenTag({self.name!r}, {self.raw_attributes!r}, self_closing={self.self_closing})"


@dataclass(frozen=True, slots=True)
class CloseTag:
    """A closing tag. Trailing whitespace/attributes are not part of ``name``."""

    type: ClassVar[TokenType] = TokenType.CLOSE_TAG

    name: str
    raw: str

    def __repr__(self) -> str:
        return f"CloseTag({self.name!r})"


@dataclass(frozen=True, slots=True)
class Text:
    """A run of text outside any tag. Never blank."""

    type: ClassVar[TokenType] = TokenType.TEXT

    value: str

    @property
    def raw(self) -> str:
        return self.value

    def __repr__(self) -> str:
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Text({val!r})"


@dataclass(frozen=True, slots=True)
class Markup:
    """A comment, doctype or processing instruction."""

    type: ClassVar[TokenType] = TokenType.MARKUP

    raw: str

    def __repr__(self) -> str:
        return f"Markup({self.raw!r})"


Token: TypeAlias = OpenTag | CloseTag | Text | Markup


__all__ = [
    "CloseTag",
    "Markup",
    "OpenTag",
    "Text",
    "Token",
    "TokenType",
]
