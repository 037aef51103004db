"""Indentation formatter: token stream to canonical source text.

Output is one line per block element, text run, or atom:

- Inline runs: adjacent text and inline tags, joined verbatim and trimmed,
  so ``Hello <b>world</b>!`` stays readable on a single line.
- Leaf blocks: a block element containing only inline content is written
  whole on one line (``<p>Hi</p>``).
- Other block elements put their open and close tags on their own lines
  and indent their children one unit deeper.
- Atoms (void tags, self-closing tags, comments) sit on their own line
  and never change the depth.

Unbalanced markup only moves the depth, which floors at zero. format()
never raises.

Thread Safety:
All formatting state (depth, pending run, output lines) is local to one
format() call. A Formatter may be shared freely.

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from canonhtml.config import FormatConfig, get_format_config
from canonhtml.lines import LineBuilder
from canonhtml.tags import TagKind
from canonhtml.tokenizer import tokenize
from canonhtml.tokens import CloseTag, Markup, OpenTag, Text, Token
from canonhtml.utils.logger import get_logger

logger = get_logger(__name__)


def _joins_run(token: Token, config: FormatConfig) -> bool:
    """Text, inline tags, and close tags of non-container elements."""
    if isinstance(token, Text):
        return True
    if isinstance(token, OpenTag):
        return config.classify(token.name) is TagKind.INLINE
    if isinstance(token, CloseTag):
        return config.classify(token.name) is not TagKind.BLOCK
    return False


def _is_atom(token: Token, config: FormatConfig) -> bool:
    if isinstance(token, Markup):
        return True
    return isinstance(token, OpenTag) and (
        token.self_closing or config.classify(token.name) is TagKind.VOID
    )


def _leaf_end(tokens: Sequence[Token], start: int, config: FormatConfig) -> int | None:
    """Index of the close tag ending a leaf block opened at ``start``.

    Returns None as soon as a block tag (or the end of input) is reached
    first. The scan stops at the next block token, so total work over a
    format() call stays linear.
    """
    name = tokens[start].name  # type: ignore[union-attr]
    for index in range(start + 1, len(tokens)):
        token = tokens[index]
        if isinstance(token, CloseTag):
            if token.name == name:
                return index
            if config.classify(token.name) is TagKind.BLOCK:
                return None
        elif isinstance(token, OpenTag):
            if not (_joins_run(token, config) or _is_atom(token, config)):
                return None
    return None


class Formatter:
    """Re-indents a token stream into canonical source form.

    Usage:
            >>> from canonhtml.tokenizer import tokenize
            >>> print(Formatter().format(tokenize("<div><p>Hi</p></div>")))
            <div>
              <p>Hi</p>
            </div>

    Args:
        config: Format configuration. When None, the context config
            (get_format_config()) is read on every format() call.

    """

    __slots__ = ("_config",)

    def __init__(self, config: FormatConfig | None = None) -> None:
        self._config = config

    @property
    def config(self) -> FormatConfig:
        return self._config if self._config is not None else get_format_config()

    def format(self, tokens: Iterable[Token]) -> str:
        """Format tokens into indented text.

        Args:
            tokens: Token stream, typically from tokenize()

        Returns:
            Canonical indented text; empty string for an empty stream
        """
        config = self.config
        if not isinstance(tokens, Sequence):
            tokens = list(tokens)

        lines = LineBuilder(config.indent_unit)
        run: list[str] = []
        depth = 0
        index = 0

        while index < len(tokens):
            token = tokens[index]
            index += 1

            if _joins_run(token, config):
                run.append(token.raw)
                continue

            lines.emit(depth, "".join(run).strip())
            run.clear()

            if isinstance(token, CloseTag):
                if depth == 0:
                    logger.debug("Unmatched close tag %r at depth 0", token.raw)
                depth = max(0, depth - 1)
                lines.emit(depth, token.raw)
            elif _is_atom(token, config):
                lines.emit(depth, token.raw)
            else:
                end = _leaf_end(tokens, index - 1, config)
                if end is None:
                    lines.emit(depth, token.raw)
                    depth += 1
                else:
                    inner = "".join(t.raw for t in tokens[index:end]).strip()
                    lines.emit(depth, token.raw + inner + tokens[end].raw)
                    index = end + 1

        lines.emit(depth, "".join(run).strip())

        logger.debug("Formatted %d tokens into %d lines", len(tokens), len(lines))
        return lines.build()


def format_html(source: str, config: FormatConfig | None = None) -> str:
    """Tokenize and format an HTML fragment.

    Args:
        source: HTML fragment (possibly minified or unbalanced)
        config: Optional format configuration (context config if None)

    Returns:
        Canonical indented text

    Example:
        >>> format_html("<p>Hello <b>world</b>!</p>")
        '<p>Hello <b>world</b>!</p>'
    """
    if not source:
        return ""
    return Formatter(config).format(tokenize(source))


__all__ = [
    "Formatter",
    "format_html",
]
