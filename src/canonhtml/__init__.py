"""
canonhtml — Canonical re-indentation for editor-produced HTML fragments

Turns minified or messy HTML from a rich-text editor into a stable, indented
source form, and keeps a visual surface and a raw-HTML surface in sync as
two views of one document. Zero runtime dependencies.

Quick Start:
    >>> from canonhtml import format_html
    >>> print(format_html("<div><p>Hello <b>world</b>!</p></div>"))
    <div>
      <p>Hello <b>world</b>!</p>
    </div>

    >>> # Editor controller
    >>> from canonhtml import DualViewEditor, Surface
    >>> editor = DualViewEditor("<ul><li>one</li></ul>", on_change=print)
    >>> editor.switch_to(Surface.SOURCE)
    >>> print(editor.source)
    <ul>
      <li>one</li>
    </ul>

Installation:
    pip install canonhtml
"""

from canonhtml.config import (
    FormatConfig,
    format_config_context,
    get_format_config,
    reset_format_config,
    set_format_config,
)
from canonhtml.editor import DualViewEditor, Surface
from canonhtml.errors import CanonHtmlError, ConfigError, SurfaceError
from canonhtml.formatter import Formatter, format_html
from canonhtml.tags import INLINE_TAGS, VOID_TAGS, TagKind, classify, is_inline, is_void
from canonhtml.tokenizer import Tokenizer, collapse_intertag_whitespace, tokenize
from canonhtml.tokens import CloseTag, Markup, OpenTag, Text, Token, TokenType

__version__ = "0.1.0"

__all__ = [
    # Formatting
    "Formatter",
    "format_html",
    # Tokenizing
    "Tokenizer",
    "collapse_intertag_whitespace",
    "tokenize",
    # Tokens
    "CloseTag",
    "Markup",
    "OpenTag",
    "Text",
    "Token",
    "TokenType",
    # Classification
    "INLINE_TAGS",
    "TagKind",
    "VOID_TAGS",
    "classify",
    "is_inline",
    "is_void",
    # Editor
    "DualViewEditor",
    "Surface",
    # Configuration
    "FormatConfig",
    "format_config_context",
    "get_format_config",
    "reset_format_config",
    "set_format_config",
    # Errors
    "CanonHtmlError",
    "ConfigError",
    "SurfaceError",
    # Version
    "__version__",
]
