"""Dual-representation editor controller.

One logical document, two editable views:

- VISUAL: the rich-text surface; edits arrive as the surface's HTML
- SOURCE: the raw-HTML surface; edits arrive as typed text

Switching VISUAL -> SOURCE runs the content through the formatter to
regenerate the source text. This is the only place reformatting happens.
Source edits are taken verbatim and never validated; switching back to
VISUAL hands the content over unchanged.

Every edit updates the content immediately and is reported through the
``on_change`` callback, which is how the surrounding form (and eventually
the persistence layer) learns about it.

Thread Safety:
A DualViewEditor owns its content and active surface exclusively. Use one
instance per document; nothing is shared between instances.

"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from canonhtml.config import FormatConfig
from canonhtml.errors import SurfaceError
from canonhtml.formatter import format_html
from canonhtml.utils.logger import get_logger

logger = get_logger(__name__)


class Surface(Enum):
    """Editable view of the document."""

    VISUAL = "visual"
    SOURCE = "source"


def _coerce_surface(surface: Surface | str) -> Surface:
    if isinstance(surface, Surface):
        return surface
    try:
        return Surface(surface.lower() if isinstance(surface, str) else surface)
    except ValueError:
        raise SurfaceError(surface, "unknown surface") from None


class DualViewEditor:
    """Keeps a visual surface and a source surface in sync.

    Usage:
            >>> changes = []
            >>> editor = DualViewEditor("<p>Hi <b>there</b></p>", on_change=changes.append)
            >>> editor.switch_to(Surface.SOURCE)
            >>> editor.edit_source("<p>Bye</p>")
            >>> editor.content, changes
            ('<p>Bye</p>', ['<p>Bye</p>'])

    Args:
        content: Initial document HTML
        on_change: Called with the new content after every edit
        config: Format configuration for switch-time formatting (context
            config if None)

    """

    __slots__ = ("_config", "_content", "_on_change", "_source", "_surface")

    def __init__(
        self,
        content: str = "",
        on_change: Callable[[str], object] | None = None,
        *,
        config: FormatConfig | None = None,
    ) -> None:
        self._config = config
        self._on_change = on_change
        self._content = content
        self._surface = Surface.VISUAL
        self._source = format_html(content, self._config)

    @property
    def content(self) -> str:
        """The logical document: what gets persisted."""
        return self._content

    @property
    def source(self) -> str:
        """Text of the source surface."""
        return self._source

    @property
    def surface(self) -> Surface:
        return self._surface

    @property
    def text(self) -> str:
        """Text shown by the active surface."""
        if self._surface is Surface.SOURCE:
            return self._source
        return self._content

    def switch_to(self, surface: Surface | str) -> None:
        """Activate a surface.

        Args:
            surface: Target surface, or its value ("visual" / "source")

        Raises:
            SurfaceError: If the surface name is unknown
        """
        target = _coerce_surface(surface)
        if target is self._surface:
            return

        if target is Surface.SOURCE:
            self._source = format_html(self._content, self._config)
        logger.debug(
            "Switched %s -> %s (%d chars)",
            self._surface.value,
            target.value,
            len(self._content),
        )
        self._surface = target

    def edit_visual(self, html: str) -> None:
        """Record an edit made on the visual surface.

        Raises:
            SurfaceError: If the visual surface is not active
        """
        self._require(Surface.VISUAL)
        self._set_content(html)

    def edit_source(self, text: str) -> None:
        """Record an edit made on the source surface (taken verbatim).

        Raises:
            SurfaceError: If the source surface is not active
        """
        self._require(Surface.SOURCE)
        self._source = text
        self._set_content(text)

    def edit(self, text: str) -> None:
        """Record an edit on whichever surface is active."""
        if self._surface is Surface.SOURCE:
            self.edit_source(text)
        else:
            self.edit_visual(text)

    def load(self, content: str) -> None:
        """Replace the document without notifying.

        Used when a different document is opened in the same editor. The
        editor returns to the visual surface.
        """
        self._content = content
        self._surface = Surface.VISUAL
        self._source = format_html(content, self._config)

    def _require(self, surface: Surface) -> None:
        if self._surface is not surface:
            raise SurfaceError(
                surface.value, f"cannot edit while {self._surface.value} surface is active"
            )

    def _set_content(self, content: str) -> None:
        self._content = content
        if self._on_change is not None:
            self._on_change(content)

    def __repr__(self) -> str:
        return f"DualViewEditor(surface={self._surface.value}, {len(self._content)} chars)"


__all__ = [
    "DualViewEditor",
    "Surface",
]
