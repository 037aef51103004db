"""LineBuilder for O(n) indented output.

Collects one entry per output line together with its indent, joins once
at the end: O(n) total vs O(n²) for repeated string concatenation.

Thread Safety:
LineBuilder instances are local to each format() call.
No shared mutable state.

"""

from __future__ import annotations


class LineBuilder:
    """Indented line accumulator.

    Usage:
            >>> lines = LineBuilder("  ")
            >>> _ = lines.emit(0, "<ul>").emit(1, "<li>a</li>").emit(0, "</ul>")
            >>> print(lines.build())
            <ul>
              <li>a</li>
            </ul>

    """

    __slots__ = ("_lines", "_unit")

    def __init__(self, indent_unit: str = "  ") -> None:
        self._lines: list[str] = []
        self._unit = indent_unit

    def emit(self, depth: int, text: str) -> LineBuilder:
        """Append a line indented ``depth`` units.

        Args:
            depth: Nesting level (negative values are treated as 0)
            text: Line content (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if text:
            self._lines.append(self._unit * max(0, depth) + text)
        return self

    def build(self) -> str:
        """Join lines with newlines and trim the result."""
        return "\n".join(self._lines).strip()

    def __len__(self) -> int:
        """Return number of lines emitted."""
        return len(self._lines)

    def __bool__(self) -> bool:
        return bool(self._lines)
