"""Exception classes for canonhtml.

The tokenizer and formatter are total and raise nothing. Errors come only
from invalid configuration and from misuse of the editor controller.
"""

from __future__ import annotations


class CanonHtmlError(Exception):
    """Base exception for all canonhtml errors."""

    pass


class ConfigError(CanonHtmlError):
    """Invalid formatter configuration.

    Raised when a FormatConfig is built with an unusable indent unit
    or a malformed tag name.
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending FormatConfig field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"{field}: {message}")


class SurfaceError(CanonHtmlError):
    """Editor surface misuse.

    Raised for an unknown surface name, or for an edit delivered to the
    surface that is not currently active.
    """

    def __init__(self, surface: object, message: str) -> None:
        """Initialize surface error.

        Args:
            surface: The surface (or raw name) involved
            message: Description of the error
        """
        self.surface = surface
        super().__init__(f"Surface {surface!r}: {message}")
