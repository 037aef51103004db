"""ContextVar-based format configuration for canonhtml.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Formatter built without an explicit config reads the active one at
format time.

Usage:
    from canonhtml.config import FormatConfig, format_config_context

    with format_config_context(FormatConfig(indent_unit="    ")):
        source = format_html("<div><p>Hi</p></div>")

"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field

from canonhtml.errors import ConfigError
from canonhtml.tags import TagKind, classify


def _is_tag_name(name: object) -> bool:
    return isinstance(name, str) and name.isascii() and name.isalnum() and name == name.lower()


def _as_names(value: Iterable[str] | str) -> frozenset[str]:
    if isinstance(value, str):
        return frozenset(value.split())
    return frozenset(value)


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable formatter configuration.

    Attributes:
        indent_unit: Whitespace repeated once per nesting level
        extra_inline_tags: Additional tag names to keep glued to text
            (e.g. custom elements the editor emits inline)
        extra_void_tags: Additional tag names that never contain children

    Raises:
        ConfigError: If indent_unit is empty, not whitespace, or contains a
            line break, or a tag name is not a lower-case alphanumeric
            identifier.

    """

    indent_unit: str = "  "
    extra_inline_tags: frozenset[str] = field(default_factory=frozenset)
    extra_void_tags: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.indent_unit, str) or not self.indent_unit.isspace():
            raise ConfigError("indent_unit", f"must be non-empty whitespace, got {self.indent_unit!r}")
        if "\n" in self.indent_unit or "\r" in self.indent_unit:
            raise ConfigError("indent_unit", "must not contain line breaks")
        for attr in ("extra_inline_tags", "extra_void_tags"):
            names = getattr(self, attr)
            if not isinstance(names, frozenset):
                names = _as_names(names)
                # Frozen dataclass: normalize through object.__setattr__
                object.__setattr__(self, attr, names)
            bad = sorted(repr(n) for n in names if not _is_tag_name(n))
            if bad:
                raise ConfigError(attr, f"invalid tag names: {', '.join(bad)}")

    def classify(self, name: str) -> TagKind:
        """Classify a tag name, honoring the extra tag sets."""
        if name in self.extra_void_tags:
            return TagKind.VOID
        if name in self.extra_inline_tags:
            return TagKind.INLINE
        return classify(name)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "FormatConfig":
        """Create FormatConfig from dictionary.

        Only includes keys that are valid FormatConfig fields; unknown keys
        are silently ignored. Tag collections may be any iterable of names
        or a whitespace-separated string.

        Example:
            >>> config = FormatConfig.from_dict({
            ...     "indent_unit": "\\t",
            ...     "extra_inline_tags": ["mention"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.extra_inline_tags
            frozenset({'mention'})

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: FormatConfig = FormatConfig()

_format_config: ContextVar[FormatConfig] = ContextVar(
    "format_config",
    default=_DEFAULT_CONFIG,
)


def get_format_config() -> FormatConfig:
    """Get current format configuration (context-local)."""
    return _format_config.get()


def set_format_config(config: FormatConfig) -> None:
    """Set format configuration for the current context."""
    _format_config.set(config)


def reset_format_config() -> None:
    """Reset to the default configuration."""
    _format_config.set(_DEFAULT_CONFIG)


@contextmanager
def format_config_context(config: FormatConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with format_config_context(FormatConfig(indent_unit="\\t")):
        ...     get_format_config().indent_unit
        '\\t'

    """
    previous = _format_config.get()
    _format_config.set(config)
    try:
        yield
    finally:
        _format_config.set(previous)


__all__ = [
    "FormatConfig",
    "format_config_context",
    "get_format_config",
    "reset_format_config",
    "set_format_config",
]
