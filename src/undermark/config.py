"""ContextVar-based parse configuration for Undermark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Markdown instance, read by the tokenizer and renderer
in the context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # In Markdown class
    md = Markdown(links=False)
    html = md("# Hello")  # Sets config internally via ContextVar

    # Direct usage (advanced)
    from undermark.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(headings_enabled=False))
    try:
        tags = build_tags("# not a header")
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(headings_enabled=False)):
        tags = build_tags("# not a header")

"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from undermark.errors import ConfigError


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Set once per Markdown instance, read by all conversions in the context.

    Attributes:
        headings_enabled: Recognize "# " at paragraph start as a header
        links_enabled: Recognize [text](destination) links
        text_transformer: Optional callback to transform plain text at render time

    """

    headings_enabled: bool = True
    links_enabled: bool = True
    text_transformer: Callable[[str], str] | None = None

    def __post_init__(self) -> None:
        if self.text_transformer is not None and not callable(self.text_transformer):
            raise ConfigError(
                f"text_transformer must be callable, got {type(self.text_transformer).__name__}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "links_enabled": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.links_enabled
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Only affects the current thread's context.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ParseConfig to use within the context.

    Example:
        >>> with parse_config_context(ParseConfig(links_enabled=False)):
        ...     tags = build_tags("[a](b)")
        >>> # Automatically reset to previous config

    Restores the previous config even if an exception is raised.

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
