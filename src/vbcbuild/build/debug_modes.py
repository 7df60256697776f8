"""Debug Mode Configuration.

This module maps the debug output mode of a build to the compiler
directives it produces.

Design:
    Each mode declares ALL directives it emits in a fixed order. The option
    emitter inserts the block as-is; nothing else adds debug flags.

    | Mode    | Directives                                   |
    |---------|----------------------------------------------|
    | none    | (none)                                       |
    | enable  | /debug /define:DEBUG=True /define:TRACE=True |
    | full    | /debug                                       |
    | pdbonly | /debug:pdbonly                               |
"""

from enum import Enum
from typing import Any, Union

from .directives import Directive


class InvalidConfigurationError(ValueError):
    """Raised when a configuration value is not a valid program state.

    Attributes:
        value: The offending value
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class DebugMode(Enum):
    """Debug output mode enum for type-safe mode selection."""

    NONE = "none"
    ENABLE = "enable"
    FULL = "full"
    PDB_ONLY = "pdbonly"

    def __str__(self) -> str:
        """Return the string value for display."""
        return self.value

    @classmethod
    def parse(cls, value: Union["DebugMode", str, bool, None]) -> "DebugMode":
        """Parse a debug mode from a build-file value.

        Accepts enum members, case-insensitive tags, and the legacy
        boolean form (True -> ENABLE, False/None -> NONE).

        Raises:
            InvalidConfigurationError: If the tag is not a known mode
        """
        if isinstance(value, DebugMode):
            return value
        if value is None or value is False:
            return cls.NONE
        if value is True:
            return cls.ENABLE
        if isinstance(value, str):
            tag = value.strip().lower()
            if tag in _ALIASES:
                return _ALIASES[tag]
            for mode in cls:
                if mode.value == tag:
                    return mode
        raise InvalidConfigurationError(f"Invalid debug output type: {value!r}", value)


_ALIASES: dict[str, DebugMode] = {
    "": DebugMode.NONE,
    "false": DebugMode.NONE,
    "true": DebugMode.ENABLE,
}


# Directive blocks keyed by DebugMode; order within each block is fixed
DEBUG_DIRECTIVES: dict[DebugMode, tuple[Directive, ...]] = {
    DebugMode.NONE: (),
    DebugMode.ENABLE: (
        Directive("debug"),
        Directive("define", "DEBUG=True"),
        Directive("define", "TRACE=True"),
    ),
    DebugMode.FULL: (Directive("debug"),),
    DebugMode.PDB_ONLY: (Directive("debug", "pdbonly"),),
}


def get_debug_directives(mode: DebugMode) -> tuple[Directive, ...]:
    """Get the directive block for a debug mode.

    Args:
        mode: DebugMode enum value

    Returns:
        Directives in emission order (empty for DebugMode.NONE)

    Raises:
        InvalidConfigurationError: If mode is not a DebugMode member
    """
    try:
        return DEBUG_DIRECTIVES[mode]
    except (KeyError, TypeError):
        raise InvalidConfigurationError(f"Invalid debug output type: {mode!r}", mode) from None
