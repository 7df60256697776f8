"""Compiler directives and their command-line rendering.

A directive is one compiler option, optionally carrying a value. The
option emitter produces an ordered sequence of directives; this module
turns them into ``/name`` or ``/name:value`` arguments and writes them to
a response file for the compiler's ``@file`` input.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class Directive:
    """A single compiler option.

    Attributes:
        name: Option name without the leading slash (e.g. "debug")
        value: Optional option value (e.g. "pdbonly")
    """

    name: str
    value: Optional[str] = None

    def to_argument(self) -> str:
        """Render as a command-line argument.

        Values containing whitespace are double-quoted.
        """
        if self.value is None:
            return f"/{self.name}"
        value = self.value
        if any(ch.isspace() for ch in value):
            value = f'"{value}"'
        return f"/{self.name}:{value}"

    def __str__(self) -> str:
        return self.to_argument()


def render_arguments(directives: Iterable[Directive]) -> List[str]:
    """Render directives to command-line arguments, preserving order."""
    return [directive.to_argument() for directive in directives]


def write_response_file(directives: Iterable[Directive], path: Path) -> Path:
    """Write directives to a compiler response file, one argument per line.

    Args:
        directives: Directives in emission order
        path: Response file to create (parent directories are created)

    Returns:
        The path that was written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = render_arguments(directives)
    path.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")
    return path
