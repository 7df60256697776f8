"""Source scanner for VB.NET namespace and class declarations.

Scans the leading tokens of a source file to find the namespace and class
a companion resource file (e.g. Form1.resx next to Form1.vb) belongs to.

The scanner walks the text as a sequence of segments. At each position the
following alternatives are tried in order:

    1. block comment     /* ... */ within one line; unterminated on the
                         last line, it runs to end of input
    2. whitespace / dots skipped
    3. Namespace <path>  captures the dotted path
    4. Class <name>      captures the identifier
    5. identifier        any other word, skipped

Scanning stops at the first position where none of them match (punctuation,
operators, literals, VB ' comments), at a block comment that is still open
when its line ends, or at end of input. A later Namespace or
Class declaration overwrites an earlier one, so the last declaration seen
before the stop wins. Keywords are matched case-sensitively.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

COMMENT_START = "/*"
COMMENT_END = "*/"

_SEPARATOR_RE = re.compile(r"[\s.]+")
_NAMESPACE_RE = re.compile(r"Namespace\s+(\w+(?:\.\w+)*)")
_CLASS_RE = re.compile(r"Class\s+(\w+)")
_IDENTIFIER_RE = re.compile(r"\w+")


class ScanState(Enum):
    """Scanner state."""

    SCANNING = "scanning"
    IN_COMMENT = "in_comment"
    DONE = "done"


@dataclass(frozen=True)
class ScanResult:
    """Declarations found by the scanner.

    Attributes:
        namespace_name: Last namespace path seen before the scan stopped
        class_name: Last class name seen before the scan stopped
        position: Offset at which scanning stopped
    """

    namespace_name: Optional[str] = None
    class_name: Optional[str] = None
    position: int = 0


class SourceScanner:
    """Linear token scanner over VB.NET source text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.position = 0
        self.state = ScanState.SCANNING
        self.namespace_name: Optional[str] = None
        self.class_name: Optional[str] = None
        self._comment_start = 0

    def scan(self) -> ScanResult:
        """Run the scanner to completion and return the captured declarations."""
        while self.state is not ScanState.DONE:
            if self.state is ScanState.IN_COMMENT:
                self._skip_comment()
            else:
                self._step()

        logger.debug(
            f"Scan stopped at offset {self.position}/{len(self.text)}: "
            f"namespace={self.namespace_name!r} class={self.class_name!r}"
        )
        return ScanResult(
            namespace_name=self.namespace_name,
            class_name=self.class_name,
            position=self.position,
        )

    def _step(self) -> None:
        text, pos = self.text, self.position
        if pos >= len(text):
            self.state = ScanState.DONE
            return

        if text.startswith(COMMENT_START, pos):
            self._comment_start = pos
            self.position = pos + len(COMMENT_START)
            self.state = ScanState.IN_COMMENT
            return

        match = _SEPARATOR_RE.match(text, pos)
        if match:
            self.position = match.end()
            return

        match = _NAMESPACE_RE.match(text, pos)
        if match:
            self.namespace_name = match.group(1)
            self.position = match.end()
            return

        match = _CLASS_RE.match(text, pos)
        if match:
            self.class_name = match.group(1)
            self.position = match.end()
            return

        match = _IDENTIFIER_RE.match(text, pos)
        if match:
            self.position = match.end()
            return

        self.state = ScanState.DONE

    def _skip_comment(self) -> None:
        text = self.text
        line_end = text.find("\n", self.position)
        line = text[self.position :] if line_end == -1 else text[self.position : line_end]

        end = line.find(COMMENT_END)
        if end != -1:
            self.position += end + len(COMMENT_END)
            self.state = ScanState.SCANNING
        elif line_end == -1 or line_end == len(text) - 1:
            # Unterminated on the last line: runs to end of input
            self.position = len(text) if line_end == -1 else line_end
            self.state = ScanState.SCANNING
        else:
            # A comment never crosses a line break; stop at its opener
            self.position = self._comment_start
            self.state = ScanState.DONE


def scan_source(text: str) -> ScanResult:
    """Scan source text for its namespace and class declarations.

    Args:
        text: Full text of a VB.NET source file

    Returns:
        ScanResult with the captured namespace path and class name (either may be None)
    """
    return SourceScanner(text).scan()
