"""Output staleness decision for VB.NET compilation.

The surrounding build decides whether the output assembly is out of date
(sources newer than output, references changed, ...). This module adds one
rule on top: when the toolchain can generate XML documentation and a
documentation file is configured but missing, the target is recompiled.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

logger = logging.getLogger(__name__)

BaseVerdict = Union[bool, Callable[[], bool]]


def _evaluate(base_verdict: BaseVerdict) -> bool:
    if callable(base_verdict):
        return bool(base_verdict())
    return bool(base_verdict)


def needs_compiling(
    base_verdict: BaseVerdict,
    doc_file: Optional[Path],
    supports_doc_generation: bool,
    file_exists: Callable[[Path], bool] = Path.exists,
) -> bool:
    """Determine whether compilation is needed.

    Args:
        base_verdict: Staleness check of the surrounding build, or its result.
            A callable is evaluated again at the end instead of reusing the
            first answer.
        doc_file: Configured XML documentation file, if any
        supports_doc_generation: Whether the toolchain supports /doc
        file_exists: Existence check for the documentation file

    Returns:
        True if the target must be (re)compiled
    """
    if _evaluate(base_verdict):
        return True

    if doc_file is not None and supports_doc_generation:
        doc_path = Path(doc_file)
        if not file_exists(doc_path):
            logger.info(f"XML documentation file '{doc_path}' does not exist, recompiling.")
            return True

    return _evaluate(base_verdict)
