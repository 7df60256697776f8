"""Resource linkage resolution for VB.NET resource files.

A resource file (e.g. ``Form1.resx``) is embedded under the namespace and
class of the source file it depends on (``Form1.vb``). The namespace and
class come from scanning the source file; VB.NET then nests everything
under the project root namespace, so the root namespace is always
prefixed to whatever the source declares.

Resolution holds no state, so callers may resolve many resource files in
parallel.
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Optional, Union

from .source_scanner import scan_source

logger = logging.getLogger(__name__)

# File extension of VB.NET source files
SOURCE_EXTENSION = "vb"

SourceReader = Callable[[Path], Optional[str]]


@dataclass(frozen=True)
class ResourceLinkage:
    """Namespace/class identity a resource file is nested under.

    Attributes:
        namespace_name: Namespace the resource belongs to, if any
        class_name: Class the resource belongs to, if any
    """

    namespace_name: Optional[str] = None
    class_name: Optional[str] = None

    @property
    def has_namespace_name(self) -> bool:
        return bool(self.namespace_name)

    @property
    def has_class_name(self) -> bool:
        return bool(self.class_name)

    @property
    def is_valid(self) -> bool:
        """True when at least a namespace or a class was found."""
        return self.has_namespace_name or self.has_class_name

    @property
    def qualified_name(self) -> Optional[str]:
        """Dotted ``namespace.class`` name, or whichever part is present."""
        parts = [part for part in (self.namespace_name, self.class_name) if part]
        if not parts:
            return None
        return ".".join(parts)

    def with_root_namespace(self, root_namespace: Optional[str]) -> "ResourceLinkage":
        """Return a copy nested under the given root namespace.

        ``Sub`` under root ``App`` becomes ``App.Sub``; a linkage without a
        namespace gets exactly ``App``. The class name is unchanged.
        """
        if not root_namespace:
            return self
        if self.has_namespace_name:
            return replace(self, namespace_name=f"{root_namespace}.{self.namespace_name}")
        return replace(self, namespace_name=root_namespace)

    def __str__(self) -> str:
        return self.qualified_name or ""


def read_source_text(path: Path) -> Optional[str]:
    """Read a source file, returning None if it does not exist.

    Raises:
        OSError: If the file exists but cannot be read
    """
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8-sig", errors="replace")


def dependent_source_for(resource_path: Union[str, Path], culture: Optional[str] = None) -> Path:
    """Get the source file a resource file depends on.

    ``Form1.resx`` maps to ``Form1.vb``; a culture-specific resource such as
    ``Form1.de-DE.resx`` maps to the same ``Form1.vb`` when ``culture`` is
    ``"de-DE"``.
    """
    base = Path(resource_path).with_suffix("")
    if culture and base.suffix.lower() == f".{culture.lower()}":
        base = base.with_suffix("")
    return base.with_name(f"{base.name}.{SOURCE_EXTENSION}")


def get_base_linkage(dependent_file: Union[str, Path], read_source: SourceReader = read_source_text) -> Optional[ResourceLinkage]:
    """Determine the resource linkage declared in a source file.

    Returns:
        The declared namespace/class, or None if the source file does not exist.
    """
    path = Path(dependent_file)
    text = read_source(path)
    if text is None:
        logger.debug(f"Dependent file {path} not found, no resource linkage")
        return None

    result = scan_source(text)
    return ResourceLinkage(namespace_name=result.namespace_name, class_name=result.class_name)


def resolve(
    dependent_file: Union[str, Path],
    root_namespace: Optional[str] = None,
    culture: Optional[str] = None,
    read_source: SourceReader = read_source_text,
) -> Optional[ResourceLinkage]:
    """Resolve the namespace/class a resource file should be linked under.

    Args:
        dependent_file: Source file the resource depends on
        root_namespace: Project root namespace, prefixed to the declared namespace
        culture: Culture of the resource file; not used for scanning
        read_source: Reads source text, returning None for a missing file

    Returns:
        ResourceLinkage with the root namespace applied, or None if the
        dependent source file does not exist.
    """
    if culture:
        logger.debug(f"Resolving resource linkage from {dependent_file} (culture {culture})")

    linkage = get_base_linkage(dependent_file, read_source)
    if linkage is None:
        return None

    # VB.NET always nests compiled members under the root namespace
    return linkage.with_root_namespace(root_namespace)
