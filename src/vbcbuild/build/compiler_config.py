"""Compiler Configuration - Resolved VB.NET compiler options.

This module defines CompilerConfiguration, the record the option emitter
turns into directives.

Design:
    The configuration is populated by an external build-file reader and
    flows unchanged into the option emitter. Optional string fields are
    either None or non-empty: empty strings are normalized to None when the
    record is built, so the emitter never has to tell "" and None apart.
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .debug_modes import DebugMode
from .namespace_imports import NamespaceImportSet

# Optional string fields normalized from "" to None
_OPTIONAL_STRING_FIELDS = (
    "base_address",
    "option_compare",
    "platform",
    "root_namespace",
    "define",
)

# Optional path fields normalized from "" to None
_OPTIONAL_PATH_FIELDS = ("doc_file", "win32_resource")

PathLike = Union[str, Path]


def _empty_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or value == "":
        return None
    return value


def _to_path(value: Optional[PathLike]) -> Optional[Path]:
    if value is None or value == "":
        return None
    return Path(value)


@dataclass(frozen=True)
class CompilerConfiguration:
    """Resolved options for one VB.NET compilation.

    Attributes:
        base_address: Preferred DLL base address as a hexadecimal string
        debug_mode: Debug output mode (default DebugMode.NONE)
        doc_file: XML documentation file to generate
        no_stdlib: Do not reference the standard libraries (system.dll, VBC.RSP)
        option_compare: String comparison mode ("text", "binary") or None
        option_explicit: Require explicit declaration of variables
        option_strict: Enforce strict type semantics
        remove_int_checks: Remove integer overflow checks
        option_optimize: Enable optimizations
        platform: Target platform name (e.g., "x86", "anycpu")
        root_namespace: Project root namespace
        imports: Namespaces to import
        win32_resource: Native (win32) resource file
        define: Comma-separated conditional compilation constants
    """

    base_address: Optional[str] = None
    debug_mode: DebugMode = DebugMode.NONE
    doc_file: Optional[Path] = None
    no_stdlib: bool = False
    option_compare: Optional[str] = None
    option_explicit: bool = False
    option_strict: bool = False
    remove_int_checks: bool = False
    option_optimize: bool = False
    platform: Optional[str] = None
    root_namespace: Optional[str] = None
    imports: NamespaceImportSet = field(default_factory=NamespaceImportSet)
    win32_resource: Optional[Path] = None
    define: Optional[str] = None

    def __post_init__(self) -> None:
        for name in _OPTIONAL_STRING_FIELDS:
            object.__setattr__(self, name, _empty_to_none(getattr(self, name)))
        for name in _OPTIONAL_PATH_FIELDS:
            object.__setattr__(self, name, _to_path(getattr(self, name)))
        object.__setattr__(self, "debug_mode", DebugMode.parse(self.debug_mode))
        if isinstance(self.imports, str):
            imports = NamespaceImportSet.from_string(self.imports)
        else:
            imports = NamespaceImportSet(self.imports)
        # Own a frozen copy so the caller's set can keep changing
        object.__setattr__(self, "imports", imports.frozen())

    @property
    def debug(self) -> bool:
        """True when any debug information is generated."""
        return self.debug_mode is not DebugMode.NONE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CompilerConfiguration":
        """Parse a configuration from a build-file dictionary.

        Keys match the attribute names. The legacy ``debug`` key (a boolean
        or a "true"/"false" string) is used when ``debug_mode`` is not given.
        ``imports`` may be a list or a comma-separated string.

        Raises:
            InvalidConfigurationError: If the debug mode tag is unknown
            ValueError: If an unknown key is present
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known - {"debug"})
        if unknown:
            raise ValueError(f"Unknown compiler option(s): {', '.join(unknown)}")

        kwargs = {key: value for key, value in data.items() if key in known}
        if "debug_mode" not in kwargs and "debug" in data:
            kwargs["debug_mode"] = DebugMode.parse(data["debug"])
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {
            "base_address": self.base_address,
            "debug_mode": self.debug_mode.value,
            "doc_file": str(self.doc_file) if self.doc_file else None,
            "no_stdlib": self.no_stdlib,
            "option_compare": self.option_compare,
            "option_explicit": self.option_explicit,
            "option_strict": self.option_strict,
            "remove_int_checks": self.remove_int_checks,
            "option_optimize": self.option_optimize,
            "platform": self.platform,
            "root_namespace": self.root_namespace,
            "imports": self.imports.to_list(),
            "win32_resource": str(self.win32_resource) if self.win32_resource else None,
            "define": self.define,
        }
