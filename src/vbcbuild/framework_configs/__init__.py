"""Target framework descriptor loader.

This module provides access to JSON descriptors for the target frameworks
the VB.NET compiler can build for. Uses importlib.resources for proper
package data access when installed as a wheel.

Descriptors are organized by family:
    net/      - Microsoft .NET Framework (net-1.0, net-2.0, ...)
    netcf/    - Microsoft .NET Compact Framework (netcf-1.0, netcf-2.0)
    mono/     - Mono profiles (mono-2.0)
"""

from __future__ import annotations

import json
from importlib import resources
from typing import TYPE_CHECKING, Any, Iterator

from .framework_config_model import CapabilityDescriptor, TargetFramework

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

__all__ = [
    "CapabilityDescriptor",
    "TargetFramework",
    "FAMILY_DIRS",
    "load_framework",
    "load_target_framework",
    "list_available_frameworks",
]

# Family directories to search
FAMILY_DIRS = ["net", "netcf", "mono"]

DESCRIPTOR_SUFFIX = ".json"


def _descriptor_files() -> Iterator[Traversable]:
    """Yield every packaged descriptor file, family by family."""
    pkg_files = resources.files(__package__)
    for family in FAMILY_DIRS:
        family_dir = pkg_files.joinpath(family)
        if not family_dir.is_dir():
            continue
        for entry in family_dir.iterdir():
            if entry.name.endswith(DESCRIPTOR_SUFFIX) and entry.is_file():
                yield entry


def load_framework(name: str) -> dict[str, Any] | None:
    """Load the descriptor for the specified target framework.

    Searches all family subdirectories for the matching descriptor file.

    Args:
        name: The framework identifier (e.g., 'net-2.0', 'netcf-1.0', 'mono-2.0')

    Returns:
        The descriptor dictionary if found, None otherwise.
    """
    file_name = f"{name}{DESCRIPTOR_SUFFIX}"
    for descriptor in _descriptor_files():
        if descriptor.name == file_name:
            with descriptor.open("r", encoding="utf-8") as f:
                return json.load(f)
    return None


def load_target_framework(name: str) -> TargetFramework | None:
    """Load and parse the descriptor for the specified target framework.

    Returns:
        Parsed TargetFramework, or None if no descriptor exists.

    Raises:
        ValueError: If the descriptor is missing required fields
    """
    data = load_framework(name)
    if data is None:
        return None
    return TargetFramework.from_dict(data)


def list_available_frameworks() -> list[str]:
    """List all available target framework names (without .json extension)."""
    return sorted(descriptor.name[: -len(DESCRIPTOR_SUFFIX)] for descriptor in _descriptor_files())
