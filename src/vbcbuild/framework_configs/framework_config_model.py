"""
Type-safe target framework models.

A target framework descriptor tells the option emitter which compiler
options the active toolchain understands, and which family it belongs to
(some families need extra directives, see option_emitter.FAMILY_DIRECTIVES).
"""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class CapabilityDescriptor:
    """Compiler options supported by the active toolchain."""

    supports_doc_generation: bool = False
    supports_no_stdlib: bool = False
    supports_platform: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CapabilityDescriptor":
        return cls(
            supports_doc_generation=bool(data.get("supports_doc_generation", False)),
            supports_no_stdlib=bool(data.get("supports_no_stdlib", False)),
            supports_platform=bool(data.get("supports_platform", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "supports_doc_generation": self.supports_doc_generation,
            "supports_no_stdlib": self.supports_no_stdlib,
            "supports_platform": self.supports_platform,
        }


@dataclass(frozen=True)
class TargetFramework:
    """
    Type-safe target framework descriptor.

    All framework descriptors (net-2.0.json, netcf-1.0.json, etc.) are
    parsed into this structure.

    Attributes:
        name: Framework identifier (e.g., "net-2.0")
        family: Framework family tag (e.g., "net", "netcf", "mono")
        version: Framework version string (e.g., "2.0")
        description: Human-readable description, used in advisory warnings
        framework_assembly_directory: Directory holding the framework assemblies
        capabilities: Compiler options supported for this framework
    """

    name: str
    family: str
    version: str = ""
    description: str = ""
    framework_assembly_directory: str = ""
    capabilities: CapabilityDescriptor = field(default_factory=CapabilityDescriptor)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TargetFramework":
        """
        Parse a framework descriptor from dictionary.

        Capability flags may be given at the top level or nested under
        a "capabilities" key.

        Args:
            data: Raw descriptor dictionary from JSON

        Returns:
            Type-safe TargetFramework instance

        Raises:
            ValueError: If required fields are missing
        """
        try:
            name = data["name"]
            family = data["family"]
        except KeyError as e:
            raise ValueError(f"Missing required field in framework descriptor: {e}")

        capabilities_data = data.get("capabilities", data)

        return cls(
            name=name,
            family=family,
            version=data.get("version", ""),
            description=data.get("description", "") or name,
            framework_assembly_directory=data.get("framework_assembly_directory", ""),
            capabilities=CapabilityDescriptor.from_dict(capabilities_data),
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert back to dictionary format.

        Returns:
            Dictionary representation compatible with JSON serialization
        """
        return {
            "name": self.name,
            "family": self.family,
            "version": self.version,
            "description": self.description,
            "framework_assembly_directory": self.framework_assembly_directory,
            **self.capabilities.to_dict(),
        }
