"""VB.NET compiler option emission.

Turns a CompilerConfiguration into the ordered directive stream passed to
vbc. Options the active toolchain does not support are never fatal: the
directive is omitted and an advisory warning is recorded instead.

Emission order (fixed, downstream consumers may snapshot it):
    1.  /baseaddress
    2.  /doc              (needs supports_doc_generation)
    3.  /nostdlib         (needs supports_no_stdlib)
    4.  /platform         (needs supports_platform)
    5.  /win32resource
    6.  debug block       (see debug_modes)
    7.  /imports
    8.  /optioncompare    (skipped when "false")
    9.  /optionexplicit
    10. /optionstrict
    11. /removeintchecks
    12. /optimize
    13. /rootnamespace
    14. framework family directives (see FAMILY_DIRECTIVES)
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from ..framework_configs import CapabilityDescriptor, TargetFramework
from .compiler_config import CompilerConfiguration
from .debug_modes import get_debug_directives
from .directives import Directive

logger = logging.getLogger(__name__)

DEFAULT_FRAMEWORK_DESCRIPTION = "the current target framework"


@dataclass(frozen=True)
class UnsupportedOption:
    """Advisory warning for an option the active toolchain does not support.

    Attributes:
        option: Compiler option name (e.g. "doc")
        framework_description: Description of the active target framework
    """

    option: str
    framework_description: str

    @property
    def message(self) -> str:
        if self.option == "doc":
            return f"The compiler for {self.framework_description} does not support generation of XML documentation file."
        return f"The compiler for {self.framework_description} does not support the /{self.option} option."

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class EmitResult:
    """Directive stream plus the advisory warnings raised while emitting it."""

    directives: Tuple[Directive, ...] = ()
    warnings: Tuple[UnsupportedOption, ...] = ()

    def arguments(self) -> List[str]:
        return [directive.to_argument() for directive in self.directives]

    def __add__(self, other: "EmitResult") -> "EmitResult":
        return EmitResult(self.directives + other.directives, self.warnings + other.warnings)


@dataclass
class _Emitter:
    """Accumulates directives and warnings in emission order."""

    framework_description: str
    directives: List[Directive] = field(default_factory=list)
    warnings: List[UnsupportedOption] = field(default_factory=list)

    def option(self, name: str, value: Optional[str] = None) -> None:
        self.directives.append(Directive(name, value))

    def gated(self, supported: bool, name: str, value: Optional[str] = None) -> None:
        if supported:
            self.option(name, value)
            return
        warning = UnsupportedOption(name, self.framework_description)
        logger.warning(warning.message)
        self.warnings.append(warning)

    def result(self) -> EmitResult:
        return EmitResult(tuple(self.directives), tuple(self.warnings))


def _compact_framework_directives(framework: TargetFramework) -> Tuple[Directive, ...]:
    return (
        Directive("netcf"),
        Directive("sdkpath", framework.framework_assembly_directory),
    )


# Extra directives keyed by target framework family
FAMILY_DIRECTIVES: Dict[str, Callable[[TargetFramework], Tuple[Directive, ...]]] = {
    "netcf": _compact_framework_directives,
}


def get_family_directives(framework: Optional[TargetFramework]) -> Tuple[Directive, ...]:
    """Get the extra directives required by a target framework family.

    Returns:
        Directives for the family, or an empty tuple for families without any
    """
    if framework is None:
        return ()
    factory = FAMILY_DIRECTIVES.get(framework.family)
    if factory is None:
        return ()
    return factory(framework)


def emit_options(
    config: CompilerConfiguration,
    capabilities: Optional[CapabilityDescriptor] = None,
    framework: Optional[TargetFramework] = None,
) -> EmitResult:
    """Emit the compiler options for a configuration.

    Args:
        config: Resolved compiler configuration
        capabilities: Options supported by the active toolchain; defaults to
            the framework's capabilities, or no capabilities without a framework
        framework: Active target framework, used for warning text and
            family-specific directives

    Returns:
        EmitResult with directives in the fixed emission order and any
        advisory warnings

    Raises:
        InvalidConfigurationError: If the debug mode is not a known mode
    """
    if capabilities is None:
        capabilities = framework.capabilities if framework else CapabilityDescriptor()
    description = framework.description if framework else DEFAULT_FRAMEWORK_DESCRIPTION
    out = _Emitter(framework_description=description)

    if config.base_address is not None:
        out.option("baseaddress", config.base_address)

    if config.doc_file is not None:
        out.gated(capabilities.supports_doc_generation, "doc", os.path.abspath(config.doc_file))

    if config.no_stdlib:
        out.gated(capabilities.supports_no_stdlib, "nostdlib")

    if config.platform is not None:
        out.gated(capabilities.supports_platform, "platform", config.platform)

    if config.win32_resource is not None:
        out.option("win32resource", os.path.abspath(config.win32_resource))

    out.directives.extend(get_debug_directives(config.debug_mode))

    imports = config.imports.serialize()
    if imports:
        out.option("imports", imports)

    if config.option_compare is not None and config.option_compare.upper() != "FALSE":
        out.option("optioncompare", config.option_compare)

    if config.option_explicit:
        out.option("optionexplicit")

    if config.option_strict:
        out.option("optionstrict")

    if config.remove_int_checks:
        out.option("removeintchecks")

    if config.option_optimize:
        out.option("optimize")

    if config.root_namespace is not None:
        out.option("rootnamespace", config.root_namespace)

    out.directives.extend(get_family_directives(framework))

    return out.result()


def write_conditional_constants(define: Optional[str]) -> Tuple[Directive, ...]:
    """Emit one /define directive per comma-separated constant.

    Entries are passed through verbatim: surrounding whitespace is kept and
    empty entries still produce an empty /define: directive.

    Args:
        define: e.g. "DEBUG=True,MY_FEATURE"; None emits nothing

    Returns:
        Define directives in listed order
    """
    if not define:
        return ()
    return tuple(Directive("define", constant) for constant in define.split(","))


def emit_compiler_directives(
    config: CompilerConfiguration,
    capabilities: Optional[CapabilityDescriptor] = None,
    framework: Optional[TargetFramework] = None,
) -> EmitResult:
    """Emit conditional compilation constants followed by the compiler options."""
    defines = EmitResult(directives=write_conditional_constants(config.define))
    return defines + emit_options(config, capabilities, framework)
