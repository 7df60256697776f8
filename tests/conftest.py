"""Pytest configuration and shared fixtures for vbcbuild tests."""

import logging
import sys

import pytest

from vbcbuild.framework_configs import CapabilityDescriptor, TargetFramework


@pytest.fixture(autouse=True)
def _restore_output_state():
    """Reset the output module and package logger after each test.

    The CLI points the output module at sys.stderr, which pytest swaps out
    per test; a stale reference would be closed by the next test.
    """
    yield
    from vbcbuild import output

    output._output_stream = sys.stdout
    output.set_verbose(False)

    package_logger = logging.getLogger("vbcbuild")
    package_logger.setLevel(logging.NOTSET)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)


@pytest.fixture
def all_capabilities():
    """Capabilities of a toolchain supporting every gated option."""
    return CapabilityDescriptor(
        supports_doc_generation=True,
        supports_no_stdlib=True,
        supports_platform=True,
    )


@pytest.fixture
def no_capabilities():
    """Capabilities of a toolchain supporting no gated option."""
    return CapabilityDescriptor()


@pytest.fixture
def net11():
    """A .NET 1.1 style framework without any gated option."""
    return TargetFramework(
        name="net-1.1",
        family="net",
        version="1.1",
        description="Microsoft .NET Framework 1.1",
        framework_assembly_directory="C:\\WINDOWS\\Microsoft.NET\\Framework\\v1.1.4322",
        capabilities=CapabilityDescriptor(),
    )


@pytest.fixture
def netcf():
    """A compact framework descriptor."""
    return TargetFramework(
        name="netcf-2.0",
        family="netcf",
        version="2.0",
        description="Microsoft .NET Compact Framework 2.0",
        framework_assembly_directory="/sdk/netcf/2.0",
        capabilities=CapabilityDescriptor(supports_doc_generation=True),
    )
