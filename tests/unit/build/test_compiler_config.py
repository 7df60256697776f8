"""Tests for CompilerConfiguration."""

from pathlib import Path

import pytest

from vbcbuild.build.compiler_config import CompilerConfiguration
from vbcbuild.build.debug_modes import DebugMode, InvalidConfigurationError
from vbcbuild.build.namespace_imports import NamespaceImportSet
from vbcbuild.build.option_emitter import emit_options


class TestNormalization:
    """Test empty-to-None normalization of optional fields."""

    def test_defaults(self):
        config = CompilerConfiguration()
        assert config.debug_mode is DebugMode.NONE
        assert config.debug is False
        assert config.imports == NamespaceImportSet()
        assert config.doc_file is None

    @pytest.mark.parametrize("name", ["base_address", "option_compare", "platform", "root_namespace", "define"])
    def test_empty_string_becomes_none(self, name):
        config = CompilerConfiguration(**{name: ""})
        assert getattr(config, name) is None

    @pytest.mark.parametrize("name", ["doc_file", "win32_resource"])
    def test_empty_path_becomes_none(self, name):
        config = CompilerConfiguration(**{name: ""})
        assert getattr(config, name) is None

    def test_paths_are_converted(self):
        config = CompilerConfiguration(doc_file="out/App.xml")
        assert config.doc_file == Path("out/App.xml")

    def test_imports_from_list_and_string(self):
        assert CompilerConfiguration(imports=["System", "System"]).imports.to_list() == ["System"]
        assert CompilerConfiguration(imports="System, System.Data").imports.to_list() == ["System", "System.Data"]

    def test_frozen(self):
        config = CompilerConfiguration()
        with pytest.raises(AttributeError):
            config.platform = "x86"  # type: ignore[misc]

    def test_imports_copied_from_caller(self):
        """Adding to the caller's set after construction leaves the config unchanged."""
        imports = NamespaceImportSet(["System"])
        config = CompilerConfiguration(imports=imports)
        imports.add("System.Data")
        assert config.imports.to_list() == ["System"]
        assert emit_options(config).arguments() == ["/imports:System"]

    def test_stored_imports_are_frozen(self):
        config = CompilerConfiguration(imports=["System"])
        with pytest.raises(TypeError):
            config.imports.add("System.Data")

    def test_hashable(self):
        config = CompilerConfiguration(imports=["System"], doc_file="App.xml")
        assert hash(CompilerConfiguration()) == hash(CompilerConfiguration())
        assert hash(config) == hash(CompilerConfiguration(imports="System", doc_file=Path("App.xml")))

    def test_debug_property(self):
        assert CompilerConfiguration(debug_mode=DebugMode.PDB_ONLY).debug is True

    def test_invalid_debug_mode(self):
        with pytest.raises(InvalidConfigurationError):
            CompilerConfiguration(debug_mode="sometimes")  # type: ignore[arg-type]


class TestFromDict:
    """Test parsing configurations from build-file dictionaries."""

    def test_from_dict(self):
        config = CompilerConfiguration.from_dict(
            {
                "debug_mode": "pdbonly",
                "imports": ["System", "System.Data"],
                "option_strict": True,
                "root_namespace": "App",
                "platform": "",
            }
        )
        assert config.debug_mode is DebugMode.PDB_ONLY
        assert config.imports.serialize() == "System,System.Data"
        assert config.option_strict is True
        assert config.root_namespace == "App"
        assert config.platform is None

    def test_legacy_debug_flag(self):
        assert CompilerConfiguration.from_dict({"debug": True}).debug_mode is DebugMode.ENABLE
        assert CompilerConfiguration.from_dict({"debug": False}).debug_mode is DebugMode.NONE

    def test_legacy_debug_flag_as_string(self):
        """Build files carry the flag as text; "false" must not read as truthy."""
        assert CompilerConfiguration.from_dict({"debug": "false"}).debug_mode is DebugMode.NONE
        assert CompilerConfiguration.from_dict({"debug": "True"}).debug_mode is DebugMode.ENABLE

    def test_legacy_debug_flag_invalid(self):
        with pytest.raises(InvalidConfigurationError):
            CompilerConfiguration.from_dict({"debug": "sometimes"})

    def test_debug_mode_wins_over_legacy_flag(self):
        config = CompilerConfiguration.from_dict({"debug": True, "debug_mode": "full"})
        assert config.debug_mode is DebugMode.FULL

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="optioninfer"):
            CompilerConfiguration.from_dict({"optioninfer": True})

    def test_unknown_debug_tag(self):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            CompilerConfiguration.from_dict({"debug_mode": "verbose"})
        assert exc_info.value.value == "verbose"

    def test_to_dict_round_trip(self):
        data = {
            "base_address": "0x400000",
            "debug_mode": "enable",
            "doc_file": "App.xml",
            "imports": ["System"],
            "option_compare": "binary",
            "root_namespace": "App",
        }
        config = CompilerConfiguration.from_dict(data)
        assert CompilerConfiguration.from_dict(config.to_dict()) == config
