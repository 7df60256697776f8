"""Tests for debug mode directives."""

import pytest

from vbcbuild.build.debug_modes import (
    DEBUG_DIRECTIVES,
    DebugMode,
    InvalidConfigurationError,
    get_debug_directives,
)
from vbcbuild.build.directives import Directive


class TestDebugDirectives:
    """Test the debug mode to directive mapping."""

    def test_none(self):
        assert get_debug_directives(DebugMode.NONE) == ()

    def test_enable(self):
        assert get_debug_directives(DebugMode.ENABLE) == (
            Directive("debug"),
            Directive("define", "DEBUG=True"),
            Directive("define", "TRACE=True"),
        )

    def test_full(self):
        assert get_debug_directives(DebugMode.FULL) == (Directive("debug"),)

    def test_pdbonly(self):
        assert get_debug_directives(DebugMode.PDB_ONLY) == (Directive("debug", "pdbonly"),)

    def test_every_mode_has_an_entry(self):
        assert set(DEBUG_DIRECTIVES) == set(DebugMode)

    @pytest.mark.parametrize("value", ["enable", None, 3])
    def test_non_member_fails(self, value):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            get_debug_directives(value)  # type: ignore[arg-type]
        assert exc_info.value.value == value


class TestDebugModeParse:
    """Test parsing debug modes from build-file values."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (DebugMode.FULL, DebugMode.FULL),
            ("none", DebugMode.NONE),
            ("Enable", DebugMode.ENABLE),
            ("FULL", DebugMode.FULL),
            ("PdbOnly", DebugMode.PDB_ONLY),
            ("true", DebugMode.ENABLE),
            ("false", DebugMode.NONE),
            ("", DebugMode.NONE),
            (True, DebugMode.ENABLE),
            (False, DebugMode.NONE),
            (None, DebugMode.NONE),
        ],
    )
    def test_parse(self, value, expected):
        assert DebugMode.parse(value) is expected

    @pytest.mark.parametrize("value", ["verbose", "pdb", 1])
    def test_unknown_tag_fails(self, value):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            DebugMode.parse(value)  # type: ignore[arg-type]
        assert exc_info.value.value == value
        assert repr(value) in str(exc_info.value)

    def test_invalid_configuration_is_value_error(self):
        assert issubclass(InvalidConfigurationError, ValueError)

    def test_str(self):
        assert str(DebugMode.PDB_ONLY) == "pdbonly"
