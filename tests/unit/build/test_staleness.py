"""Tests for the output staleness decision."""

import logging
from unittest.mock import MagicMock

import pytest

from vbcbuild.build.staleness import needs_compiling


class TestNeedsCompiling:
    """Test the documentation-file staleness rule."""

    @pytest.fixture
    def doc_file(self, tmp_path):
        return tmp_path / "App.xml"

    @pytest.mark.parametrize("supported", [True, False])
    @pytest.mark.parametrize("doc_exists", [True, False])
    def test_base_true_short_circuits(self, doc_file, supported, doc_exists):
        if doc_exists:
            doc_file.write_text("<doc/>")
        assert needs_compiling(True, doc_file, supported) is True

    def test_base_true_skips_file_check(self, doc_file):
        file_exists = MagicMock(return_value=False)
        assert needs_compiling(True, doc_file, True, file_exists=file_exists) is True
        file_exists.assert_not_called()

    def test_missing_doc_file_triggers_compile(self, doc_file, caplog):
        with caplog.at_level(logging.INFO, logger="vbcbuild.build.staleness"):
            assert needs_compiling(False, doc_file, True) is True
        assert str(doc_file) in caplog.text

    def test_existing_doc_file_keeps_base_verdict(self, doc_file):
        doc_file.write_text("<doc/>")
        assert needs_compiling(False, doc_file, True) is False

    def test_missing_doc_file_ignored_when_unsupported(self, doc_file):
        assert needs_compiling(False, doc_file, False) is False

    def test_no_doc_file_configured(self):
        assert needs_compiling(False, None, True) is False

    def test_callable_base_is_evaluated_again(self, doc_file):
        doc_file.write_text("<doc/>")
        base = MagicMock(side_effect=[False, True])
        assert needs_compiling(base, doc_file, True) is True
        assert base.call_count == 2

    def test_callable_base_true_called_once(self, doc_file):
        base = MagicMock(return_value=True)
        assert needs_compiling(base, doc_file, True) is True
        assert base.call_count == 1

    def test_custom_existence_check(self, doc_file):
        assert needs_compiling(False, doc_file, True, file_exists=lambda path: True) is False
