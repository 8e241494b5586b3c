"""Tests for configuration loading."""

import os
import tempfile
from pathlib import Path

import pytest

from taskpaper.config import load_config


def test_load_config_defaults():
    """Test loading config with defaults when no file exists."""
    with tempfile.TemporaryDirectory() as tmpdir:
        orig_cwd = os.getcwd()
        try:
            os.chdir(tmpdir)
            config = load_config()
        finally:
            os.chdir(orig_cwd)

    assert config.parse.normalize is False
    assert config.output.format == "outline"
    assert config.output.indent == 2
    assert config.path is None


def test_load_config_from_file():
    """Test loading config from a file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "taskpaper.toml"
        config_path.write_text("""
[parse]
normalize = true

[output]
format = "json"
indent = 4
""")

        config = load_config(config_path=config_path)

        assert config.parse.normalize is True
        assert config.output.format == "json"
        assert config.output.indent == 4
        assert config.path == config_path


def test_load_config_search_cwd():
    """Test config search in current working directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        orig_cwd = os.getcwd()
        try:
            os.chdir(tmpdir)
            Path(tmpdir, "taskpaper.toml").write_text("""
[output]
format = "yaml"
""")

            config = load_config()
            assert config.output.format == "yaml"
        finally:
            os.chdir(orig_cwd)


def test_load_config_search_document_dir():
    """Test config search next to the document."""
    with tempfile.TemporaryDirectory() as tmpdir, tempfile.TemporaryDirectory() as elsewhere:
        docs = Path(tmpdir) / "docs"
        docs.mkdir()
        (docs / "taskpaper.toml").write_text("""
[parse]
normalize = true
""")

        orig_cwd = os.getcwd()
        try:
            os.chdir(elsewhere)
            config = load_config(document_path=docs / "todo.taskpaper")
        finally:
            os.chdir(orig_cwd)

        assert config.parse.normalize is True


def test_load_config_missing_explicit_path():
    """Test that an explicit config path must exist."""
    with pytest.raises(FileNotFoundError):
        load_config(config_path=Path("/nonexistent/taskpaper.toml"))


def test_load_config_unknown_format():
    """Test that an unknown output format is rejected."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "taskpaper.toml"
        config_path.write_text('[output]\nformat = "xml"\n')

        with pytest.raises(ValueError):
            load_config(config_path=config_path)
