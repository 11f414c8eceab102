"""Tests for settings file parsing and persistence."""
from unittest.mock import patch

import pytest

from confpatterns.infrastructure.persistence import (
    PersistenceError,
    SettingsFileError,
    SettingsFileManager,
    parse_settings,
    render_settings,
)


class TestParseSettings:
    """Test token pairing."""

    def test_empty_text(self):
        """Test that empty input yields nothing."""
        assert list(parse_settings("")) == []
        assert list(parse_settings("   \n\t ")) == []

    def test_single_token_dropped(self):
        """Test that a lone token yields nothing."""
        assert list(parse_settings("orphan")) == []

    def test_odd_token_count(self):
        """Test that the last unpaired token is dropped."""
        assert list(parse_settings("a 1 b 2 c")) == [("a", "1"), ("b", "2")]

    def test_pairs_keep_file_order(self):
        """Test that duplicates are yielded in order."""
        assert list(parse_settings("k 1\nk 2")) == [("k", "1"), ("k", "2")]


class TestRenderSettings:
    """Test output formatting."""

    def test_sorted_lines(self):
        """Test that lines are sorted by key and newline-terminated."""
        assert render_settings({"b": "2", "a": "1"}) == "a 1\nb 2\n"

    def test_empty_mapping(self):
        """Test that an empty mapping renders to nothing."""
        assert render_settings({}) == ""

    def test_ordering_is_lexicographic(self):
        """Test code-point ordering rather than natural ordering."""
        assert render_settings({"k10": "x", "k9": "y", "K": "z"}) == "K z\nk10 x\nk9 y\n"


class TestSettingsFileManager:
    """Test file reads and writes."""

    def test_write_then_read(self, tmp_path):
        """Test a write followed by a read."""
        manager = SettingsFileManager()
        path = tmp_path / "s.txt"

        manager.write_settings(str(path), {"b": "2", "a": "1"})

        assert manager.read_settings(str(path)) == {"a": "1", "b": "2"}

    def test_read_missing_file(self, tmp_path):
        """Test the error raised for a missing file."""
        path = tmp_path / "missing.txt"

        with pytest.raises(SettingsFileError) as exc_info:
            SettingsFileManager().read_settings(str(path))

        error = exc_info.value
        assert isinstance(error, PersistenceError)
        assert isinstance(error, OSError)
        assert isinstance(error.__cause__, FileNotFoundError)
        assert error.operation == "read"
        assert str(path) in str(error)

    def test_file_closed_when_read_fails(self, tmp_path):
        """Test that the handle is released if reading raises."""
        path = tmp_path / "s.txt"
        path.write_text("a 1\n", encoding="utf-8")
        opened = []
        real_open = open

        def tracking_open(*args, **kwargs):
            handle = real_open(*args, **kwargs)
            opened.append(handle)

            def failing_read(*_args):
                raise OSError("device error")

            handle.read = failing_read
            return handle

        with patch("builtins.open", side_effect=tracking_open):
            with pytest.raises(SettingsFileError):
                SettingsFileManager().read_settings(str(path))

        assert len(opened) == 1
        assert opened[0].closed

    def test_custom_encoding(self, tmp_path):
        """Test that the configured encoding is used both ways."""
        manager = SettingsFileManager(encoding="utf-16")
        path = tmp_path / "s.txt"

        manager.write_settings(str(path), {"name": "café"})

        assert path.read_bytes().startswith(b"\xff\xfe") or path.read_bytes().startswith(b"\xfe\xff")
        assert manager.read_settings(str(path)) == {"name": "café"}

    def test_atomic_write_replaces_content(self, tmp_path):
        """Test atomic writes over an existing file."""
        path = tmp_path / "s.txt"
        path.write_text("old 0\n", encoding="utf-8")

        SettingsFileManager(atomic_write=True).write_settings(str(path), {"new": "1"})

        assert path.read_text(encoding="utf-8") == "new 1\n"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["s.txt"]

    def test_atomic_write_missing_directory(self, tmp_path):
        """Test that atomic writes report missing directories as write errors."""
        path = tmp_path / "missing" / "s.txt"

        with pytest.raises(SettingsFileError) as exc_info:
            SettingsFileManager(atomic_write=True).write_settings(str(path), {"a": "1"})

        assert exc_info.value.operation == "write"

    def test_undecodable_bytes_load(self, tmp_path):
        """Test that bytes outside the encoding still load as a pair."""
        path = tmp_path / "s.txt"
        path.write_bytes(b"name caf\xe9\n")

        settings = SettingsFileManager().read_settings(str(path))

        assert list(settings) == ["name"]
        assert settings["name"].startswith("caf")

    def test_undecodable_bytes_written_back_unchanged(self, tmp_path):
        """Test that foreign bytes survive a read followed by a write."""
        source = tmp_path / "in.txt"
        target = tmp_path / "out.txt"
        source.write_bytes(b"name caf\xe9\n")
        manager = SettingsFileManager()

        manager.write_settings(str(target), manager.read_settings(str(source)))

        assert target.read_bytes() == b"name caf\xe9\n"

    def test_decode_failure_names_operation(self, tmp_path):
        """Test that decode errors are reported as read failures."""
        path = tmp_path / "s.txt"
        path.write_text("a 1\n", encoding="utf-8")

        with patch("builtins.open", side_effect=UnicodeDecodeError("utf-8", b"\xe9", 0, 1, "bad")):
            with pytest.raises(SettingsFileError) as exc_info:
                SettingsFileManager().read_settings(str(path))

        assert exc_info.value.operation == "read"
        assert str(exc_info.value).startswith(f"Could not read settings file '{path}'")

    def test_unencodable_value_raises_write_error(self, tmp_path):
        """Test that text the encoding cannot represent is a write error."""
        path = tmp_path / "s.txt"

        with pytest.raises(SettingsFileError) as exc_info:
            SettingsFileManager(encoding="ascii").write_settings(str(path), {"name": "été"})

        assert exc_info.value.operation == "write"
        assert "Could not write settings file" in str(exc_info.value)
