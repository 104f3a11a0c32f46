from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates cross-platform data directory resolution and the JSON helpers.
"""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from variantstock.infra.fs import get_user_data_dir, read_json_file, write_json_file

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_get_user_data_dir_windows() -> None:
    """Resolve %LOCALAPPDATA% on Windows systems."""
    mock_appdata = "C:/Users/Test/AppData/Local"
    with patch("os.name", "nt"):
        with patch.dict(os.environ, {"LOCALAPPDATA": mock_appdata}):
            path = get_user_data_dir()
            assert "VariantStock" in path


def test_get_user_data_dir_unix() -> None:
    """Resolve ~/.variantstock on Unix-like systems."""
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value="/home/testuser"):
            path = get_user_data_dir().replace("\\", "/")
            assert path.endswith("/home/testuser/.variantstock")


def test_get_user_data_dir_does_not_create(tmp_path: Path) -> None:
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value=str(tmp_path)):
            path = get_user_data_dir()
    assert not os.path.exists(path)

# -----------------------------------------------------------------------------
# JSON I/O TESTS
# -----------------------------------------------------------------------------

def test_write_creates_parents_and_keeps_unicode(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "stock.json"
    write_json_file(str(target), {"path": "Size: L → Color / Red"})

    text = target.read_text(encoding="utf-8")
    assert "→" in text
    assert read_json_file(str(target)) == {"path": "Size: L → Color / Red"}


def test_read_invalid_json_raises(tmp_path: Path) -> None:
    target = tmp_path / "broken.json"
    target.write_text("{", encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        read_json_file(str(target))


def test_read_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_json_file(str(tmp_path / "absent.json"))
