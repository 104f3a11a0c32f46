from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Resilience against missing and corrupted config files.
3. Persistence (Save/Load) without touching real user data.
"""

import json

from variantstock.domain.config import get_default_config, load_config, save_config
from variantstock.domain.constants import CURRENT_CONFIG_VERSION


def test_default_config_shape():
    conf = get_default_config()

    assert conf["version"] == CURRENT_CONFIG_VERSION
    assert conf["show_total"] is True
    assert conf["compact"] is False
    assert conf["critical_ratio"] == 0.5


def test_load_missing_file_returns_defaults(tmp_path):
    assert load_config(str(tmp_path / "absent.json")) == get_default_config()


def test_load_corrupted_file_returns_defaults(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text("{ incomplete json ", encoding="utf-8")

    assert load_config(str(config_path)) == get_default_config()


def test_load_undecodable_file_returns_defaults(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_bytes(b'{"compact": "\xff\xfe"}')

    assert load_config(str(config_path)) == get_default_config()


def test_load_non_object_returns_defaults(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text("[1, 2]", encoding="utf-8")

    assert load_config(str(config_path)) == get_default_config()


def test_save_then_load_round_trip(tmp_path):
    config_path = tmp_path / "nested" / "config.json"
    conf = get_default_config()
    conf["compact"] = True

    assert save_config(conf, str(config_path)) is True
    assert json.loads(config_path.read_text(encoding="utf-8"))["compact"] is True
    assert load_config(str(config_path))["compact"] is True


def test_partial_file_is_merged_over_defaults(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text('{"show_total": false}', encoding="utf-8")

    conf = load_config(str(config_path))
    assert conf["show_total"] is False
    assert conf["critical_ratio"] == 0.5
