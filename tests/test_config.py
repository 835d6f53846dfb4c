"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from mdlinkcheck.compute_config_hash import compute_config_hash
from mdlinkcheck.config_error import ConfigError
from mdlinkcheck.deep_merge import deep_merge
from mdlinkcheck.load_config import CONFIG_FILENAME, DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    assert deep_merge(base, update) == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    assert deep_merge(base, update) == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    merged = deep_merge({"extensions": [".md"]}, {"extensions": [".mdx"]})
    assert merged == {"extensions": [".mdx"]}


def test_deep_merge_exclude_additive() -> None:
    """Verify that the exclude list is merged additively without repeats."""
    merged = deep_merge({"exclude": ["a/**", "b/**"]}, {"exclude": ["b/**", "c/**"]})
    assert merged["exclude"] == ["a/**", "b/**", "c/**"]


def test_deep_merge_leaves_inputs_untouched() -> None:
    """Verify the defaults survive a merge unchanged."""
    base = {"exclude": [".git/**"], "anchors": {"case_insensitive": True}}
    deep_merge(base, {"exclude": ["drafts/**"], "anchors": {"case_insensitive": False}})
    assert base == {"exclude": [".git/**"], "anchors": {"case_insensitive": True}}


def test_compute_config_hash_stability() -> None:
    """Verify that config hash is stable regardless of key order."""
    config1 = {"b": 2, "a": 1, "nested": {"y": 2, "x": 1}}
    config2 = {"a": 1, "b": 2, "nested": {"x": 1, "y": 2}}
    assert compute_config_hash(config1) == compute_config_hash(config2)
    assert compute_config_hash(config1) != compute_config_hash({"a": 1})


def test_load_config_defaults() -> None:
    """Verify defaults are returned as an independent copy."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    config["exclude"].append("x/**")
    assert "x/**" not in DEFAULT_CONFIG["exclude"]


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "slugger": "simple",
        "exclude": ["drafts/**"],
        "duplicates": {"exact_threshold": 0.95},
    }
    config_file.write_text(yaml.dump(config_data), encoding="utf-8")

    loaded = load_config(str(config_file))
    assert loaded["slugger"] == "simple"
    assert ".git/**" in loaded["exclude"]  # Default
    assert "drafts/**" in loaded["exclude"]  # Added
    assert loaded["duplicates"] == {"exact_threshold": 0.95, "diverged_threshold": 0.75}


def test_load_config_from_root(tmp_path: Path) -> None:
    """Verify the config file in the checked root is picked up."""
    (tmp_path / CONFIG_FILENAME).write_text("jobs: 4\n", encoding="utf-8")
    assert load_config(None, tmp_path)["jobs"] == 4


def test_empty_config_file(tmp_path: Path) -> None:
    """Verify an empty file means defaults."""
    config_file = tmp_path / "empty.yml"
    config_file.write_text("", encoding="utf-8")
    assert load_config(str(config_file)) == DEFAULT_CONFIG


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("slugger: pandoc\n", "slugger"),
        ("ignore_patterns: ['(']\n", "Invalid ignore pattern"),
        ("exclude: docs\n", "exclude"),
        ("jobs: 0\n", "jobs"),
        ("duplicates:\n  exact_threshold: 0.5\n", "cannot exceed"),
        ("duplicates:\n  diverged_threshold: 2\n", "between 0 and 1"),
        ("anchors: yes\n", "anchors"),
        ("- just\n- a list\n", "mapping"),
        ("slugger: [unclosed\n", "Invalid YAML"),
    ],
)
def test_invalid_config(tmp_path: Path, content: str, message: str) -> None:
    """Verify bad values raise ConfigError with a useful message."""
    config_file = tmp_path / "bad.yml"
    config_file.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError, match=message):
        load_config(str(config_file))


def test_missing_explicit_config(tmp_path: Path) -> None:
    """Verify a config path that does not exist is an error."""
    with pytest.raises(ConfigError, match="not found"):
        load_config(str(tmp_path / "nope.yml"))
