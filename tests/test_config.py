"""Tests for configuration loading, merging and labels."""

from pathlib import Path

import pytest
import yaml

from api_docgen.deep_merge import deep_merge
from api_docgen.labels import resolve_labels, yes_no
from api_docgen.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}, "a": 1}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}, "a": 1}
    assert base == {"nested": {"x": 1, "y": 2}, "a": 1}


def test_deep_merge_none_keeps_base() -> None:
    """Verify that empty YAML keys do not wipe defaults."""
    assert deep_merge({"a": 1, "b": [1]}, {"a": None, "b": [2]}) == {"a": 1, "b": [2]}


def test_load_config_defaults(tmp_path: Path) -> None:
    """Verify that defaults are used when the file is absent."""
    assert load_config(None) == DEFAULT_CONFIG
    assert load_config(tmp_path / "missing.yml") == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config overrides defaults."""
    config_file = tmp_path / "doc_gen.yml"
    config_file.write_text(
        yaml.dump({"locale": "en", "labels": {"yes": "Y"}, "log_level": None})
    )
    loaded = load_config(config_file)
    assert loaded["locale"] == "en"
    assert loaded["labels"] == {"yes": "Y"}
    assert loaded["log_level"] == "INFO"
    assert loaded["graphviz_default_style"] == DEFAULT_CONFIG["graphviz_default_style"]


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    """Verify that a YAML list is not accepted as configuration."""
    config_file = tmp_path / "doc_gen.yml"
    config_file.write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="mapping"):
        load_config(config_file)


def test_resolve_labels_overrides() -> None:
    """Verify locale selection and per-label overrides."""
    labels = resolve_labels({"locale": "en", "labels": {"yes": "Y"}})
    assert yes_no(True, labels) == "Y"
    assert yes_no(False, labels) == "No"
    assert resolve_labels({})["yes"] == "是"


def test_resolve_labels_unknown_locale() -> None:
    """Verify that unknown locales are rejected."""
    with pytest.raises(ValueError, match="locale"):
        resolve_labels({"locale": "fr"})
