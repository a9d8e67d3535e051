"""Tests for goverreport.yml loading (config.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from goverreport.config import Configuration, load_config, parse_configuration
from goverreport.errors import ConfigError


def _write_config(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "goverreport.yml"
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_full_configuration(self, tmp_path: Path) -> None:
        path = _write_config(
            tmp_path,
            "root: github.com/mcubik/goverreport\n"
            "exclusions: [test, vendor]\n"
            "threshold: 80\n"
            "thresholdType: stmt\n",
        )
        assert load_config(path) == Configuration(
            root="github.com/mcubik/goverreport",
            exclusions=("test", "vendor"),
            threshold=80.0,
            metric="stmt",
        )

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_config(_write_config(tmp_path, "")) == Configuration()

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "xxxxxx.yml")
        assert config == Configuration()
        assert config.metric == "block"
        assert config.threshold == 0

    def test_null_fields_use_defaults(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path, "root:\nexclusions:\nthreshold:\nthresholdType:\n")
        assert load_config(path) == Configuration()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(_write_config(tmp_path, "exclusions: [vendor\n"))

    def test_unreadable_path(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Failed to read"):
            load_config(tmp_path)


class TestParseConfiguration:
    def test_non_mapping_document(self) -> None:
        with pytest.raises(ConfigError):
            parse_configuration(["root"])

    def test_unknown_keys(self) -> None:
        with pytest.raises(ConfigError, match="metric"):
            parse_configuration({"metric": "stmt"})

    def test_exclusions_must_be_strings(self) -> None:
        with pytest.raises(ConfigError, match="exclusions"):
            parse_configuration({"exclusions": "vendor"})
        with pytest.raises(ConfigError, match="exclusions"):
            parse_configuration({"exclusions": ["vendor", 3]})

    def test_threshold_must_be_number(self) -> None:
        with pytest.raises(ConfigError, match="threshold"):
            parse_configuration({"threshold": "80"})
        with pytest.raises(ConfigError, match="threshold"):
            parse_configuration({"threshold": True})

    def test_root_must_be_string(self) -> None:
        with pytest.raises(ConfigError, match="root"):
            parse_configuration({"root": 1})

    def test_threshold_type_is_kept_unchecked(self) -> None:
        assert parse_configuration({"thresholdType": "line"}).metric == "line"

    def test_threshold_type_must_be_string(self) -> None:
        with pytest.raises(ConfigError, match="thresholdType"):
            parse_configuration({"thresholdType": 3})

    def test_empty_exclusion_pattern(self) -> None:
        with pytest.raises(ConfigError):
            parse_configuration({"exclusions": [""]})

    def test_malformed_exclusion_pattern(self) -> None:
        with pytest.raises(ConfigError, match="exclusion pattern"):
            parse_configuration({"exclusions": ["[z-a]*"]})

    def test_float_threshold(self) -> None:
        assert parse_configuration({"threshold": 79.5}).threshold == 79.5
