"""Tests for configuration loading and threshold files."""

import json
import logging
import os
from unittest.mock import patch

import pytest
import yaml

from proposal_analytics.config import (
    DEFAULT_THRESHOLDS,
    AnalyticsThresholds,
    configure_logging,
    load_runtime_thresholds,
    load_thresholds,
    save_thresholds,
    load_config,
    validate_config,
)


class TestConfigValidation:
    """Test startup config validation."""

    def test_defaults_without_environment(self):
        env = {k: v for k, v in os.environ.items()
               if k not in ("LOG_LEVEL", "ANALYTICS_THRESHOLDS_PATH")}
        with patch.dict(os.environ, env, clear=True):
            config = validate_config()
            assert config.log_level == "INFO"
            assert config.analytics_thresholds_path is None

    def test_environment_overrides(self, tmp_path):
        path = tmp_path / "thresholds.yaml"
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG", "ANALYTICS_THRESHOLDS_PATH": str(path)}):
            config = validate_config()
            assert config.log_level == "DEBUG"
            assert config.analytics_thresholds_path == str(path)

    def test_invalid_log_level_raises_error(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "CHATTY"}):
            with pytest.raises(ValueError) as exc_info:
                validate_config()
            assert "log_level" in str(exc_info.value).lower()

    def test_runtime_thresholds_default(self):
        with patch.dict(os.environ, {"ANALYTICS_THRESHOLDS_PATH": ""}):
            assert load_runtime_thresholds(validate_config()) == DEFAULT_THRESHOLDS

    def test_runtime_thresholds_from_file(self, tmp_path):
        path = tmp_path / "thresholds.json"
        path.write_text(json.dumps({"urgent_deadline_days": 7}))
        with patch.dict(os.environ, {"ANALYTICS_THRESHOLDS_PATH": str(path)}):
            thresholds = load_runtime_thresholds(validate_config())
        assert thresholds.urgent_deadline_days == 7
        assert thresholds.section_addressed_min_chars == 100

    def test_configure_logging_sets_level(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "warning"}):
            config = validate_config()
        with patch("logging.basicConfig") as basic_config:
            configure_logging(config)
        assert basic_config.call_args.kwargs["level"] == "WARNING"


class TestThresholds:
    def test_defaults(self):
        assert DEFAULT_THRESHOLDS.section_addressed_min_chars == 100
        assert DEFAULT_THRESHOLDS.keyword_min_length == 4
        assert DEFAULT_THRESHOLDS.urgent_deadline_days == 14
        assert DEFAULT_THRESHOLDS.compliance_good_score == 80

    def test_no_path_returns_defaults(self):
        assert load_thresholds(None) is DEFAULT_THRESHOLDS

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_thresholds(str(tmp_path / "nope.yaml"))

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "thresholds.toml"
        path.write_text("x = 1")
        with pytest.raises(ValueError):
            load_thresholds(str(path))

    def test_yaml_round_trip(self, tmp_path):
        path = tmp_path / "thresholds.yml"
        custom = AnalyticsThresholds(section_addressed_min_chars=250, version="tuned")
        save_thresholds(custom, str(path))
        assert yaml.safe_load(path.read_text())["section_addressed_min_chars"] == 250
        assert load_thresholds(str(path)) == custom

    def test_json_round_trip_with_uppercase_suffix(self, tmp_path):
        path = tmp_path / "THRESHOLDS.JSON"
        custom = AnalyticsThresholds(urgent_deadline_days=21)
        save_thresholds(custom, str(path))
        assert json.loads(path.read_text())["urgent_deadline_days"] == 21
        assert load_thresholds(str(path)) == custom

    def test_unsupported_format_checked_before_existence(self, tmp_path):
        with pytest.raises(ValueError, match="Unsupported thresholds format"):
            load_thresholds(str(tmp_path / "missing.ini"))

    def test_save_unsupported_format(self, tmp_path):
        path = tmp_path / "thresholds.txt"
        with pytest.raises(ValueError):
            save_thresholds(DEFAULT_THRESHOLDS, str(path))
        assert not path.exists()

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "thresholds.yaml"
        path.write_text("")
        assert load_thresholds(str(path)) == DEFAULT_THRESHOLDS

    @pytest.mark.parametrize(
        "overrides",
        [
            {"section_addressed_min_chars": -1},
            {"word_limit_warning_ratio": 0},
            {"word_limit_warning_ratio": 1.5},
            {"compliance_good_score": 120},
            {"compliance_good_score": 40, "compliance_fair_score": 60},
        ],
    )
    def test_invalid_values_rejected(self, overrides):
        with pytest.raises(ValueError):
            AnalyticsThresholds(**overrides)


class TestLogging:
    def test_budget_summary_logged_at_debug(self, caplog, sample_line_items):
        from proposal_analytics import summarize_budget

        with caplog.at_level(logging.DEBUG, logger="proposal_analytics"):
            summarize_budget(sample_line_items)
        assert any("Budget summary: 4 items" in r.getMessage() for r in caplog.records)


def test_load_config_is_startup_entry_point():
    with patch.dict(os.environ, {"LOG_LEVEL": "ERROR"}):
        assert load_config().log_level == "ERROR"
