"""Tests for scenario configuration and logging setup."""

import logging

import pytest
from eqpricer.config import (
    DEFAULT_CONFIG, build_config, deep_merge, load_yaml_config, schedule_from_config,
)
from eqpricer.logging_config import coerce_level, setup_logging


class TestConfig:
    def test_defaults(self):
        config = build_config()
        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG

    def test_yaml_partial_override(self, tmp_path):
        path = tmp_path / "scenario.yaml"
        path.write_text("option:\n  spot: 120.0\nbinomial:\n  steps: 800\n")
        config = build_config(path)
        assert config["option"]["spot"] == 120.0
        assert config["option"]["strike"] == 105.0
        assert config["binomial"]["steps"] == 800

    def test_overrides_win(self, tmp_path):
        path = tmp_path / "scenario.yaml"
        path.write_text("dividend_yield: 0.01\n")
        config = build_config(path, {"dividend_yield": 0.02})
        assert config["dividend_yield"] == 0.02

    def test_deep_merge_does_not_mutate(self):
        base = {"a": {"b": 1, "c": 2}}
        merged = deep_merge(base, {"a": {"b": 5}})
        assert merged == {"a": {"b": 5, "c": 2}}
        assert base == {"a": {"b": 1, "c": 2}}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_yaml_config(tmp_path / "nope.yaml")

    def test_non_mapping_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="mapping"):
            load_yaml_config(path)

    def test_empty_yaml_keeps_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert build_config(path) == DEFAULT_CONFIG

    def test_nested_lists_are_copied(self):
        config = build_config()
        config["discrete_dividends"].append({"ex_date": 0.9, "amount": 1.0})
        assert len(DEFAULT_CONFIG["discrete_dividends"]) == 1

    def test_schedule_from_config(self):
        divs = schedule_from_config([{"ex_date": 0.5, "amount": 2.0},
                                     {"ex_date": 0.25, "amount": 1.0}])
        assert divs.dividends == ((0.25, 1.0), (0.5, 2.0))

    def test_schedule_from_config_bad_entry(self):
        with pytest.raises(ValueError, match="ex_date"):
            schedule_from_config([{"amount": 2.0}])


class TestLogging:
    @pytest.mark.parametrize("level, expected", [
        (logging.DEBUG, logging.DEBUG), ("info", logging.INFO),
        ("WARN", logging.WARNING), ("30", 30),
    ])
    def test_coerce_level(self, level, expected):
        assert coerce_level(level) == expected

    @pytest.mark.parametrize("level", ["", "LOUD"])
    def test_coerce_level_invalid(self, level):
        with pytest.raises(ValueError):
            coerce_level(level)

    def test_setup_logging_writes_file(self, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        setup_logging("DEBUG", log_file=log_file)
        logging.getLogger("eqpricer.test").debug("hello lattice")
        for h in logging.getLogger().handlers:
            h.flush()
        assert "hello lattice" in log_file.read_text()
        assert logging.getLogger().level == logging.DEBUG
