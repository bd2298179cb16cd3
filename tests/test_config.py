"""
Tests for YAML configuration loading and the command line entry point.
"""

import logging
import textwrap

import pytest
import yaml

from scripts.run_estimator import main
from utils.config_loader import AppConfig, EstimatorConfig, MAX_TREE_DEPTH, SearchConfig, load_config
from utils.logging_setup import setup_logging


def write_config(tmp_path, body):
    path = tmp_path / "config.yaml"
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return str(path)


class TestLoadConfig:

    def test_full_config(self, tmp_path):
        path = write_config(tmp_path, """
            logging_level: DEBUG
            path_count_estimator:
              log_period_ms: 250
              record_events: false
            search:
              tree: uniform
              max_depth: 3
              max_branching: 2
        """)
        cfg = load_config(path)
        assert cfg.logging_level == "DEBUG"
        assert cfg.estimator == EstimatorConfig(log_period_ms=250, record_events=False)
        assert cfg.search.tree == "uniform"
        assert cfg.search.max_depth == 3

    def test_defaults_for_missing_sections(self, tmp_path):
        cfg = load_config(write_config(tmp_path, "logging_level: WARNING\n"))
        assert cfg.estimator.log_period_ms == 0
        assert cfg.estimator.record_events is True
        assert cfg.search.tree == "random"

    def test_empty_file(self, tmp_path):
        cfg = load_config(write_config(tmp_path, ""))
        assert cfg.logging_level == "INFO"

    def test_negative_log_period(self, tmp_path):
        path = write_config(tmp_path, """
            path_count_estimator:
              log_period_ms: -5
        """)
        with pytest.raises(ValueError):
            load_config(path)

    def test_unknown_tree_type(self):
        with pytest.raises(ValueError):
            AppConfig({"search": {"tree": "binary"}})

    def test_depth_bounds(self):
        assert SearchConfig(max_depth=MAX_TREE_DEPTH).max_depth == MAX_TREE_DEPTH
        for depth in (-1, MAX_TREE_DEPTH + 1, 1000):
            with pytest.raises(ValueError):
                SearchConfig(max_depth=depth)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_malformed_yaml(self, tmp_path):
        with pytest.raises(yaml.YAMLError):
            load_config(write_config(tmp_path, "search: [unclosed\n"))


class TestLoggingSetup:

    def test_announces_level_under_module_logger(self, caplog):
        with caplog.at_level(logging.INFO):
            setup_logging("info")
        assert any(
            r.name == "utils.logging_setup" and "INFO" in r.getMessage()
            for r in caplog.records
        )

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            setup_logging("chatty")


class TestCommandLine:

    def test_run_small_tree(self, tmp_path, capsys):
        path = write_config(tmp_path, """
            search:
              tree: uniform
              max_depth: 2
              max_branching: 2
        """)
        assert main(["--config", path]) == 0

        stdout = capsys.readouterr().out.splitlines()
        assert stdout[0] == "[RECORD]: SearchStarted, StateId=0, ActionId=0"
        assert "  [PATH]:  4 / 4 (100%)    Time to finish:  0 seconds" in stdout
        assert stdout[-1].startswith("[RECORD]: SearchFinished")

    def test_no_record_flag(self, tmp_path, capsys):
        path = write_config(tmp_path, """
            search:
              max_depth: 4
              max_branching: 3
        """)
        assert main(["--config", path, "--no-record", "--seed", "3", "--log-period", "0"]) == 0

        stdout = capsys.readouterr().out.splitlines()
        assert stdout
        assert all(line.startswith("  [PATH]:") for line in stdout)
