"""Tests for the config module."""

from argparse import Namespace

import pytest
import yaml

from iptables_log.config import (
    LOG_LEVELS,
    OUTPUT_FORMATS,
    Config,
    _parse_bool,
    load_config,
    load_yaml_config,
)

ENV_VARS = (
    "IPTABLES_OUTPUT_FORMAT",
    "IPTABLES_STRICT",
    "IPTABLES_LOG_LEVEL",
    "IPTABLES_INCLUDE_RAW",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestParseBool:
    def test_true_values(self):
        for val in ("true", "True", "TRUE", "1", "yes", " true ", True):
            assert _parse_bool(val) is True

    def test_false_values(self):
        for val in ("false", "0", "no", "", "random", False):
            assert _parse_bool(val) is False


class TestConfigDefaults:
    def test_defaults(self):
        cfg = Config()
        assert cfg.output_format == "json"
        assert cfg.strict is False
        assert cfg.log_level == "INFO"
        assert cfg.include_raw is False

    def test_frozen(self):
        cfg = Config()
        with pytest.raises(AttributeError):
            cfg.strict = True

    def test_rejects_unknown_output_format(self):
        with pytest.raises(ValueError):
            Config(output_format="xml")

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValueError):
            Config(log_level="LOUD")

    def test_constants(self):
        assert OUTPUT_FORMATS == ("json", "text")
        assert "WARNING" in LOG_LEVELS


class TestLoadYamlConfig:
    def test_no_path(self):
        assert load_yaml_config(None) == {}

    def test_missing_file(self, tmp_path):
        assert load_yaml_config(str(tmp_path / "missing.yml")) == {}

    def test_reads_mapping(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("output_format: text\nstrict: true\n")
        assert load_yaml_config(str(path)) == {"output_format": "text", "strict": True}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("")
        assert load_yaml_config(str(path)) == {}

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            load_yaml_config(str(path))

    def test_malformed_yaml_rejected(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("output_format: [json\n")
        with pytest.raises(ValueError, match="not valid YAML") as exc_info:
            load_yaml_config(str(path))
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)


class TestLoadConfig:
    def test_defaults(self):
        assert load_config() == Config()

    def test_yaml_values(self):
        cfg = load_config({"output_format": "text", "strict": True, "log_level": "debug"})
        assert cfg.output_format == "text"
        assert cfg.strict is True
        assert cfg.log_level == "DEBUG"

    def test_env_overrides_yaml(self, monkeypatch):
        monkeypatch.setenv("IPTABLES_OUTPUT_FORMAT", "json")
        monkeypatch.setenv("IPTABLES_STRICT", "false")
        monkeypatch.setenv("IPTABLES_INCLUDE_RAW", "yes")
        cfg = load_config({"output_format": "text", "strict": True})
        assert cfg.output_format == "json"
        assert cfg.strict is False
        assert cfg.include_raw is True

    def test_cli_overrides_env(self, monkeypatch):
        monkeypatch.setenv("IPTABLES_OUTPUT_FORMAT", "json")
        monkeypatch.setenv("IPTABLES_LOG_LEVEL", "ERROR")
        args = Namespace(output="text", strict=True, log_level="DEBUG", include_raw=False)
        cfg = load_config({}, args)
        assert cfg.output_format == "text"
        assert cfg.strict is True
        assert cfg.log_level == "DEBUG"

    def test_unset_cli_flags_keep_env(self, monkeypatch):
        monkeypatch.setenv("IPTABLES_LOG_LEVEL", "warning")
        args = Namespace(output=None, strict=False, log_level=None, include_raw=False)
        cfg = load_config({}, args)
        assert cfg.log_level == "WARNING"
        assert cfg.output_format == "json"

    def test_invalid_env_value(self, monkeypatch):
        monkeypatch.setenv("IPTABLES_OUTPUT_FORMAT", "csv")
        with pytest.raises(ValueError):
            load_config()
