"""Tests for configuration loading."""

import pytest

from teamgraph.core.config_manager import ConfigurationManager, validate_config
from teamgraph.core.exceptions import ConfigurationError


def write_config(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestConfigurationManager:
    """Tests for ConfigurationManager."""

    def test_defaults(self):
        config = ConfigurationManager(load_env_file=False)

        assert config.input.name_column == "PLAYER"
        assert config.input.group_column == "TEAM_pie"
        assert config.graph_construction.duplicate_policy == "merge"
        assert config.centrality.scale_by_reachable is False
        assert config.output.format == "text"

    def test_yaml_values(self, tmp_path):
        path = write_config(tmp_path, "input:\n  name_column: name\ncentrality:\n  scale_by_reachable: true\n")

        config = ConfigurationManager(path, load_env_file=False)

        assert config.input.name_column == "name"
        assert config.input.group_column == "TEAM_pie"
        assert config.centrality.scale_by_reachable is True

    def test_empty_yaml_uses_defaults(self, tmp_path):
        config = ConfigurationManager(write_config(tmp_path, ""), load_env_file=False)

        assert config.output.precision == 6

    def test_environment_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TEAMGRAPH_DUPLICATE_POLICY", "first")
        monkeypatch.setenv("TEAMGRAPH_TOP_K", "5")
        monkeypatch.setenv("TEAMGRAPH_SCALE_BY_REACHABLE", "yes")

        config = ConfigurationManager(write_config(tmp_path, ""), load_env_file=False)

        assert config.graph_construction.duplicate_policy == "first"
        assert config.output.top_k == 5
        assert config.centrality.scale_by_reachable is True
        assert "TEAMGRAPH_TOP_K" in config.environment_vars

    def test_invalid_environment_integer(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TEAMGRAPH_PRECISION", "many")

        with pytest.raises(ConfigurationError):
            ConfigurationManager(write_config(tmp_path, ""), load_env_file=False)

    def test_invalid_environment_policy(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TEAMGRAPH_DUPLICATE_POLICY", "last")

        with pytest.raises(ConfigurationError):
            ConfigurationManager(write_config(tmp_path, ""), load_env_file=False)

    def test_unknown_key_rejected(self, tmp_path):
        path = write_config(tmp_path, "input:\n  column: PLAYER\n")

        with pytest.raises(ConfigurationError):
            ConfigurationManager(path, load_env_file=False)

    def test_invalid_yaml(self, tmp_path):
        path = write_config(tmp_path, "input: [unclosed\n")

        with pytest.raises(ConfigurationError):
            ConfigurationManager(path, load_env_file=False)

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            ConfigurationManager(tmp_path / "nope.yaml", load_env_file=False)

    def test_dot_access(self):
        config = ConfigurationManager(load_env_file=False)

        assert config.get("input.group_column") == "TEAM_pie"
        assert config.get("input.unknown", "fallback") == "fallback"
        assert config.get("nosection.key") is None

    def test_to_dict_round_trips_through_schema(self):
        config = ConfigurationManager(load_env_file=False)

        assert set(config.to_dict()) == {"input", "graph_construction", "centrality", "output", "system"}
        config.validate_config_with_schema()

    def test_integral_float_output_values(self, tmp_path):
        path = write_config(tmp_path, "output:\n  top_k: 2.0\n  precision: 3.0\n")

        config = ConfigurationManager(path, load_env_file=False)

        assert config.output.top_k == 2
        assert isinstance(config.output.top_k, int)
        assert config.output.precision == 3
        assert isinstance(config.output.precision, int)

    def test_unknown_encoding_in_yaml(self, tmp_path):
        path = write_config(tmp_path, "input:\n  encoding: bogus-enc\n")

        with pytest.raises(ConfigurationError) as excinfo:
            ConfigurationManager(path, load_env_file=False)

        assert "bogus-enc" in str(excinfo.value)

    def test_unknown_encoding_in_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TEAMGRAPH_INPUT_ENCODING", "bogus-enc")

        with pytest.raises(ConfigurationError):
            ConfigurationManager(write_config(tmp_path, ""), load_env_file=False)

    def test_validate_config_report(self, tmp_path):
        good = validate_config(write_config(tmp_path, "output:\n  format: json\n"))
        bad = validate_config(write_config(tmp_path, "output:\n  format: xml\n"))

        assert good["status"] == "valid"
        assert good["config"]["output"]["format"] == "json"
        assert bad["status"] == "invalid"
        assert bad["errors"]
