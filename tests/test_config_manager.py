"""Test configuration loading and merging."""

import pytest

from depwatch.core.config_manager import ConfigManager
from depwatch.utils.exceptions import ConfigurationError


class TestConfigManager:

    def setup_method(self):
        self.manager = ConfigManager()

    def test_package_default_config(self):
        config = self.manager.load_package_default_config()

        assert config["resolver"]["name"] == "golist"
        assert config["report"]["threshold"] == 2
        assert config["stats"]["endpoint"] == "http://go-search.org/api"
        assert config["forwarding"]["fetch_command"] == ["go", "get"]
        assert config["forwarding"]["ensure_command"] == ["dep", "ensure"]

    def test_deep_merge(self):
        default = {"stats": {"enabled": True, "timeout": 30}, "report": {"threshold": 2}}
        user = {"stats": {"timeout": 5}}

        merged = self.manager.deep_merge(default, user)

        assert merged == {"stats": {"enabled": True, "timeout": 5}, "report": {"threshold": 2}}
        assert default["stats"]["timeout"] == 30

    def test_explicit_config_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("report:\n  threshold: 10\nstats:\n  enabled: false\n")

        config = self.manager.discover_and_load_config(str(path))

        assert config["report"]["threshold"] == 10
        assert config["stats"]["enabled"] is False
        assert config["resolver"]["name"] == "golist"

    def test_missing_explicit_config(self, tmp_path):
        with pytest.raises(ConfigurationError):
            self.manager.discover_and_load_config(str(tmp_path / "missing.yaml"))

    def test_discovers_config_in_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / "depwatch.config.yaml").write_text("forwarding:\n  enabled: false\n")
        monkeypatch.chdir(tmp_path)

        config = self.manager.discover_and_load_config(None)

        assert config["forwarding"]["enabled"] is False
        assert config["forwarding"]["ensure_command"] == ["dep", "ensure"]

    def test_falls_back_to_package_default(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        config = self.manager.discover_and_load_config(None)

        assert config == self.manager.load_package_default_config()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("report: [unclosed\n")

        with pytest.raises(ConfigurationError):
            self.manager.load_config(str(path))

    def test_non_mapping_yaml(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError):
            self.manager.load_config(str(path))

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert self.manager.load_config(str(path)) == {}

    def test_merge_cli_flags(self):
        config = self.manager.load_package_default_config()

        merged = self.manager.merge_config_and_args(config, assume_yes=True, verbose=True)

        assert merged["assume_yes"] is True
        assert merged["verbose"] is True
        assert merged["logging"]["level"] == "DEBUG"

    def test_invalid_threshold(self):
        config = {"report": {"threshold": "three"}}

        with pytest.raises(ConfigurationError):
            self.manager.merge_config_and_args(config)

    @pytest.mark.parametrize("section", ["resolver", "stats", "report", "forwarding", "logging"])
    def test_empty_section_rejected(self, section, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text(f"{section}:\n")
        config = self.manager.discover_and_load_config(str(path))

        with pytest.raises(ConfigurationError) as exc_info:
            self.manager.merge_config_and_args(config, verbose=True)

        assert f"{section} must be a mapping" in str(exc_info.value)

    def test_scalar_section_rejected(self):
        config = self.manager.load_package_default_config()
        config["stats"] = "off"

        with pytest.raises(ConfigurationError):
            self.manager.merge_config_and_args(config)
