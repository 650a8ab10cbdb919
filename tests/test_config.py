"""Tests for configuration loading."""

import pytest

from colalign.config import Config
from colalign.exceptions import ConfigError, InvalidSpecError


class TestFromYaml:
    """Tests for Config.from_yaml."""

    def test_full_config(self, tmp_path):
        """Test a config file setting every option."""
        path = tmp_path / "config.yaml"
        path.write_text('spec: "<><"\nseparator: " | "\nuntil: 3\nwidth_table: terminal\n', encoding="utf-8")

        config = Config.from_yaml(path)

        assert config == Config(spec="<><", separator=" | ", until=3, width_table="terminal")

    def test_partial_config_keeps_defaults(self, tmp_path):
        """Test that unset options keep their defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("spec: '>'\n", encoding="utf-8")

        config = Config.from_yaml(path)

        assert config.spec == ">"
        assert config.separator == " "
        assert config.until is None
        assert config.width_table == "unicode"

    def test_empty_file(self, tmp_path):
        """Test an empty config file."""
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert Config.from_yaml(path) == Config()

    def test_missing_file(self, tmp_path):
        """Test a missing config file."""
        with pytest.raises(FileNotFoundError):
            Config.from_yaml(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, tmp_path):
        """Test a config file that is not a mapping."""
        path = tmp_path / "config.yaml"
        path.write_text("- spec\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            Config.from_yaml(path)

    def test_unknown_key(self, tmp_path):
        """Test an unknown config key."""
        path = tmp_path / "config.yaml"
        path.write_text("spec: '<'\ncolour: red\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="colour"):
            Config.from_yaml(path)

    def test_invalid_utf8(self, tmp_path):
        """Test a config file with invalid UTF-8."""
        path = tmp_path / "config.yaml"
        path.write_bytes(b"spec: '\xff'\n")
        with pytest.raises(ConfigError, match="Cannot read"):
            Config.from_yaml(path)

    def test_directory(self, tmp_path):
        """Test that a directory is reported as unreadable."""
        with pytest.raises(ConfigError, match="Cannot read"):
            Config.from_yaml(tmp_path)

    def test_invalid_yaml(self, tmp_path):
        """Test a config file that is not valid YAML."""
        path = tmp_path / "config.yaml"
        path.write_text("spec: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Cannot parse"):
            Config.from_yaml(path)

    @pytest.mark.parametrize("body", ["until: -1\n", "until: two\n", "until: true\n", "separator: 1\n"])
    def test_invalid_values(self, tmp_path, body):
        """Test config values with the wrong type or range."""
        path = tmp_path / "config.yaml"
        path.write_text(body, encoding="utf-8")
        with pytest.raises(ConfigError):
            Config.from_yaml(path)

    def test_unknown_width_table(self, tmp_path):
        """Test an unknown width table."""
        path = tmp_path / "config.yaml"
        path.write_text("width_table: ascii\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Unknown width table"):
            Config.from_yaml(path)

    def test_invalid_spec(self, tmp_path):
        """Test an invalid specifier."""
        path = tmp_path / "config.yaml"
        path.write_text("spec: '<x'\n", encoding="utf-8")
        with pytest.raises(InvalidSpecError):
            Config.from_yaml(path)


class TestLoad:
    """Tests for config file discovery."""

    def test_defaults_when_nothing_found(self):
        """Test defaults when no config file exists."""
        assert Config.find_config_file() is None
        assert Config.load() == Config()

    def test_project_config(self, isolated_config):
        """Test the project config file."""
        path = isolated_config / ".colalign.yaml"
        path.write_text("spec: '>'\n", encoding="utf-8")

        assert Config.find_config_file().resolve() == path.resolve()
        assert Config.load().spec == ">"

    def test_user_config(self, isolated_config):
        """Test the user config file."""
        user_dir = isolated_config / "home" / ".colalign"
        user_dir.mkdir()
        (user_dir / "config.yaml").write_text("separator: '  '\n", encoding="utf-8")

        assert Config.load().separator == "  "

    def test_project_config_wins(self, isolated_config):
        """Test that the project config wins over the user config."""
        user_dir = isolated_config / "home" / ".colalign"
        user_dir.mkdir()
        (user_dir / "config.yaml").write_text("spec: '='\n", encoding="utf-8")
        (isolated_config / ".colalign.yaml").write_text("spec: '>'\n", encoding="utf-8")

        assert Config.load().spec == ">"

    def test_explicit_path(self, tmp_path):
        """Test loading an explicit config path."""
        path = tmp_path / "custom.yaml"
        path.write_text("until: 2\n", encoding="utf-8")
        assert Config.load(path).until == 2
