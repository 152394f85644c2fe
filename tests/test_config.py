import tomllib

import config as config_module
from config import Config, load_config


class TestLoadConfig:
    """Tests for load_config."""

    def test_creates_default_config(self, tmp_path, monkeypatch):
        """Test that a missing config file is created with defaults."""
        config_path = tmp_path / ".config" / "eduadmin.toml"
        monkeypatch.setattr(config_module, "get_config_path", lambda: config_path)

        config = load_config()

        assert config_path.exists()
        assert config.locale == "en"
        assert config.per_page == 24
        assert config.strict_tree is False
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        assert data["display"]["per_page"] == 24

    def test_reads_existing_config(self, tmp_path, monkeypatch):
        """Test that values from the file override defaults."""
        config_path = tmp_path / "eduadmin.toml"
        config_path.write_text(
            f'base_dir = "{tmp_path.as_posix()}"\n'
            'default_country = "3"\n'
            "[display]\n"
            'locale = "ar"\n'
            "per_page = 10\n"
            "[tree]\n"
            "strict = true\n",
            encoding="utf-8",
        )
        monkeypatch.setattr(config_module, "get_config_path", lambda: config_path)

        config = load_config()

        assert config.locale == "ar"
        assert config.per_page == 10
        assert config.indent == 2
        assert config.strict_tree is True
        assert config.default_country == "3"
        assert config.data_dir == tmp_path / "listings"
        assert config.log_dir == tmp_path / "logs"

    def test_default_values(self):
        """Test the built-in defaults."""
        config = Config.default()

        assert config.data_dir == config.base_dir / "listings"
        assert config.log_level == "INFO"
        assert config.default_country == "1"
