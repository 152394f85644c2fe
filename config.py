"""Configuration management for eduadmin.

Reads configuration from ~/.config/eduadmin.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    data_dir: Path
    log_level: str
    log_dir: Path
    locale: str
    per_page: int
    indent: int
    strict_tree: bool
    default_country: str

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "eduadmin"
        return cls(
            base_dir=base_dir,
            data_dir=base_dir / "listings",
            log_level="INFO",
            log_dir=base_dir / "logs",
            locale="en",
            per_page=24,
            indent=2,
            strict_tree=False,
            default_country="1",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "eduadmin.toml"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    defaults = Config.default()
    base_dir = Path(data.get("base_dir", defaults.base_dir))

    storage_config = data.get("storage", {})
    data_dir = Path(storage_config.get("data_dir", base_dir / "listings"))

    log_config = data.get("logging", {})
    log_level = log_config.get("level", defaults.log_level)
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    display_config = data.get("display", {})
    locale = display_config.get("locale", defaults.locale)
    per_page = int(display_config.get("per_page", defaults.per_page))
    indent = int(display_config.get("indent", defaults.indent))

    tree_config = data.get("tree", {})
    strict_tree = bool(tree_config.get("strict", defaults.strict_tree))

    return Config(
        base_dir=base_dir,
        data_dir=data_dir,
        log_level=log_level,
        log_dir=log_dir,
        locale=locale,
        per_page=per_page,
        indent=indent,
        strict_tree=strict_tree,
        default_country=str(data.get("default_country", defaults.default_country)),
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "default_country": config.default_country,
        "storage": {
            "data_dir": str(config.data_dir),
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "display": {
            "locale": config.locale,
            "per_page": config.per_page,
            "indent": config.indent,
        },
        "tree": {
            "strict": config.strict_tree,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
