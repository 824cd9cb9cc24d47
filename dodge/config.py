"""Site configuration stored in a TOML file."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass
from pathlib import Path

import tomli_w

DEFAULT_CONFIG_PATH = "config.toml"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or is invalid."""


@dataclass
class Config:
    """Blog-wide settings."""

    blog_title: str = "Dodge SSG"
    theme: str = "hacker"

    @classmethod
    def from_mapping(cls, data: dict) -> Config:
        """Build a config from parsed TOML, requiring every field to be a string."""
        values = {}
        for name in ("blog_title", "theme"):
            if name not in data:
                raise ConfigError(f"missing field `{name}`")
            value = data[name]
            if not isinstance(value, str):
                raise ConfigError(f"field `{name}` must be a string")
            values[name] = value
        return cls(**values)

    def to_toml(self) -> str:
        """Serialise the config as TOML text."""
        return tomli_w.dumps(asdict(self))


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> Config:
    """Read the config file, creating it with defaults when it does not exist."""
    config_path = Path(path)
    if config_path.exists():
        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(str(exc)) from exc
        return Config.from_mapping(data)

    config = Config()
    config_path.write_text(config.to_toml(), encoding="utf-8")
    return config