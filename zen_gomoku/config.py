"""Game and oracle configuration.

Values are layered: built-in defaults, then a JSON file named by
ZEN_GOMOKU_CONFIG, then environment variables. The CLI applies its flags on
top of the result.
"""

import json
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from .core.models import Player
from .exceptions import ConfigError

CONFIG_PATH_ENV = "ZEN_GOMOKU_CONFIG"

# environment variable -> GameConfig field
_ENV_OVERRIDES = {
    "ZEN_GOMOKU_MODEL": "model",
    "ZEN_GOMOKU_ENDPOINT": "endpoint",
    "ZEN_GOMOKU_API_KEY_ENV": "api_key_env",
}


# field -> (accepted types, may be None)
_FIELD_TYPES = {
    "model": ((str,), False),
    "endpoint": ((str,), True),
    "api_key_env": ((str,), False),
    "temperature": ((int, float), False),
    "max_tokens": ((int,), False),
    "timeout": ((int, float), False),
    "think_delay": ((int, float), False),
    "ai_mode": ((bool,), False),
    "oracle_player": ((str,), False),
    "seed": ((int,), True),
}


@dataclass(frozen=True)
class GameConfig:
    model: str = "gpt-4o-mini"
    endpoint: Optional[str] = None
    api_key_env: str = "OPENAI_API_KEY"
    temperature: float = 0.2
    max_tokens: int = 256
    timeout: int = 30
    think_delay: float = 0.6
    ai_mode: bool = True
    oracle_player: str = "white"
    seed: Optional[int] = None

    @property
    def api_key(self) -> Optional[str]:
        return os.getenv(self.api_key_env)

    @property
    def oracle_color(self) -> Player:
        self.validate()
        return Player[self.oracle_player.upper()]

    def validate(self):
        """Raise ConfigError for values that cannot start a game."""
        for name, (types, optional) in _FIELD_TYPES.items():
            value = getattr(self, name)
            if value is None and optional:
                continue
            # bool is an int subclass; only ai_mode may be a bool
            if (isinstance(value, bool) and bool not in types) or not isinstance(value, types):
                raise ConfigError(f"{name} has invalid value {value!r}")
        if self.oracle_player.lower() not in ("black", "white"):
            raise ConfigError(f"oracle_player must be 'black' or 'white', got {self.oracle_player!r}")
        if self.think_delay < 0:
            raise ConfigError(f"think_delay must not be negative, got {self.think_delay}")
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")

    def with_overrides(self, **overrides: Any) -> "GameConfig":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _load_file(path: str) -> Dict[str, Any]:
    config_file = Path(path)
    if not config_file.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        with config_file.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Error loading configuration from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {path} must be a JSON object")

    known = {f.name for f in fields(GameConfig)}
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"Unknown configuration keys in {path}: {sorted(unknown)}")
    return data


def load_config(path: Optional[str] = None) -> GameConfig:
    """Build the effective configuration.

    Args:
        path: JSON file to read; defaults to $ZEN_GOMOKU_CONFIG if set.

    Raises:
        ConfigError: If the file is missing, malformed or has unknown keys.
    """
    config = GameConfig()

    path = path or os.getenv(CONFIG_PATH_ENV)
    if path:
        config = replace(config, **_load_file(path))

    env_values = {field: os.environ[env] for env, field in _ENV_OVERRIDES.items() if os.environ.get(env)}
    if env_values:
        config = replace(config, **env_values)

    config.validate()
    return config
