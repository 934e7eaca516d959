"""Configuration loading utilities.

The file stores keys in camelCase, like the wire format; ClientConfig fields
are snake_case. Keys are converted with pydantic's alias generators.
"""

import json
from pathlib import Path
from typing import Any, Callable

from pydantic.alias_generators import to_camel, to_snake

from ankrkit.config.schema import ClientConfig


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".ankrkit" / "config.json"


def load_config(config_path: Path | None = None) -> ClientConfig:
    """
    Load configuration from file, falling back to defaults and ANKR_* env vars.

    Values in the file take precedence over environment variables.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path) as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("config must be a JSON object")
            return ClientConfig(**_rekey(data, to_snake))
        except (json.JSONDecodeError, ValueError) as e:
            raise ValueError(
                f"Failed to load config from {path}: {e}. "
                "Fix the file or remove it to use defaults."
            ) from e

    return ClientConfig()


def save_config(config: ClientConfig, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        json.dump(_rekey(config.model_dump(), to_camel), f, indent=2)


def _rekey(data: Any, convert: Callable[[str], str]) -> Any:
    if isinstance(data, dict):
        return {convert(k): _rekey(v, convert) for k, v in data.items()}
    return data
