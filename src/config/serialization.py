"""JSON serialization and deserialization for explorer configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from src.config.explorer import SessionConfig

_DACITE_CONFIG = DaciteConfig(
    cast=[tuple],
    check_types=True,
    strict=True,
)


def config_to_json(config: SessionConfig) -> str:
    """Serialize a SessionConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> SessionConfig:
    """Deserialize a JSON string to a SessionConfig.

    Uses dacite with strict=True to reject unknown keys. Missing keys fall
    back to the dataclass defaults, so a partial file such as
    ``{"prng": {"seed": 7}}`` is valid.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: SessionConfig) -> dict[str, Any]:
    """Convert a SessionConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> SessionConfig:
    """Reconstruct a SessionConfig from a plain dictionary."""
    return from_dict(data_class=SessionConfig, data=d, config=_DACITE_CONFIG)
