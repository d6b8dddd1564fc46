"""Explorer configuration system with frozen, hashable, serializable dataclasses."""

from src.config.explorer import (
    GeneratorConfig,
    PRNGConfig,
    SessionConfig,
)
from src.config.defaults import DEFAULT_CONFIG
from src.config.hashing import config_hash, generator_config_hash
from src.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "GeneratorConfig",
    "PRNGConfig",
    "SessionConfig",
    "DEFAULT_CONFIG",
    "config_hash",
    "generator_config_hash",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
]
