"""Deterministic config hashing using SHA-256 over sorted JSON."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from src.config.explorer import SessionConfig


def config_hash(config: Any, exclude_fields: list[str] | None = None) -> str:
    """Deterministic SHA-256 hash of a config object.

    Args:
        config: Any dataclass instance (or sub-config).
        exclude_fields: Optional list of top-level field names to exclude.

    Returns:
        First 16 hex characters of the SHA-256 hash.
    """
    d = asdict(config)
    for name in exclude_fields or ():
        d.pop(name, None)
    serialized = json.dumps(
        d,
        sort_keys=True,
        ensure_ascii=True,
        separators=(",", ":"),
        indent=None,
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def generator_config_hash(config: SessionConfig) -> str:
    """Hash of the parameters that shape generated graphs.

    Covers the PRNG and generator sub-configs only, so two sessions that
    differ in save_dir or description share the same hash.
    """
    return config_hash(config, exclude_fields=["save_dir", "description"])
