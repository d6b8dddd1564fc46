"""Default configuration: the single source of truth for explorer parameters."""

from src.config.explorer import SessionConfig

# All-default values: 32-bit BBS primes, 3..15 vertices, n..3n edges,
# weights 1..20, backups under saved_graphs/.
DEFAULT_CONFIG = SessionConfig()
