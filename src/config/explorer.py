"""Explorer configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PRNGConfig:
    """Blum-Blum-Shub setup parameters."""

    bit_length: int = 32  # bits per prime and per seed
    max_prime_attempts: int = 100_000  # candidates drawn before giving up
    seed: int | None = None  # candidate-generator seed; None = OS entropy


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Random graph generation bounds (all inclusive)."""

    min_nodes: int = 3
    max_nodes: int = 15
    edge_factor: int = 3  # edge count drawn from [n, edge_factor * n]
    min_weight: int = 1
    max_weight: int = 20


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Top-level explorer configuration composing all sub-configs.

    Cross-parameter validation runs in __post_init__ to reject invalid
    configurations before a generator is ever built.
    """

    prng: PRNGConfig = field(default_factory=PRNGConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    save_dir: str = "saved_graphs"
    description: str = ""

    def __post_init__(self) -> None:
        # 5 bits is the smallest width holding two distinct primes = 3 mod 4
        if self.prng.bit_length < 5:
            raise ValueError(
                f"bit_length ({self.prng.bit_length}) must be >= 5"
            )
        if self.prng.max_prime_attempts < 1:
            raise ValueError(
                f"max_prime_attempts must be positive, "
                f"got {self.prng.max_prime_attempts}"
            )
        gen = self.generator
        if gen.min_nodes < 1:
            raise ValueError(f"min_nodes must be >= 1, got {gen.min_nodes}")
        if gen.max_nodes < gen.min_nodes:
            raise ValueError(
                f"max_nodes ({gen.max_nodes}) must be "
                f">= min_nodes ({gen.min_nodes})"
            )
        if gen.edge_factor < 1:
            raise ValueError(
                f"edge_factor must be >= 1, got {gen.edge_factor}"
            )
        if gen.max_weight < gen.min_weight:
            raise ValueError(
                f"max_weight ({gen.max_weight}) must be "
                f">= min_weight ({gen.min_weight})"
            )
        if not self.save_dir:
            raise ValueError("save_dir must be a non-empty path")
