#!/usr/bin/env python3
"""Entry point for the interactive BBS digraph explorer.

Builds a Blum-Blum-Shub generator, then runs the menu loop: generate a
random graph, show it, find a path between two vertices, detect a cycle.
Each new generation first backs up the previous graph under the save
directory.

Usage:
    python run_explorer.py
    python run_explorer.py --config explorer.json
    python run_explorer.py --seed 7 --save-dir backups --verbose
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from src.config import (
    DEFAULT_CONFIG,
    SessionConfig,
    config_from_json,
    generator_config_hash,
)
from src.prng import PrimeSearchError
from src.session import GraphSession, run_console

log = logging.getLogger(__name__)


def build_config(args: argparse.Namespace) -> SessionConfig:
    """Load the config file (if any) and apply command-line overrides."""
    config = DEFAULT_CONFIG
    if args.config is not None:
        config = config_from_json(Path(args.config).read_text())
    if args.seed is not None:
        config = replace(config, prng=replace(config.prng, seed=args.seed))
    if args.save_dir is not None:
        config = replace(config, save_dir=args.save_dir)
    return config


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Explore random directed weighted graphs"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to explorer config JSON file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for prime and BBS seed selection (reproducible session)",
    )
    parser.add_argument(
        "--save-dir",
        type=str,
        default=None,
        help="Directory for graph backups",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config is not None and not Path(args.config).exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)

    config = build_config(args)
    log.info("Config hash: %s", generator_config_hash(config))

    try:
        session = GraphSession(config)
    except PrimeSearchError:
        log.exception("Could not set up the BBS generator")
        sys.exit(1)

    run_console(session)


if __name__ == "__main__":
    main()
