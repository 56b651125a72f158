#!/usr/bin/env python3
"""Generate a mission from the command line and optionally dump it as JSON."""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from stellar_pcg.core.config_loader import load_generation_config
from stellar_pcg.core.constants import DEFAULT_CONFIG_PATH, RANDOM_SEED
from stellar_pcg.level.layout_validator import validate_layout
from stellar_pcg.mission import generate_mission

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Procedural level layout and guard patrol generator")
    ap.add_argument("--seed", type=int, default=None,
                    help=f"generation seed ({RANDOM_SEED} draws a fresh one; default: config value)")
    ap.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="JSON configuration file")
    ap.add_argument("--output", default=None, help="write the generated mission to this JSON file")
    ap.add_argument("--validate", action="store_true",
                    help="check the layout is playable and exit non-zero if not")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    # Invalid or missing config files fall back to defaults inside the loader.
    config = load_generation_config(args.config)
    mission = generate_mission(args.seed, config.layout, config.patrol)

    if args.output:
        directory = os.path.dirname(args.output)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(args.output, 'w') as f:
            json.dump(mission.to_dict(), f, indent=2)
        logger.info("Wrote mission to %s", args.output)

    if args.validate:
        result = validate_layout(mission.layout)
        if not result.is_valid:
            logger.error("Layout for seed %d is not viable: %s", mission.seed, result.message)
            return 1
        logger.info("Layout for seed %d is viable (%d/%d rooms reachable)",
                    mission.seed, len(result.reachable_rooms), len(mission.layout.rooms))

    return 0


if __name__ == "__main__":
    sys.exit(main())
