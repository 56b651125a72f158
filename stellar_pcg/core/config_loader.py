"""Configuration loader for the generators."""

import json
import logging
import os
from dataclasses import fields
from typing import Any, Dict, NamedTuple

from stellar_pcg.core.constants import DEFAULT_CONFIG_PATH
from stellar_pcg.core.geometry import Bounds
from stellar_pcg.encounters.patrol_data import PatrolConfig
from stellar_pcg.level.layout_data import LayoutConfig

logger = logging.getLogger(__name__)

LAYOUT_SECTION = "layout_config"
PATROL_SECTION = "patrol_config"


class GenerationConfig(NamedTuple):
    layout: LayoutConfig
    patrol: PatrolConfig


def _read_json(config_path: str) -> Dict[str, Any]:
    with open(config_path, 'r') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Top level of {config_path} must be an object")
    return data


def _filter_fields(cls, section: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only keys the dataclass accepts."""
    if not isinstance(section, dict):
        raise ValueError(f"{cls.__name__} section must be an object, got {type(section).__name__}")
    allowed_keys = {f.name for f in fields(cls)}
    return {k: v for k, v in section.items() if k in allowed_keys}


def layout_config_from_dict(section: Dict[str, Any]) -> LayoutConfig:
    filtered = _filter_fields(LayoutConfig, section)
    for key in ("min_room_size", "max_room_size"):
        if key in filtered:
            filtered[key] = tuple(int(v) for v in filtered[key])
    config = LayoutConfig(**filtered)
    config.validate()
    return config


def patrol_config_from_dict(section: Dict[str, Any]) -> PatrolConfig:
    filtered = _filter_fields(PatrolConfig, section)
    if "spawn_bounds" in filtered:
        if not isinstance(filtered["spawn_bounds"], dict):
            raise ValueError("PatrolConfig.spawn_bounds must be an object with min_x, min_y, max_x and max_y")
        filtered["spawn_bounds"] = Bounds(**{k: float(v) for k, v in filtered["spawn_bounds"].items()})
    config = PatrolConfig(**filtered)
    config.validate()
    return config


def load_layout_config(config_path: str = DEFAULT_CONFIG_PATH) -> LayoutConfig:
    """
    Load LayoutConfig from the ``layout_config`` section of a JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        LayoutConfig: Loaded configuration, or defaults when the file is
        missing, unreadable or invalid (a warning is logged)
    """
    if not os.path.exists(config_path):
        logger.warning("Config file not found: %s, using defaults", config_path)
        return LayoutConfig()

    try:
        data = _read_json(config_path)
        return layout_config_from_dict(data.get(LAYOUT_SECTION, {}))
    except (OSError, TypeError, ValueError) as e:
        logger.warning("Error loading layout config from %s: %s, using defaults", config_path, e)
        return LayoutConfig()


def load_patrol_config(config_path: str = DEFAULT_CONFIG_PATH) -> PatrolConfig:
    """Load PatrolConfig from the ``patrol_config`` section, same fallbacks as layouts."""
    if not os.path.exists(config_path):
        logger.warning("Config file not found: %s, using defaults", config_path)
        return PatrolConfig()

    try:
        data = _read_json(config_path)
        return patrol_config_from_dict(data.get(PATROL_SECTION, {}))
    except (OSError, TypeError, ValueError) as e:
        logger.warning("Error loading patrol config from %s: %s, using defaults", config_path, e)
        return PatrolConfig()


def load_generation_config(config_path: str = DEFAULT_CONFIG_PATH) -> GenerationConfig:
    return GenerationConfig(layout=load_layout_config(config_path),
                            patrol=load_patrol_config(config_path))


def save_generation_config(config: GenerationConfig, config_path: str = DEFAULT_CONFIG_PATH) -> None:
    """
    Save both config sections to JSON, keeping any other top-level keys.

    Args:
        config: Configuration to save
        config_path: Path to save the configuration file
    """
    directory = os.path.dirname(config_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    existing: Dict[str, Any] = {}
    if os.path.exists(config_path):
        try:
            existing = _read_json(config_path)
        except (OSError, ValueError) as e:
            logger.warning("Overwriting unreadable config %s: %s", config_path, e)
            existing = {}

    existing[LAYOUT_SECTION] = config.layout.to_dict()
    existing[PATROL_SECTION] = config.patrol.to_dict()

    with open(config_path, 'w') as f:
        json.dump(existing, f, indent=2)
