"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from naming_convention.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "tokenizer": {
        "digits": False,
    },
    "classifier": {
        "digits": False,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return config

    p = Path(path)
    if not p.exists():
        logger.warning("Config file %s not found. Using defaults.", p)
        return config

    user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(user_config, dict):
        kind = type(user_config).__name__
        msg = f"Config file {p} must contain a mapping, got {kind}"
        raise ValueError(msg)

    logger.info("Loaded config from %s", p)
    return deep_merge(config, user_config)
