"""YAML config loader."""

import logging
from pathlib import Path

import yaml

from nwszones.config.schema import AppConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None) -> AppConfig:
    """Load and validate config from a YAML file.

    With no path, or an empty file, every setting takes its default.
    Raises yaml.YAMLError for unparsable files and ValueError (including
    pydantic.ValidationError) for files that are not a valid mapping.
    """
    if path is None:
        return AppConfig()

    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(
            f"Config {path} must be a YAML mapping, got {type(raw).__name__}"
        )

    logger.debug("Loaded config from %s", path)
    return AppConfig(**raw)
