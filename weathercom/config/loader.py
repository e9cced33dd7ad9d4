"""YAML config loader."""

from pathlib import Path

import yaml

from weathercom.config.schema import ClientConfig


def load_config(path: str | Path) -> ClientConfig:
    """Load and validate config from a YAML file. An empty file yields defaults."""
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config {path} must be a YAML mapping at the top level")

    return ClientConfig(**raw)
