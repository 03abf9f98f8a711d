# file: cryptojs_aes/config.py
"""
Configuration loading and logging setup.
"""

import copy
import logging
import os
from typing import Any, Dict, Optional

import yaml


DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")

_DEFAULT_CONFIG = {
    "crypto": {
        "kdf": {
            "iterations": 1,
        },
        "framing": {
            "strict_header": False,
        },
    },
}


def get_default_config() -> Dict[str, Any]:
    """Hardcoded defaults, used when no YAML file is available."""
    return copy.deepcopy(_DEFAULT_CONFIG)


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file on top of the defaults.

    Args:
        config_path: Path to a YAML file. If None, the packaged
                     default_config.yaml is used when present.

    Returns:
        Validated configuration dictionary

    Raises:
        OSError: If an explicit config_path cannot be read
        yaml.YAMLError: If the file is not valid YAML
        ValueError: If a value is out of range
    """
    config = get_default_config()

    if config_path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            return config
        config_path = DEFAULT_CONFIG_PATH

    with open(config_path, 'r') as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"Config root must be a mapping: {config_path}")

    config = _merge(config, loaded)
    validate_config(config)
    return config


def validate_config(config: Dict[str, Any]) -> None:
    """Raise ValueError if the crypto section holds unusable values."""
    iterations = config["crypto"]["kdf"]["iterations"]
    if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 1:
        raise ValueError(f"crypto.kdf.iterations must be a positive integer, got {iterations!r}")

    strict_header = config["crypto"]["framing"]["strict_header"]
    if not isinstance(strict_header, bool):
        raise ValueError(f"crypto.framing.strict_header must be a boolean, got {strict_header!r}")


def setup_logging(verbose: bool = True):
    """Configure root logging for scripts that use this package."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
