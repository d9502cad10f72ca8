"""
Configuration loading for jdfill.

Defaults live in DEFAULTS below. They can be overridden by a YAML file (passed
explicitly or named by the JDFILL_CONFIG environment variable) and, for the log
directory, by the LOGS_PATH environment variable. Environment variables are
read from .env via python-dotenv.
"""

import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

load_dotenv()

DEFAULTS = {
    "document": {
        # Input boundary for analysis and submission (characters)
        "min_length": 100,
        "max_length": 5000,
    },
    "latency": {
        # Artificial delay used to emulate a remote analysis call
        "enabled": False,
        "min_seconds": 0.8,
        "max_seconds": 1.2,
    },
    "geo": {
        # Placeholder coordinates attached to a submitted location label
        "lat": 28.6139,
        "lng": 77.2090,
        "jitter": 0.1,
    },
    "logging": {
        "log_dir": "outs/logs",
        "console_level": "INFO",
    },
}


def load_config(config_path: Optional[Union[str, Path]] = None) -> DictConfig:
    """
    Build the effective configuration.

    Args:
        config_path: Optional YAML file whose keys override DEFAULTS.
            Falls back to $JDFILL_CONFIG when omitted.

    Returns:
        Merged OmegaConf DictConfig

    Raises:
        FileNotFoundError: If an override file is named but does not exist
    """
    config = OmegaConf.create(DEFAULTS)

    path = config_path or os.getenv("JDFILL_CONFIG")
    if path:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        config = OmegaConf.merge(config, OmegaConf.load(path))

    logs_path = os.getenv("LOGS_PATH")
    if logs_path:
        config.logging.log_dir = logs_path

    return config
