"""
Parsing configuration loader.

Only the command-line scripts load settings; library functions take plain
keyword arguments whose defaults match these values.

Defaults ship with the package in cipher/config/defaults.yaml. A user file
(explicit path, or CIPHER_CONFIG_PATH from the environment / .env) is merged
over the defaults, so it only needs the keys it changes.

Example:
    >>> config = load_config()
    >>> config["skills"]["inference_policy"]
    'keywords'
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

DEFAULTS_PATH = Path(__file__).resolve().parent.parent / "config" / "defaults.yaml"


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load parsing configuration merged over packaged defaults.

    Args:
        config_path: Optional YAML override file. Defaults to CIPHER_CONFIG_PATH
                     from the environment; when neither is set, defaults are used as-is.

    Returns:
        Plain nested dict with all settings resolved

    Raises:
        FileNotFoundError: If an override path is given but doesn't exist
    """
    load_dotenv()
    if config_path is None and os.getenv("CIPHER_CONFIG_PATH"):
        config_path = Path(os.getenv("CIPHER_CONFIG_PATH"))

    config = OmegaConf.load(DEFAULTS_PATH)

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        config = OmegaConf.merge(config, OmegaConf.load(config_path))

    return OmegaConf.to_container(config, resolve=True)


def get_setting(config: Dict[str, Any], dotted_key: str) -> Any:
    """
    Look up a nested setting by dotted key (e.g., "resume.header_scan_lines").

    Raises:
        KeyError: If any segment of the key is missing
    """
    value: Any = config
    for part in dotted_key.split("."):
        value = value[part]
    return value
