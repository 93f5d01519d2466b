"""
STT-Sim Configuration Module

Provides centralized loading of scoring weights and thresholds.
"""

import os
from pathlib import Path
from typing import Dict, Any, Optional

import yaml


_config_cache: Optional[Dict[str, Any]] = None
CONFIG_DIR = Path(__file__).parent


def get_config_path() -> Path:
    """Resolve the config file, honoring the STT_SIM_CONFIG override."""
    override = os.getenv("STT_SIM_CONFIG")
    if override:
        return Path(override)
    return CONFIG_DIR / "scoring_config.yaml"


def get_scoring_config() -> Dict[str, Any]:
    """
    Load scoring configuration (cached).

    Returns:
        Dict containing all scoring configuration settings.
    """
    global _config_cache
    if _config_cache is not None:
        return _config_cache

    with open(get_config_path(), 'r', encoding='utf-8') as f:
        _config_cache = yaml.safe_load(f) or {}

    return _config_cache


def clear_config_cache() -> None:
    """Clear the config cache (useful for testing)."""
    global _config_cache
    _config_cache = None
