#!/usr/bin/env python3
"""
Configuration for the MissionMatch API, loaded once per process.
"""

from pathlib import Path
from functools import lru_cache

from core.config_loader import AppConfig, load_config


def get_project_root() -> Path:
    return Path(__file__).parent.parent.parent


@lru_cache()
def get_config() -> AppConfig:
    """
    config.yaml from the project root with DATABASE_URL, WEB_HOST and
    WEB_PORT overrides applied. Matching weights are validated here, so a
    bad config fails at startup rather than on the first request.
    """
    return load_config(str(get_project_root() / 'config.yaml'))
