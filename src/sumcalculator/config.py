"""
Configuration
=============
Central registry for application constants and runtime settings.

Settings are read from the environment so that the GUI needs no CLI:
    SUMCALC_LOG_LEVEL: level name ("DEBUG", "INFO", ...) or number. Default INFO.
    SUMCALC_LOG_FILE:  optional path; logs are also written there.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

ORG_ID = "sumcalculator"
APP_ID = "sum-calculator"
VISIBLE_APP_NAME = "Sum Calculator"

WINDOW_WIDTH = 420
WINDOW_HEIGHT = 460

ENV_LOG_LEVEL = "SUMCALC_LOG_LEVEL"
ENV_LOG_FILE = "SUMCALC_LOG_FILE"


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.INFO
    log_file: Optional[str] = None


def parse_log_level(value: str) -> int:
    """Accept a level name (case-insensitive) or a numeric level."""
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: '{value}'")
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ

    raw_level = env.get(ENV_LOG_LEVEL, "")
    log_level = parse_log_level(raw_level) if raw_level.strip() else logging.INFO

    log_file = env.get(ENV_LOG_FILE) or None

    return Settings(log_level=log_level, log_file=log_file)
