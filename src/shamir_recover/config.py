# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

# src/shamir_recover/config.py
"""Runtime settings for share loading and the command line tool.

Values can be overridden by environment variables so that batch jobs can
tune limits without code changes. Unparsable or out-of-range overrides
fall back to the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _load_int(name: str, default: int, *, minimum: int, maximum: int | None = None) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    if parsed < minimum or (maximum is not None and parsed > maximum):
        return default
    return parsed


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        return default
    return level


@dataclass(frozen=True)
class Settings:
    """Holds runtime tunables for loading and reporting."""

    log_level: str = "WARNING"
    max_value_digits: int = 4096
    output_base: int = 10


def load_settings() -> Settings:
    """Load the settings considering environment overrides."""

    return Settings(
        log_level=_load_level("SHAMIR_RECOVER_LOG_LEVEL", "WARNING"),
        max_value_digits=_load_int("SHAMIR_RECOVER_MAX_DIGITS", 4096, minimum=1),
        output_base=_load_int("SHAMIR_RECOVER_OUTPUT_BASE", 10, minimum=2, maximum=36),
    )


settings = load_settings()


__all__ = ["Settings", "settings", "load_settings", "LOG_LEVELS"]
