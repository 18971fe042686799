from __future__ import annotations

import logging
from dataclasses import dataclass


# Defaults for the interactive driver
DEFAULT_PROMPT = "> "
DEFAULT_ERROR_PREFIX = "Error: "
DEFAULT_LOG_LEVEL = logging.WARNING


@dataclass(frozen=True)
class ReplConfig:
    prompt: str = DEFAULT_PROMPT
    error_prefix: str = DEFAULT_ERROR_PREFIX
    log_level: int = DEFAULT_LOG_LEVEL
