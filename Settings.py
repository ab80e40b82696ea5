"""
Runtime configuration read from the environment.

Variables may come from the process environment or a `.env` file in the
working directory (loaded with python-dotenv; real environment variables
take precedence).

UNIT_CONVERTER_LOG_LEVEL
    Level for diagnostic logging on stderr (default: WARNING).
"""

import logging
import os
import sys
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

LOG_LEVEL_VAR = "UNIT_CONVERTER_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"


def load_settings():
    """
    Build `Settings` from the environment.

    Raises
    ------
    ValueError
        If UNIT_CONVERTER_LOG_LEVEL is not a standard logging level name.
    """
    load_dotenv(find_dotenv(usecwd=True))
    log_level = os.getenv(LOG_LEVEL_VAR, "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"{LOG_LEVEL_VAR} must be a logging level name, got '{log_level}'.")
    return Settings(log_level=log_level)


def configure_logging(settings):
    # stdout carries the menu, prompts and results only
    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
