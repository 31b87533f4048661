"""Runtime settings, read from the environment (and a ``.env`` file if present)."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .options import BASE_URL

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL


def _timeout(raw: Optional[str]) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric JOKEAPI_TIMEOUT=%r", raw)
        return DEFAULT_TIMEOUT
    if value <= 0:
        logger.warning("Ignoring non-positive JOKEAPI_TIMEOUT=%r", raw)
        return DEFAULT_TIMEOUT
    return value


def _log_level(raw: Optional[str]) -> str:
    if not raw:
        return DEFAULT_LOG_LEVEL
    name = raw.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        logger.warning("Ignoring unknown JOKETELLER_LOG_LEVEL=%r", raw)
        return DEFAULT_LOG_LEVEL
    return name


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from ``environ`` (defaults to ``os.environ`` after loading ``.env``)."""
    if environ is None:
        load_dotenv()
        environ = os.environ

    return Settings(
        base_url=environ.get("JOKEAPI_BASE_URL") or BASE_URL,
        timeout=_timeout(environ.get("JOKEAPI_TIMEOUT")),
        log_level=_log_level(environ.get("JOKETELLER_LOG_LEVEL")),
    )
