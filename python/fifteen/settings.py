"""Runtime settings.

Defaults live in :data:`DEFAULT_SETTINGS`; any of them can be overridden
through ``FIFTEEN_<NAME>`` environment variables, e.g.
``FIFTEEN_UNSOLVABLE_PROBABILITY=0``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

ENV_PREFIX = "FIFTEEN_"

EXECUTORS = ("thread", "process")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_SETTINGS: dict[str, Any] = {
    "size": 4,
    "unsolvable_probability": 0.1,
    "executor": "thread",
    "max_workers": 1,
    "log_level": "WARNING",
}


@dataclass(frozen=True)
class Settings:
    size: int = 4
    unsolvable_probability: float = 0.1
    executor: str = "thread"
    max_workers: int = 1
    log_level: str = "WARNING"


def _env_name(key: str) -> str:
    return ENV_PREFIX + key.upper()


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from defaults plus environment overrides.

    Raises ``ValueError`` naming the offending variable on bad input.
    """
    environ = os.environ if environ is None else environ
    values = DEFAULT_SETTINGS.copy()

    for key, default in DEFAULT_SETTINGS.items():
        name = _env_name(key)
        raw = environ.get(name)
        if raw is None:
            continue
        try:
            values[key] = type(default)(raw.strip())
        except ValueError as e:
            raise ValueError(f"{name}: cannot parse {raw!r}") from e
        logger.debug("Setting %s overridden from %s", key, name)

    values["executor"] = values["executor"].lower()
    values["log_level"] = values["log_level"].upper()

    if values["size"] < 2:
        raise ValueError(f"{_env_name('size')}: must be at least 2")
    if not 0.0 <= values["unsolvable_probability"] <= 1.0:
        raise ValueError(f"{_env_name('unsolvable_probability')}: must be in [0, 1]")
    if values["executor"] not in EXECUTORS:
        raise ValueError(f"{_env_name('executor')}: expected one of {EXECUTORS}")
    if values["max_workers"] < 1:
        raise ValueError(f"{_env_name('max_workers')}: must be at least 1")
    if values["log_level"] not in LOG_LEVELS:
        raise ValueError(f"{_env_name('log_level')}: expected one of {LOG_LEVELS}")

    return Settings(**values)
