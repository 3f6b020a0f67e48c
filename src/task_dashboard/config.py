"""Settings loaded from ``TASKDASH_*`` environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date
from typing import Mapping

ENV_PREFIX = "TASKDASH"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_DATE_FORMAT = "%B %d, %Y"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(environ: Mapping[str, str], name: str, default: str) -> str:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


def _log_level(raw: str) -> str:
    level = raw.upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


def _date_format(raw: str) -> str:
    if "%" not in raw:
        return DEFAULT_DATE_FORMAT
    try:
        date(2000, 1, 1).strftime(raw)
    except ValueError:
        return DEFAULT_DATE_FORMAT
    return raw


@dataclass(frozen=True, slots=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    date_format: str = DEFAULT_DATE_FORMAT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            log_level=_log_level(_env(env, _k("LOG_LEVEL"), DEFAULT_LOG_LEVEL)),
            date_format=_date_format(_env(env, _k("DATE_FORMAT"), DEFAULT_DATE_FORMAT)),
        )

    def format_date(self, value: date) -> str:
        return value.strftime(self.date_format)
