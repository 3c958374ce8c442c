from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import os

from luvatrix_scales.linear import MIN_DIMENSION


DEFAULT_CONSOLE_WIDTH = 121
DEFAULT_CONSOLE_HEIGHT = 24
DEFAULT_LOG_LEVEL = "WARNING"

WIDTH_ENV_VAR = "LUVATRIX_SCALES_CONSOLE_WIDTH"
HEIGHT_ENV_VAR = "LUVATRIX_SCALES_CONSOLE_HEIGHT"
LOG_LEVEL_ENV_VAR = "LUVATRIX_SCALES_LOG_LEVEL"


@dataclass(frozen=True)
class ConsoleSettings:
    width: int = DEFAULT_CONSOLE_WIDTH
    height: int = DEFAULT_CONSOLE_HEIGHT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(
        cls,
        *,
        width_env_var: str = WIDTH_ENV_VAR,
        height_env_var: str = HEIGHT_ENV_VAR,
        log_level_env_var: str = LOG_LEVEL_ENV_VAR,
    ) -> "ConsoleSettings":
        return cls(
            width=_parse_dimension(width_env_var, DEFAULT_CONSOLE_WIDTH),
            height=_parse_dimension(height_env_var, DEFAULT_CONSOLE_HEIGHT),
            log_level=_parse_log_level(log_level_env_var, DEFAULT_LOG_LEVEL),
        )

    def with_overrides(
        self,
        *,
        width: int | None = None,
        height: int | None = None,
        log_level: str | None = None,
    ) -> "ConsoleSettings":
        updated = self
        if width is not None:
            updated = replace(updated, width=int(width))
        if height is not None:
            updated = replace(updated, height=int(height))
        if log_level is not None:
            updated = replace(updated, log_level=log_level.strip().upper())
        return updated

    def level_number(self) -> int:
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.WARNING


def _parse_dimension(env_var: str, default: int) -> int:
    raw = os.getenv(env_var, "").strip()
    if raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if value < MIN_DIMENSION:
        return default
    return value


def _parse_log_level(env_var: str, default: str) -> str:
    raw = os.getenv(env_var, "").strip().upper()
    if raw == "":
        return default
    if not isinstance(logging.getLevelName(raw), int):
        return default
    return raw
