"""
Environment-driven settings. tmux-fzf has no config file; everything that can
be tuned is read from TMUX_FZF_* variables once per invocation.
"""

import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ValidationError, field_validator

from .errors import UsageError
from .picker import DEFAULT_KILL_KEY, DEFAULT_QUERY_KEY

ENV_LOG_LEVEL = "TMUX_FZF_LOG_LEVEL"
ENV_KILL_KEY = "TMUX_FZF_KILL_KEY"
ENV_QUERY_KEY = "TMUX_FZF_QUERY_KEY"

LogLevel = Literal["debug", "info", "warning", "error"]


class Settings(BaseModel):
    log_level: LogLevel = "warning"
    kill_key: str = DEFAULT_KILL_KEY
    query_key: str = DEFAULT_QUERY_KEY

    @field_validator("log_level", mode="before")
    @classmethod
    def _lower(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("kill_key", "query_key")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("key binding cannot be empty")
        return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment. Invalid values are a usage error."""
    env = os.environ if environ is None else environ
    values = {}
    for field, var in (("log_level", ENV_LOG_LEVEL),
                       ("kill_key", ENV_KILL_KEY),
                       ("query_key", ENV_QUERY_KEY)):
        if var in env:
            values[field] = env[var]
    try:
        return Settings(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{err['loc'][0]}: {err['msg']}" for err in e.errors()
        )
        raise UsageError(f"invalid TMUX_FZF_* environment: {problems}") from e
