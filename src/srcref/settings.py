from __future__ import annotations

import os
from typing import TextIO

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the ``srcref`` command.

    Every field can be set through a ``SRCREF_``-prefixed environment
    variable, e.g. ``SRCREF_COLOR=false``.
    """

    model_config = SettingsConfigDict(
        env_prefix="SRCREF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"
    color: bool | None = None  # None: decide from the output stream

    def use_color(self, stream: TextIO) -> bool:
        if self.color is not None:
            return self.color
        if os.environ.get("NO_COLOR"):
            return False
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())
