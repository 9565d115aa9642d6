from __future__ import annotations

import logging
import os
from typing import Optional, TextIO

from cmdflags.logging.helpers import get_logger, level_from_env, setup_base_logger


class DefaultLoggerFactory:
    """Configures the 'cmdflags' base logger on first use and hands out child loggers.

    `from_env` reads CMDFLAGS_JSON_LOGS and CMDFLAGS_LOG_LEVEL, so programs
    that declare flags with cmdflags get the same diagnostics format as the
    `cmdflags` command.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self.json_logs = bool(json_logs)
        self.level = int(level)
        self._stream = stream
        self._configured = False

    @classmethod
    def from_env(cls, *, json_logs: bool = False, stream: Optional[TextIO] = None) -> "DefaultLoggerFactory":
        """Build a factory whose options default to the CMDFLAGS_* environment."""
        env_json = os.getenv("CMDFLAGS_JSON_LOGS") == "1"
        return cls(json_logs=json_logs or env_json, level=level_from_env(logging.INFO), stream=stream)

    def get_logger(self, name: str) -> logging.Logger:
        if not self._configured:
            setup_base_logger(json_logs=self.json_logs, level=self.level, stream=self._stream)
            self._configured = True
        return get_logger(name)
