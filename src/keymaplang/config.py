# src/keymaplang/config.py
"""
Runtime configuration for keymaplang.

Settings are read from the environment when the module is imported and can
be changed afterwards (the CLI flips ``enable_debug_logs`` for ``--debug``)::

    KEYMAPLANG_DEBUG=1                   verbose lexer/parser logging
    KEYMAPLANG_LOG_LEVEL=info            debug | info | warning | error
    KEYMAPLANG_KEEP_TRAILING_NEWLINES=1  hand files to the lexer untouched

Call ``config.configure_logging()`` to apply the logging settings.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "keymaplang"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}
_DEFAULT_LEVEL = "warning"
_TRUTHY = ("1", "true", "yes", "on")


def _flag(raw: Optional[str]) -> bool:
    return raw is not None and raw.strip().lower() in _TRUTHY


def _level_name(raw: Optional[str]) -> str:
    if raw is None:
        return _DEFAULT_LEVEL
    name = raw.strip().lower()
    return name if name in _LEVELS else _DEFAULT_LEVEL


@dataclass
class KeymapConfig:
    enable_debug_logs: bool = False
    log_level: str = _DEFAULT_LEVEL
    strip_trailing_newlines: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "KeymapConfig":
        env = os.environ if environ is None else environ
        return cls(
            enable_debug_logs=_flag(env.get("KEYMAPLANG_DEBUG")),
            log_level=_level_name(env.get("KEYMAPLANG_LOG_LEVEL")),
            strip_trailing_newlines=not _flag(env.get("KEYMAPLANG_KEEP_TRAILING_NEWLINES")),
        )

    @property
    def effective_level(self) -> int:
        if self.enable_debug_logs:
            return logging.DEBUG
        return _LEVELS.get(self.log_level, _LEVELS[_DEFAULT_LEVEL])

    def should_log(self, level: str) -> bool:
        """Would a message at ``level`` be emitted under this config?"""
        wanted = _LEVELS.get(level.lower())
        if wanted is None:
            return False
        return wanted >= self.effective_level

    def configure_logging(self) -> logging.Logger:
        """Attach a rich handler writing to stderr to the package logger at the
        configured level."""
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(self.effective_level)
        if not any(isinstance(h, RichHandler) for h in logger.handlers):
            logger.addHandler(RichHandler(console=Console(stderr=True),
                                          show_path=False, markup=False))
        logger.propagate = False
        return logger


config = KeymapConfig.from_env()
