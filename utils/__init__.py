# utils/__init__.py
# This file is part of fol-rewrite - First-order logic parsing and rewriting
#
# Utility module exports

from .logger import (
    FOLLogger,
    LogLevel,
    configure_logging,
    get_logger,
    set_log_level,
)

__all__ = [
    "FOLLogger",
    "LogLevel",
    "configure_logging",
    "get_logger",
    "set_log_level",
]
