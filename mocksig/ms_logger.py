"""
Logging utilities for the signature resolver.

This module provides logging functions that respect the ReflectContext
flags (log_level and log_rich_format).
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

import sys
import time

from ms_context import ReflectContext, LogLevel


def log(context: ReflectContext, log_level: LogLevel, message: str) -> None:
    """
    Log a message if the context's logging level admits it.

    Args:
        context:    The reflection context containing logging level.
        log_level:  The level of the message to log.
        message:    The message to log.
    """
    prefix = ""
    if context.log_rich_format:
        # timestamp prefix
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        prefix = {
            LogLevel.WARNING: f"{timestamp} [WARNING] ",
            LogLevel.INFO: f"{timestamp} [INFO] ",
            LogLevel.DEBUG: f"{timestamp} [DEBUG] ",
        }.get(log_level, "")
    if context.log_level >= log_level:
        print(f"{prefix}{message}", file=sys.stderr)

def log_warning(context: ReflectContext, message: str) -> None:
    """
    Log a warning-level message if logging level is WARNING or higher.
    """
    log(context, LogLevel.WARNING, message)

def log_info(context: ReflectContext, message: str) -> None:
    log(context, LogLevel.INFO, message)


def log_debug(context: ReflectContext, message: str) -> None:
    """
    Log a debug-level message if logging level is DEBUG or higher.

    Args:
        context: The reflection context containing logging level.
        message: The message to log.
    """
    log(context, LogLevel.DEBUG, message)
