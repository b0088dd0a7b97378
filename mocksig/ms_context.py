"""
Reflection context for cross-cutting resolver options.

This module defines the ReflectContext dataclass which holds the options
that affect every resolution call (the introspected runtime generation and
logging).
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass, field
from enum import IntEnum

from ms_runtime import HostRuntime


class LogLevel(IntEnum):
    """Hierarchical logging levels for the resolver."""
    SILENT = 0      # No logging
    WARNING = 6     # Warning messages (default)
    INFO = 10       # General progress messages
    DEBUG = 30      # Strategy selection and resolved strings


@dataclass
class ReflectContext:
    """
    Holds cross-cutting options shared by all resolution calls.

    Attributes:
        runtime:            The generation of the host runtime whose
                            introspection handles are being resolved.
        log_rich_format:    If True, emit logs in rich format: may include log level, timestamps, etc.
        log_level:          Current logging level.
    """
    runtime: HostRuntime = field(default_factory=HostRuntime.current)
    log_rich_format: bool = False
    log_level: LogLevel = LogLevel.WARNING

    @staticmethod
    def default() -> 'ReflectContext':
        """Create a ReflectContext with default settings."""
        return ReflectContext(log_level=LogLevel.WARNING)

    @staticmethod
    def for_version(version: str, log_level: LogLevel = LogLevel.WARNING) -> 'ReflectContext':
        """Create a ReflectContext targeting the runtime with the given version string."""
        return ReflectContext(runtime=HostRuntime.from_version_string(version), log_level=log_level)
