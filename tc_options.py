"""
Checker options.

This module defines the CheckOptions dataclass which holds options that affect
both the typing context store and the driver around it (logging, version
bookkeeping).
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass
from enum import Enum, IntEnum, auto


class LogLevel(IntEnum):
    """Hierarchical logging levels for the checker."""
    SILENT = 0      # No logging
    ERROR = 3       # Error messages only
    WARNING = 6     # Warning messages (default)
    INFO = 10       # Per-unit progress messages
    DEBUG = 30      # Context spawns, commits and rejected commits


class VersionBumpPolicy(Enum):
    """When a typing context advances its version."""
    FIRST_WRITE_AFTER_SPAWN = auto()  # only the first write after a child was spawned
    EVERY_WRITE = auto()              # every write


@dataclass
class CheckOptions:
    """
    Holds options shared by the typing contexts of one run.

    Attributes:
        log_level:          Current logging level.
        log_rich_format:    If True, prefix log lines with a timestamp and level.
        version_bump:       Version bookkeeping used to detect stale children.
    """
    log_level: LogLevel = LogLevel.WARNING
    log_rich_format: bool = False
    version_bump: VersionBumpPolicy = VersionBumpPolicy.FIRST_WRITE_AFTER_SPAWN

    @staticmethod
    def default() -> 'CheckOptions':
        """Create CheckOptions with default settings."""
        return CheckOptions(log_level=LogLevel.WARNING)
