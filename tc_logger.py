"""
Stderr reporting for the type checker, gated by `CheckOptions.log_level`.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

import sys
import time
from typing import Optional

from tc_options import CheckOptions, LogLevel


def log(options: Optional[CheckOptions], log_level: LogLevel, message: str) -> None:
    """
    Print `message` to stderr unless `options.log_level` is below `log_level`.

    Without options the defaults apply. With `log_rich_format` each line gets
    a timestamp and a bracketed level tag.
    """
    if options is None:
        options = CheckOptions.default()
    if options.log_level < log_level:
        return
    prefix = ""
    if options.log_rich_format:
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        prefix = f"{timestamp} [{log_level.name}] "
    print(f"{prefix}{message}", file=sys.stderr)


def log_error(options: Optional[CheckOptions], message: str) -> None:
    log(options, LogLevel.ERROR, message)


def log_info(options: Optional[CheckOptions], message: str) -> None:
    log(options, LogLevel.INFO, message)


def log_debug(options: Optional[CheckOptions], message: str) -> None:
    log(options, LogLevel.DEBUG, message)


def log_stage(options: Optional[CheckOptions], stage: str, unit: Optional[str] = None) -> None:
    """Announce a stage at INFO, e.g. `Type-checking unit 'app'`."""
    if unit:
        log(options, LogLevel.INFO, f"{stage} unit '{unit}'")
    else:
        log(options, LogLevel.INFO, f"{stage}...")
