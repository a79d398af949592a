#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, eq=False)
class TypeErrorRecord:
    """
    A user-visible type error found by the engine.

    The typing context only appends and replays these; the diagnostics layer
    reads `node` for the source range and `message` for the text.
    """
    node: Any
    message: str
    kind: str = "error"  # "error" or "warning"

    def __str__(self) -> str:
        return self.message
