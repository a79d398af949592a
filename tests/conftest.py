#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tc_ast import Node, Span
from tc_options import CheckOptions, LogLevel
from tc_typing import TypingContext


def located(node: Node, line: int, column: int, source: str) -> Node:
    """Attach a 1-based span and source text to a node, the way a parser would.

    Usage:
        x = located(VarRef("x"), 3, 4, "x")
    """
    src_lines = source.split("\n")
    end_line = line + len(src_lines) - 1
    if len(src_lines) == 1:
        end_column = column + len(source)
    else:
        end_column = len(src_lines[-1]) + 1
    node.span = Span(start_line=line, start_column=column, end_line=end_line, end_column=end_column)
    node.source = source
    return node


@pytest.fixture
def root() -> TypingContext:
    return TypingContext.create_root()


@pytest.fixture
def debug_options() -> CheckOptions:
    return CheckOptions(log_level=LogLevel.DEBUG)


def has_error_code(diagnostics, code: str) -> bool:
    """Check if any diagnostic contains the given error code.

    Args:
        diagnostics: List of Diagnostic objects
        code: Error code string like "ICE-0020" or "[ICE-0020]"

    Returns:
        True if any diagnostic message contains the error code
    """
    if not code.startswith("["):
        code = f"[{code}]"
    return any(code in d.message for d in diagnostics)
