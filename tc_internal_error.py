#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

# tc_internal_error.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Optional

from tc_ast import Span


@dataclass(frozen=True)
class ICELocation:
    filename: Optional[str]
    span: Optional[Span]


class InternalCheckerError(RuntimeError):
    """
    ICE = checker bug / violated calling discipline.
    Not for user mistakes (those are TypeErrorRecords in the error log).
    """

    code = "ICE-9999"

    def __init__(self, message: str, loc: ICELocation | None = None):
        super().__init__(message)
        self.message = message
        self.loc = loc

    def format(self) -> str:
        message = self.message
        if "[ICE-" not in message:
            message = f"[{self.code}] {message}"
        if self.loc and self.loc.filename:
            if self.loc.span is not None:
                return f"{self.loc.filename}:{self.loc.span.start_line}:{self.loc.span.start_column}: internal checker error: {message}"
            return f"{self.loc.filename}: internal checker error: {message}"
        return f"internal checker error: {message}"


def _node_location(node: Any) -> ICELocation:
    return ICELocation(filename=None, span=getattr(node, "span", None))


class NodeNotTyped(InternalCheckerError):
    """`type_of` reached the root without finding a binding."""

    code = "ICE-0010"

    def __init__(self, node: Any):
        super().__init__(f"[{self.code}] unknown node for typing: {node!r}", _node_location(node))
        self.node = node


class VariableNotTyped(InternalCheckerError):
    """`var_type_of` reached the root without finding a binding."""

    code = "ICE-0011"

    def __init__(self, var: Hashable):
        super().__init__(f"[{self.code}] unknown variable for typing: {var!r}")
        self.var = var


class StaleContext(InternalCheckerError):
    """The parent advanced after the child was spawned."""

    code = "ICE-0020"

    def __init__(self, expected_version: int, actual_version: int):
        super().__init__(
            f"[{self.code}] parent modified since child was spawned "
            f"(snapshot version {expected_version}, parent now at {actual_version})"
        )
        self.expected_version = expected_version
        self.actual_version = actual_version


class CommitOnRoot(InternalCheckerError):
    """`commit` on a context without a parent."""

    code = "ICE-0030"

    def __init__(self):
        super().__init__(f"[{self.code}] cannot commit a root typing context")
