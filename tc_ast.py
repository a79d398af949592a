#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass, field
from typing import List, Optional


# ==========================
# Syntax node model
# ==========================


@dataclass
class Span:
    start_line: int
    start_column: int
    end_line: int
    end_column: int


@dataclass
class Node:
    """
    Base class for syntax nodes handed to the typing context.

    Nodes compare structurally, so two copies of `x + 1` are equal (and
    unhashable). The typing context keys them by instance via `node_key`.
    """
    span: Optional[Span] = field(default=None, repr=False, compare=False, kw_only=True)
    source: Optional[str] = field(default=None, repr=False, compare=False, kw_only=True)


def node_key(node: object) -> int:
    """Per-instance identity handle for a node."""
    return id(node)


# --- expressions ---

class Expr(Node):
    pass


@dataclass
class IntLiteral(Expr):
    value: int


@dataclass
class StringLiteral(Expr):
    value: str


@dataclass
class VarRef(Expr):
    name: str


@dataclass
class BinaryOp(Expr):
    op: str
    left: Expr
    right: Expr


@dataclass
class CallExpr(Expr):
    receiver: Optional[Expr]
    method: str
    args: List[Expr]


@dataclass
class WhenClause(Node):
    test: Expr
    body: Expr


@dataclass
class CaseExpr(Expr):
    subject: Expr
    clauses: List[WhenClause]
    else_body: Optional[Expr] = None
