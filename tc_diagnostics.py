#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from tc_errors import TypeErrorRecord
from tc_internal_error import InternalCheckerError


@dataclass
class Diagnostic:
    """
    A reportable finding for one analysis unit.

    Positions follow Span: 1-based lines and columns, exclusive end.
    """
    kind: str  # "error", "warning" or "internal"
    message: str
    module_name: Optional[str] = None  # analysis unit name
    filename: Optional[str] = None

    line: Optional[int] = None
    column: Optional[int] = None
    end_line: Optional[int] = None
    end_column: Optional[int] = None

    def format(self) -> str:
        """`<abs file>:<line>:<col>(<unit>): <kind>: <message>`, dropping absent parts."""
        where = os.path.abspath(str(self.filename)) if self.filename is not None else ""
        if self.line is not None:
            where += f":{self.line}"
            if self.column is not None:
                where += f":{self.column}"
            if self.module_name is not None:
                where += f"({self.module_name})"
        prefix = f"{where}: " if where else ""
        return f"{prefix}{self.kind}: {self.message}"

    def lsp_range(self) -> Optional[Tuple[Tuple[int, int], Tuple[int, int]]]:
        """
        Zero-based ((line, character), (line, character)) range as editors
        expect it, or None without a full span.
        """
        if None in (self.line, self.column, self.end_line, self.end_column):
            return None
        return (self.line - 1, self.column - 1), (self.end_line - 1, self.end_column - 1)


def diag_from_node(
        kind: str,
        message: str,
        *,
        module_name: Optional[str],
        filename: Optional[str],
        node: Any,
) -> Diagnostic:
    line = column = end_line = end_column = None
    span = getattr(node, "span", None)
    if span is not None:
        line = span.start_line
        column = span.start_column
        end_line = span.end_line
        end_column = span.end_column
    return Diagnostic(
        kind=kind,
        message=message,
        module_name=module_name,
        filename=filename,
        line=line,
        column=column,
        end_line=end_line,
        end_column=end_column,
    )


def diag_from_error(
        error: Any,
        *,
        module_name: Optional[str],
        filename: Optional[str],
) -> Diagnostic:
    if isinstance(error, TypeErrorRecord):
        return diag_from_node(
            error.kind,
            error.message,
            module_name=module_name,
            filename=filename,
            node=error.node,
        )
    # Foreign payloads: best effort
    return diag_from_node(
        "error",
        str(error),
        module_name=module_name,
        filename=filename,
        node=getattr(error, "node", None),
    )


def diagnostics_from_context(
        ctx: Any,
        *,
        module_name: Optional[str] = None,
        filename: Optional[str] = None,
) -> List[Diagnostic]:
    """One diagnostic per entry of the context's error log, in order."""
    return [
        diag_from_error(error, module_name=module_name, filename=filename)
        for error in ctx.errors
    ]


def diag_from_internal_error(
        ice: InternalCheckerError,
        *,
        module_name: Optional[str],
        filename: Optional[str],
) -> Diagnostic:
    span = ice.loc.span if ice.loc is not None else None
    line = column = end_line = end_column = None
    if span is not None:
        line = span.start_line
        column = span.start_column
        end_line = span.end_line
        end_column = span.end_column
    return Diagnostic(
        kind="internal",
        message=ice.format(),
        module_name=module_name,
        filename=filename,
        line=line,
        column=column,
        end_line=end_line,
        end_column=end_column,
    )
