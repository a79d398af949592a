#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Tuple

from tc_diagnostics import Diagnostic
from tc_internal_error import InternalCheckerError
from tc_options import CheckOptions
from tc_typing import TypingContext


@dataclass
class CheckResult:
    """
    Result of type-checking one analysis unit.

    Contains:
      - the root typing context (confirmed types and errors)
      - the internal error that terminated the unit, if any
      - diagnostics built from the root's error log (plus one `internal`
        diagnostic when the unit was terminated)
    """
    unit_name: str
    options: CheckOptions = field(default_factory=CheckOptions.default)
    root: Optional[TypingContext] = None
    internal_error: Optional[InternalCheckerError] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def has_errors(self) -> bool:
        return any(d.kind in ("error", "internal") for d in self.diagnostics)

    def has_internal_error(self) -> bool:
        return self.internal_error is not None

    def typings(self) -> Iterator[Tuple[Any, Any]]:
        if self.root is None:
            return iter(())
        return self.root.each_typing()

    def format_dump(self) -> str:
        if self.root is None:
            return ""
        return self.root.dump()
