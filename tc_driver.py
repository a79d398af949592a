#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from typing import Callable, Iterable, List, Optional, Tuple

from tc_analysis import CheckResult
from tc_diagnostics import diag_from_internal_error, diagnostics_from_context
from tc_internal_error import ICELocation, InternalCheckerError
from tc_logger import log_debug, log_error, log_info, log_stage
from tc_options import CheckOptions
from tc_typing import NodeSummarizer, TypingContext

# An engine walks one analysis unit, writing into the root context it is given.
Engine = Callable[[TypingContext], None]


class TypeCheckDriver:
    """
    Runs type-checking engines over analysis units.

    Each unit gets its own root TypingContext. Type errors recorded by the
    engine become diagnostics; an internal checker error terminates only the
    unit that raised it and is reported as an `internal` diagnostic.
    """

    def __init__(
        self,
        options: CheckOptions | None = None,
        summarizer: NodeSummarizer | None = None,
    ):
        self.options = options or CheckOptions.default()
        self.summarizer = summarizer

    def check(self, unit_name: str, engine: Engine, *, filename: Optional[str] = None) -> CheckResult:
        log_stage(self.options, "Type-checking", unit_name)
        root = TypingContext.create_root(options=self.options, summarizer=self.summarizer)
        result = CheckResult(unit_name=unit_name, options=self.options, root=root)

        try:
            engine(root)
        except InternalCheckerError as e:
            # The diagnostic carries the filename itself; the message stays bare
            result.diagnostics.append(
                diag_from_internal_error(e, module_name=unit_name, filename=filename)
            )
            if filename is not None and (e.loc is None or e.loc.filename is None):
                e.loc = ICELocation(filename=filename, span=e.loc.span if e.loc is not None else None)
            log_error(self.options, e.format())
            result.internal_error = e
            return result

        result.diagnostics.extend(
            diagnostics_from_context(root, module_name=unit_name, filename=filename)
        )
        log_debug(self.options, f"Unit '{unit_name}': {len(root.node_type_map)} typed node(s)")
        log_info(
            self.options,
            f"Type-checking complete for '{unit_name}': {len(result.diagnostics)} diagnostic(s)",
        )
        return result

    def check_all(self, units: Iterable[Tuple[str, Engine, Optional[str]]]) -> List[CheckResult]:
        """Check `(unit_name, engine, filename)` triples in order; filename may be None."""
        return [
            self.check(unit_name, engine, filename=filename)
            for unit_name, engine, filename in units
        ]
