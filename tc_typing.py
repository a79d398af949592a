"""
Typing context: the versioned store of inferred node types and type errors.

Contexts form a tree. The root holds confirmed results; a child is spawned for
each speculative attempt (overload candidate, case-branch narrowing, ...),
written to freely, and either committed back into its parent or dropped.

Staleness is tracked with versions. A child remembers the parent's version at
spawn time and may only commit while the parent is still at that version.
With the default policy a context bumps its version on the first write after
it spawned a child, so any write to the parent (including another child's
commit) invalidates every child spawned before it.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Iterator, List, Optional, TextIO, Tuple, TypeVar

from tc_ast import node_key
from tc_ast_printer import summarize_node
from tc_internal_error import CommitOnRoot, NodeNotTyped, StaleContext, VariableNotTyped
from tc_logger import log_debug
from tc_options import CheckOptions, VersionBumpPolicy
from tc_types import format_type

T = TypeVar("T")
NodeSummarizer = Callable[[Any], str]


class TypingContext:
    def __init__(
        self,
        parent: Optional[TypingContext] = None,
        options: Optional[CheckOptions] = None,
        summarizer: Optional[NodeSummarizer] = None,
    ):
        self.parent = parent
        if parent is not None:
            self.options = options or parent.options
            self.summarizer = summarizer or parent.summarizer
            self.parent_snapshot_version = parent.version
            self.version = parent.version
            # Children created directly still count as spawned
            parent.pending_child = True
        else:
            self.options = options or CheckOptions.default()
            self.summarizer = summarizer or summarize_node
            self.parent_snapshot_version = 0
            self.version = 0
        self.pending_child = False

        # Keyed by node_key(node); _nodes keeps the node alive so its id stays unique.
        self.node_type_map: Dict[int, Any] = {}
        self._nodes: Dict[int, Any] = {}
        self.var_type_map: Dict[Hashable, Any] = {}
        self.error_log: List[Any] = []

    @classmethod
    def create_root(
        cls,
        options: Optional[CheckOptions] = None,
        summarizer: Optional[NodeSummarizer] = None,
    ) -> TypingContext:
        return cls(parent=None, options=options, summarizer=summarizer)

    def __repr__(self) -> str:
        return (
            f"<TypingContext depth={self.depth} version={self.version} "
            f"types={len(self.node_type_map)} errors={len(self.error_log)}>"
        )

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def depth(self) -> int:
        depth = 0
        ctx = self.parent
        while ctx is not None:
            depth += 1
            ctx = ctx.parent
        return depth

    @property
    def errors(self) -> Tuple[Any, ...]:
        return tuple(self.error_log)

    # ------------------------------------------------------------------
    # Branching
    # ------------------------------------------------------------------

    def spawn_child(self, fn: Optional[Callable[[TypingContext], T]] = None) -> TypingContext | T:
        """
        Spawn a speculative child of this context.

        If `fn` is given it is called with the child and its result is
        returned instead of the child. The child is neither committed nor
        discarded automatically.
        """
        child = self.__class__(parent=self)
        log_debug(self.options, f"typing: spawned child at version {self.version}")

        if fn is not None:
            return fn(child)
        return child

    def commit(self) -> None:
        """
        Fold this context's bindings and errors into its parent.

        Raises CommitOnRoot without a parent, and StaleContext when the parent
        advanced since this context was spawned. The context must not be used
        after a successful commit.
        """
        parent = self.parent
        if parent is None:
            raise CommitOnRoot()
        if parent.version != self.parent_snapshot_version:
            log_debug(
                self.options,
                f"typing: rejected commit (snapshot {self.parent_snapshot_version}, parent {parent.version})",
            )
            raise StaleContext(self.parent_snapshot_version, parent.version)

        for node, type_ in self.each_typing():
            parent.record_type(node, type_)
        for var, type_ in self.var_type_map.items():
            parent.record_var_type(var, type_)
        parent.error_log.extend(self.error_log)

        log_debug(
            self.options,
            f"typing: committed {len(self.node_type_map)} type(s), "
            f"{len(self.var_type_map)} variable(s), {len(self.error_log)} error(s) "
            f"into version {self.parent_snapshot_version}",
        )

    # ------------------------------------------------------------------
    # Node types
    # ------------------------------------------------------------------

    def record_type(self, node: Any, type_: T) -> T:
        key = node_key(node)
        self.node_type_map[key] = type_
        self._nodes[key] = node
        self._note_write()
        return type_

    def has_type(self, node: Any) -> bool:
        return node_key(node) in self.node_type_map

    def type_of(self, node: Any) -> Any:
        key = node_key(node)
        ctx: Optional[TypingContext] = self
        while ctx is not None:
            if key in ctx.node_type_map:
                return ctx.node_type_map[key]
            ctx = ctx.parent
        raise NodeNotTyped(node)

    def each_typing(self) -> Iterator[Tuple[Any, Any]]:
        """Yield (node, type) pairs recorded locally, in recording order."""
        for key, node in self._nodes.items():
            yield node, self.node_type_map[key]

    # ------------------------------------------------------------------
    # Variable types
    # ------------------------------------------------------------------

    def record_var_type(self, var: Hashable, type_: T) -> T:
        self.var_type_map[var] = type_
        self._note_write()
        return type_

    def has_var_type(self, var: Hashable) -> bool:
        return var in self.var_type_map

    def var_type_of(self, var: Hashable) -> Any:
        ctx: Optional[TypingContext] = self
        while ctx is not None:
            if var in ctx.var_type_map:
                return ctx.var_type_map[var]
            ctx = ctx.parent
        raise VariableNotTyped(var)

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    def add_error(self, error: Any) -> None:
        self.error_log.append(error)

    # ------------------------------------------------------------------
    # Debugging
    # ------------------------------------------------------------------

    def dump(self, out: Optional[TextIO] = None) -> str:
        """
        Render local types and errors, one line each:

            Typing:
              3:4:x + 1 => Integer
            Errors:
              5:1:foo(x) => no method 'foo' for Integer

        The text is returned, and also written to `out` when given.
        """
        lines = ["Typing:"]
        for node, type_ in self.each_typing():
            lines.append(f"  {self.summarizer(node)} => {format_type(type_)}")
        lines.append("Errors:")
        for error in self.error_log:
            node = getattr(error, "node", None)
            summary = self.summarizer(node) if node is not None else "?:?"
            lines.append(f"  {summary} => {error}")

        text = "\n".join(lines) + "\n"
        if out is not None:
            out.write(text)
        return text

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _note_write(self) -> None:
        if self.options.version_bump is VersionBumpPolicy.EVERY_WRITE or self.pending_child:
            self.version += 1
            self.pending_child = False
