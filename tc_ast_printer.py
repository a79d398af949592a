#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from typing import Any


def summarize_node(node: Any) -> str:
    """
    One-line summary of a node: `line:column:first source line`.

    Works on anything shaped like a Node (`span` and `source` attributes are
    both optional). Without a span the position renders as `?:?`; without
    source text the class name stands in for the excerpt.
    """
    span = getattr(node, "span", None)
    if span is not None:
        position = f"{span.start_line}:{span.start_column}"
    else:
        position = "?:?"

    source = getattr(node, "source", None)
    if source:
        excerpt = source.split("\n")[0]
    else:
        excerpt = node.__class__.__name__

    return f"{position}:{excerpt}"
