#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

# ========================================
# Type values recorded by the checker.
# ========================================
#
# The typing context stores these opaquely; they are here so engines and the
# dump output share one vocabulary.


class Type:
    """
    Base class for all semantic types.
    Used only as a common marker; concrete types are dataclasses below.
    """
    pass


@dataclass(frozen=True)
class InstanceType(Type):
    name: str  # "Integer", "String", "Array", ...
    args: Tuple[Type, ...] = ()


@dataclass(frozen=True)
class UnionType(Type):
    members: Tuple[Type, ...]


@dataclass(frozen=True)
class ProcType(Type):
    params: Tuple[Type, ...]
    result: Type


@dataclass(frozen=True)
class AnyType(Type):
    pass


@dataclass(frozen=True)
class NilType(Type):
    pass


# --- helpers ---

_INSTANCE_CACHE: Dict[str, InstanceType] = {}


def get_instance_type(name: str) -> InstanceType:
    """
    Get (or create) a canonical non-generic InstanceType for a given name.
    """
    if name not in _INSTANCE_CACHE:
        _INSTANCE_CACHE[name] = InstanceType(name)
    return _INSTANCE_CACHE[name]


def union_of(*types: Type) -> Type:
    """
    Build a union, flattening nested unions and dropping duplicates.
    A single remaining member is returned as is.
    """
    members: List[Type] = []
    for t in types:
        inner = t.members if isinstance(t, UnionType) else (t,)
        for m in inner:
            if m not in members:
                members.append(m)
    if not members:
        raise ValueError("union_of() needs at least one type")
    if len(members) == 1:
        return members[0]
    return UnionType(tuple(members))


# --- type stringification for dumps and diagnostics ---

def format_type(t: Any) -> str:
    if t is None:
        return "<none>"
    elif isinstance(t, InstanceType):
        if t.args:
            return f"{t.name}[{', '.join(format_type(a) for a in t.args)}]"
        return t.name
    elif isinstance(t, UnionType):
        return " | ".join(format_type(m) for m in t.members)
    elif isinstance(t, ProcType):
        params_str = ", ".join(format_type(p) for p in t.params)
        return f"^({params_str}) -> {format_type(t.result)}"
    elif isinstance(t, AnyType):
        return "any"
    elif isinstance(t, NilType):
        return "nil"
    else:
        # Types coming from another model
        return repr(t)
