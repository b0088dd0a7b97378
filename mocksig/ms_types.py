#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass
from typing import Optional, Tuple

# ==================================================
# Declared-type descriptors, as exposed by the host.
# ==================================================

ARRAY_TYPE_NAME = "array"
SELF_TYPE_NAME = "self"
STATIC_TYPE_NAME = "static"

# Scalar names that the legacy free-text description reports but that
# are not honored as hints.
LEGACY_SCALAR_TYPE_NAMES = ("int", "integer", "float", "string", "bool", "boolean")


class TypeDescriptor:
    """
    Base class for all type descriptors.
    Used only as a common marker; concrete descriptors are dataclasses below.
    """
    allows_null: bool


@dataclass(frozen=True)
class NamedType(TypeDescriptor):
    name: str  # "int", "Foo\\Bar", "self", ...
    builtin: bool = False
    allows_null: bool = False


@dataclass(frozen=True)
class BareType(TypeDescriptor):
    """
    Descriptor of the first structured generation: no name accessor, only
    a string form.
    """
    text: str
    builtin: bool = False
    allows_null: bool = False

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class UnionType(TypeDescriptor):
    members: Tuple[TypeDescriptor, ...]
    allows_null: bool = False


# --- helpers ---

def named(name: str, *, nullable: bool = False) -> NamedType:
    """Reference (non-builtin) named type."""
    return NamedType(name, builtin=False, allows_null=nullable)


def builtin(name: str, *, nullable: bool = False) -> NamedType:
    return NamedType(name, builtin=True, allows_null=nullable)


def union(*members: TypeDescriptor) -> UnionType:
    """
    Union of the given members, in declared order.
    Nullable when any member is the builtin `null` or allows null itself.
    """
    allows_null = any(
        m.allows_null or (isinstance(m, NamedType) and m.builtin and m.name == "null")
        for m in members
    )
    return UnionType(tuple(members), allows_null=allows_null)


# --- type stringification for debugging ---

def format_type(t: Optional[TypeDescriptor]) -> str:
    if t is None:
        return "<none>"
    elif isinstance(t, UnionType):
        return "|".join(format_type(m) for m in t.members)
    elif isinstance(t, NamedType):
        return f"?{t.name}" if t.allows_null else t.name
    elif isinstance(t, BareType):
        return f"?{t.text}" if t.allows_null else t.text
    else:
        # Fallback (should not happen)
        return repr(t)
