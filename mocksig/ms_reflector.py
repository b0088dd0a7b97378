#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

"""
Canonical type signatures for generated stand-in code.

Turns the declared type of a parameter or return value into the string a
code generator should write back into a synthesized declaration:

    None            no declared type
    int             builtin type, never qualified
    \\Foo\\Bar        reference type, anchored at the namespace root
    ?\\Foo           nullable type (top level only)
    \\A|\\B|null      union, members in declared order
    static          implementing-subclass placeholder, never qualified

`self` is never emitted: it is replaced with the declaring class.

Runtimes before structured type descriptors are handled by a legacy
strategy chosen once per call (see TypeHintStrategy).
"""

import re
from enum import Enum, auto
from typing import Optional

from ms_context import ReflectContext
from ms_handles import MethodHandle, ParameterHandle
from ms_internal_error import InternalReflectorError
from ms_logger import log_debug, log_info, log_warning
from ms_runtime import HostRuntime
from ms_types import (
    ARRAY_TYPE_NAME,
    LEGACY_SCALAR_TYPE_NAMES,
    SELF_TYPE_NAME,
    STATIC_TYPE_NAME,
    NamedType,
    TypeDescriptor,
    UnionType,
)

NAMESPACE_ROOT = "\\"
NULLABLE_PREFIX = "?"
UNION_SEPARATOR = "|"


class TypeHintStrategy(Enum):
    LEGACY_ARRAY = auto()           # primitive-array flag, before union typing
    LEGACY_TEXT_HINT = auto()       # free-text description (compatibility mode)
    LEGACY_CLASS_ACCESSOR = auto()  # class accessor, before structured typing
    STRUCTURED = auto()             # type descriptors


def _context(context: Optional[ReflectContext]) -> ReflectContext:
    return context if context is not None else ReflectContext.default()


def _qualify(name: str) -> str:
    return f"{NAMESPACE_ROOT}{name}"


def is_array(param: ParameterHandle, *, context: Optional[ReflectContext] = None) -> bool:
    """
    Determine if the parameter is typed exactly as the primitive array type.
    """
    ctx = _context(context)
    if not ctx.runtime.has_named_types:
        return bool(getattr(param, "array_hint", False))

    t = getattr(param, "type", None)
    return isinstance(t, NamedType) and t.name == ARRAY_TYPE_NAME


def select_type_hint_strategy(param: ParameterHandle, runtime: HostRuntime) -> TypeHintStrategy:
    """
    Pick the introspection model the parameter must be resolved with.

    Each legacy strategy belongs to a distinct runtime generation, so the
    order below only matters for handles that advertise several
    capabilities at once. Capabilities a handle does not expose count as
    absent.
    """
    if not runtime.has_union_types and getattr(param, "array_hint", False):
        return TypeHintStrategy.LEGACY_ARRAY
    if getattr(param, "typehint_text", None) is not None:
        return TypeHintStrategy.LEGACY_TEXT_HINT
    if not runtime.has_structured_types:
        return TypeHintStrategy.LEGACY_CLASS_ACCESSOR
    return TypeHintStrategy.STRUCTURED


def _dump_type_hint(param: ParameterHandle, ctx: ReflectContext) -> Optional[str]:
    """
    Extract the hint from the parameter's debug dump, e.g.

        Parameter #0 [ <required> self $other ]

    Returns None when the dump has no hint or does not match.
    """
    name = getattr(param, "name", None)
    if not name:
        return None
    pattern = (
        r"^Parameter #[0-9]+ \[ <(required|optional)> (?P<typehint>\S+ )?.*\$"
        + re.escape(name)
        + r" .*\]$"
    )
    dump = str(param)
    m = re.match(pattern, dump)
    if m is None:
        log_warning(ctx, f"Unrecognized dump for parameter '${name}': {dump!r}, using class accessor")
        return None
    if not m.group("typehint"):
        log_debug(ctx, f"No hint in dump of parameter '${name}', using class accessor")
        return None
    return m.group("typehint").strip()


def _resolve_legacy_type_hint(
        strategy: TypeHintStrategy,
        param: ParameterHandle,
        ctx: ReflectContext,
) -> Optional[str]:
    if strategy is TypeHintStrategy.LEGACY_ARRAY:
        return ARRAY_TYPE_NAME

    if strategy is TypeHintStrategy.LEGACY_TEXT_HINT:
        text = getattr(param, "typehint_text", None)
        if not text:
            return None
        # scalar hints from the free-text description are not reliable
        if text in LEGACY_SCALAR_TYPE_NAMES:
            log_info(ctx, f"Discarding scalar hint '{text}' of parameter '${getattr(param, 'name', '?')}'")
            return None
        return _qualify(text)

    if strategy is TypeHintStrategy.LEGACY_CLASS_ACCESSOR:
        type_hint = None
        if ctx.runtime.has_broken_class_accessor:
            type_hint = _dump_type_hint(param, ctx)
        if type_hint is None:
            type_hint = getattr(param, "class_name", None)
        if not type_hint:
            return None
        if type_hint == SELF_TYPE_NAME:
            type_hint = getattr(param, "declaring_class", None) or type_hint
        return _qualify(type_hint)

    raise InternalReflectorError(
        f"[IRE-0010] no legacy resolution for strategy {strategy.name}",
        subject=f"${getattr(param, 'name', '?')}",
    )


def type_to_string(t: TypeDescriptor, declaring_class: str) -> str:
    """
    Canonical string of a structured type descriptor.

    Union members are resolved independently and joined in declared order;
    nested unions flatten into the same list.
    """
    if isinstance(t, UnionType):
        return UNION_SEPARATOR.join(type_to_string(m, declaring_class) for m in t.members)

    # The first structured generation has no name accessor, only a string form.
    name = t.name if isinstance(t, NamedType) else str(t)

    if getattr(t, "builtin", False) or name == STATIC_TYPE_NAME:
        return name
    return _qualify(declaring_class if name == SELF_TYPE_NAME else name)


def _decorate_nullable(
        type_hint: str,
        t: TypeDescriptor,
        without_nullable: bool,
        runtime: HostRuntime,
) -> str:
    if without_nullable or not runtime.has_nullable_types or not getattr(t, "allows_null", False):
        return type_hint
    return f"{NULLABLE_PREFIX}{type_hint}"


def get_type_hint(
        param: ParameterHandle,
        without_nullable: bool = False,
        *,
        context: Optional[ReflectContext] = None,
) -> Optional[str]:
    """
    Compute the string representation for the parameter type.

    Args:
        param:              The parameter handle.
        without_nullable:   If True, never emit the leading `?`.
        context:            Resolver options; defaults to ReflectContext.default().

    Returns:
        The canonical signature, or None when no type is declared.
    """
    ctx = _context(context)
    name = getattr(param, "name", "?")
    declaring_class = getattr(param, "declaring_class", "")
    strategy = select_type_hint_strategy(param, ctx.runtime)
    log_debug(ctx, f"Parameter '${name}' of '{declaring_class}': {strategy.name}")

    if strategy is not TypeHintStrategy.STRUCTURED:
        return _resolve_legacy_type_hint(strategy, param, ctx)

    t = getattr(param, "type", None)
    if t is None:
        return None

    type_hint = type_to_string(t, declaring_class)
    result = _decorate_nullable(type_hint, t, without_nullable, ctx.runtime)
    log_debug(ctx, f"Parameter '${name}' resolved to '{result}'")
    return result


def get_return_type(
        method: MethodHandle,
        without_nullable: bool = False,
        *,
        context: Optional[ReflectContext] = None,
) -> Optional[str]:
    """
    Compute the string representation for the return type.

    Return types are dropped entirely on the compatibility-mode runtime and
    on runtimes without return type introspection.
    """
    ctx = _context(context)
    label = f"{getattr(method, 'declaring_class', '')}::{getattr(method, 'name', '?')}"
    t = getattr(method, "return_type", None)
    if getattr(method, "return_type_text", None) is not None or not ctx.runtime.has_return_types or t is None:
        log_debug(ctx, f"Method '{label}' has no usable return type")
        return None

    type_hint = type_to_string(t, getattr(method, "declaring_class", ""))
    result = _decorate_nullable(type_hint, t, without_nullable, ctx.runtime)
    log_debug(ctx, f"Method '{label}' returns '{result}'")
    return result
