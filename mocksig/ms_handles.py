#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

"""
Introspection handles supplied by the host runtime.

A handle is a read-only view of one parameter or method. Capabilities that
only some runtime generations expose are modelled as optional fields: a
field left at None means the handle does not offer that accessor.
"""

from dataclasses import dataclass
from typing import Optional

from ms_types import TypeDescriptor, format_type


@dataclass(frozen=True)
class ParameterHandle:
    """
    One function/method parameter.

    name            : parameter name, without the `$` sigil
    declaring_class : qualified name of the class declaring the function
    type            : declared type descriptor, or None when untyped
    position        : zero-based position in the parameter list
    optional        : True when the parameter has a default value
    array_hint      : legacy primitive-array flag
    class_name      : legacy class accessor result (None when no class hint)
    typehint_text   : legacy free-text type description; only present on
                      runtimes running the managed-runtime compatibility mode
    hint_text       : the hint as written in source, used by the debug dump
    """
    name: str
    declaring_class: str
    type: Optional[TypeDescriptor] = None
    position: int = 0
    optional: bool = False
    array_hint: bool = False
    class_name: Optional[str] = None
    typehint_text: Optional[str] = None
    hint_text: Optional[str] = None

    def has_type(self) -> bool:
        return self.type is not None

    def has_typehint_text(self) -> bool:
        return self.typehint_text is not None

    def __str__(self) -> str:
        # Parameter #0 [ <required> Foo $bar ]
        requirement = "optional" if self.optional else "required"
        hint = f"{self.hint_text} " if self.hint_text else ""
        return f"Parameter #{self.position} [ <{requirement}> {hint}${self.name} ]"


@dataclass(frozen=True)
class MethodHandle:
    """
    One method, scoped to its return type.

    return_type_text is the legacy return-type accessor of the
    managed-runtime compatibility mode; its presence alone disables
    return type resolution.
    """
    name: str
    declaring_class: str
    return_type: Optional[TypeDescriptor] = None
    return_type_text: Optional[str] = None

    def has_return_type(self) -> bool:
        return self.return_type is not None

    def has_return_type_text(self) -> bool:
        return self.return_type_text is not None

    def __str__(self) -> str:
        lines = [f"Method [ <user> public method {self.name} ] {{"]
        if self.return_type is not None:
            lines.append(f"  - Return [ {format_type(self.return_type)} ]")
        lines.append("}")
        return "\n".join(lines)
