#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from types import SimpleNamespace

from ms_context import LogLevel, ReflectContext
from ms_internal_error import InternalReflectorError
from ms_reflector import get_return_type, get_type_hint
from ms_handles import MethodHandle, ParameterHandle
from ms_runtime import HostRuntime
from ms_types import builtin, named


def test_resolver_debug_trace(capsys):
    ctx = ReflectContext(log_level=LogLevel.DEBUG)
    p = ParameterHandle(name="dep", declaring_class="Foo", type=named("Bar"))
    assert get_type_hint(p, context=ctx) == "\\Bar"
    err = capsys.readouterr().err
    assert "Parameter '$dep' of 'Foo': STRUCTURED" in err
    assert "resolved to '\\Bar'" in err


def test_return_type_debug_trace(capsys):
    ctx = ReflectContext(log_level=LogLevel.DEBUG)
    assert get_return_type(MethodHandle(name="run", declaring_class="Foo"), context=ctx) is None
    assert "Method 'Foo::run' has no usable return type" in capsys.readouterr().err


def test_rich_format_prefix(capsys):
    ctx = ReflectContext(log_level=LogLevel.DEBUG, log_rich_format=True)
    get_type_hint(ParameterHandle(name="dep", declaring_class="Foo"), context=ctx)
    assert "[DEBUG] Parameter '$dep' of 'Foo': STRUCTURED" in capsys.readouterr().err


def test_discarded_scalar_hint_is_reported_at_info(capsys):
    p = ParameterHandle(name="n", declaring_class="Foo", type=builtin("int"), typehint_text="int")

    assert get_type_hint(p, context=ReflectContext(log_level=LogLevel.WARNING)) is None
    assert capsys.readouterr().err == ""

    assert get_type_hint(p, context=ReflectContext(log_level=LogLevel.INFO)) is None
    assert "Discarding scalar hint 'int' of parameter '$n'" in capsys.readouterr().err


def test_resolver_logs_dump_fallback(capsys):
    ctx = ReflectContext(runtime=HostRuntime(50329), log_level=LogLevel.DEBUG)
    p = ParameterHandle(name="dep", declaring_class="Foo", class_name="Bar")
    assert get_type_hint(p, context=ctx) == "\\Bar"
    assert "No hint in dump of parameter '$dep'" in capsys.readouterr().err


def test_unrecognized_dump_warns_and_uses_class_accessor(capsys):
    ctx = ReflectContext(runtime=HostRuntime(50329), log_level=LogLevel.WARNING)
    # a foreign handle whose text form is not the runtime's dump format
    p = SimpleNamespace(name="dep", declaring_class="Foo", class_name="Bar")
    assert get_type_hint(p, context=ctx) == "\\Bar"
    assert "Unrecognized dump for parameter '$dep'" in capsys.readouterr().err


def test_resolver_is_silent_by_default(capsys):
    p = ParameterHandle(name="dep", declaring_class="Foo", type=named("Bar"))
    get_type_hint(p)
    assert capsys.readouterr().err == ""


def test_internal_error_format():
    assert InternalReflectorError("bad").format() == "internal reflector error: [IRE-9999] bad"
    err = InternalReflectorError("[IRE-0010] no branch", subject="$x")
    assert err.format() == "$x: internal reflector error: [IRE-0010] no branch"
