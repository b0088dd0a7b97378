#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from ms_context import LogLevel, ReflectContext
from ms_handles import MethodHandle, ParameterHandle
from ms_runtime import HostRuntime


# One representative release per introspection generation.
GENERATIONS = {
    "5.3": HostRuntime(50329),   # broken class accessor
    "5.6": HostRuntime(50640),   # class accessor
    "7.0": HostRuntime(70033),   # bare structured types
    "7.4": HostRuntime(70433),   # named types, nullable
    "8.0": HostRuntime(80030),   # union types
}


def context_for(runtime: HostRuntime) -> ReflectContext:
    return ReflectContext(runtime=runtime, log_level=LogLevel.SILENT)


@pytest.fixture
def modern() -> ReflectContext:
    return context_for(HostRuntime(80030))


@pytest.fixture(params=sorted(GENERATIONS), ids=lambda v: f"runtime-{v}")
def any_generation(request) -> ReflectContext:
    return context_for(GENERATIONS[request.param])


@pytest.fixture
def make_param():
    """Build a parameter declared on `App\\Service` unless told otherwise.

    Usage:
        def test_something(make_param):
            p = make_param(named("Foo"), name="foo")
    """

    def _make(type=None, *, name: str = "value", declaring_class: str = "App\\Service", **kwargs) -> ParameterHandle:
        return ParameterHandle(name=name, declaring_class=declaring_class, type=type, **kwargs)

    return _make


@pytest.fixture
def make_method():
    def _make(return_type=None, *, name: str = "run", declaring_class: str = "App\\Service", **kwargs) -> MethodHandle:
        return MethodHandle(name=name, declaring_class=declaring_class, return_type=return_type, **kwargs)

    return _make
