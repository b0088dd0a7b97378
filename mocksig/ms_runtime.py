#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

"""
Host runtime generations.

The introspection model of the host runtime changed several times. Each
generation is identified by a numeric version id encoded as
``major * 10000 + minor * 100 + release`` (so 7.4.33 is 70433), and each
capability the resolver branches on is a threshold over that id.
"""

import re
from dataclasses import dataclass

# First release with a correct class accessor for `self` hints.
FIXED_CLASS_ACCESSOR_VERSION_ID = 50401
# First release with structured type descriptors and return types.
STRUCTURED_TYPES_VERSION_ID = 70000
# First release with named types and nullable markers.
NAMED_TYPES_VERSION_ID = 70100
# First release with union types.
UNION_TYPES_VERSION_ID = 80000

DEFAULT_VERSION_ID = UNION_TYPES_VERSION_ID

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)(?:\.(\d+))?(?:[-+~].*)?$")


@dataclass
class RuntimeVersionError(ValueError):
    code: str
    details: str = ""

    def __str__(self) -> str:
        return f"[{self.code}] {self.details}"


@dataclass(frozen=True)
class HostRuntime:
    """
    A runtime generation, as seen by the resolver.
    """
    version_id: int = DEFAULT_VERSION_ID

    @staticmethod
    def current() -> 'HostRuntime':
        return HostRuntime(DEFAULT_VERSION_ID)

    @staticmethod
    def from_version_string(version: str) -> 'HostRuntime':
        """
        Parse a version string like '7.4.33' or '5.3.29-1ubuntu4'.

        Raises RuntimeVersionError if the string is empty, malformed, or has
        a minor/release component outside 0..99.
        """
        text = (version or "").strip()
        if not text:
            raise RuntimeVersionError("RTV-0010", "empty version string")
        m = _VERSION_RE.match(text)
        if m is None:
            raise RuntimeVersionError("RTV-0020", f"malformed version string '{text}'")
        major = int(m.group(1))
        minor = int(m.group(2))
        release = int(m.group(3)) if m.group(3) is not None else 0
        if minor > 99 or release > 99:
            raise RuntimeVersionError("RTV-0030", f"version component out of range in '{text}'")
        return HostRuntime(major * 10000 + minor * 100 + release)

    @property
    def version_string(self) -> str:
        major, rest = divmod(self.version_id, 10000)
        minor, release = divmod(rest, 100)
        return f"{major}.{minor}.{release}"

    @property
    def has_broken_class_accessor(self) -> bool:
        return self.version_id < FIXED_CLASS_ACCESSOR_VERSION_ID

    @property
    def has_structured_types(self) -> bool:
        return self.version_id >= STRUCTURED_TYPES_VERSION_ID

    @property
    def has_return_types(self) -> bool:
        return self.version_id >= STRUCTURED_TYPES_VERSION_ID

    @property
    def has_named_types(self) -> bool:
        return self.version_id >= NAMED_TYPES_VERSION_ID

    @property
    def has_nullable_types(self) -> bool:
        return self.version_id >= NAMED_TYPES_VERSION_ID

    @property
    def has_union_types(self) -> bool:
        return self.version_id >= UNION_TYPES_VERSION_ID
