#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

# ms_internal_error.py
from __future__ import annotations

from typing import Optional


class InternalReflectorError(RuntimeError):
    """
    IRE = resolver bug / violated dispatch invariant.
    Not for unusual handles (those degrade to "no type").
    """

    def __init__(self, message: str, subject: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.subject = subject

    def format(self) -> str:
        message = self.message
        if not "[IRE-" in message:
            message = f"[IRE-9999] {message}"
        if self.subject:
            return f"{self.subject}: internal reflector error: {message}"
        return f"internal reflector error: {message}"
