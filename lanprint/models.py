"""Printer, print request and print outcome types."""
from __future__ import annotations

import math
import re
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def normalize_copies(value: Any) -> int:
    """Coerce a requested copy count to an integer >= 1.

    Accepts ints, floats and strings with a leading integer ("3", "2.7",
    "4 copies"). Anything else, or a result below 1, yields 1.
    """
    if isinstance(value, bool) or value is None:
        return 1
    if isinstance(value, int):
        copies = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return 1
        copies = int(value)
    else:
        match = _LEADING_INT.match(str(value))
        if not match:
            return 1
        copies = int(match.group(1))
    return max(1, copies)


class Printer(BaseModel):
    """An installed printer as reported by the OS."""

    name: str
    is_default: bool = Field(default=False, serialization_alias="default")


class PrintRequest(BaseModel):
    file_path: str
    printer_name: Optional[str] = None
    copies: int = 1

    @field_validator("printer_name", mode="before")
    @classmethod
    def _blank_means_default(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        value = str(value)
        return value if value.strip() else None

    @field_validator("copies", mode="before")
    @classmethod
    def _normalize_copies(cls, value: Any) -> int:
        return normalize_copies(value)


class PrintOutcome(BaseModel):
    success: bool
    method: Optional[str] = None
    output: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, method: str, output: str = "") -> "PrintOutcome":
        return cls(success=True, method=method, output=output)

    @classmethod
    def failed(cls, error: str, method: Optional[str] = None) -> "PrintOutcome":
        return cls(success=False, method=method, error=error)
