from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from .enums import WarningKind


@dataclass(frozen=True)
class EngineWarning:
    """A non-fatal condition surfaced to report consumers."""

    kind: WarningKind
    message: str
    work_date: Optional[date] = None
