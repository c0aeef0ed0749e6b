from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Permission:
    """One capability of a role; ``granted`` False means listed but denied."""

    id: str
    granted: bool
