"""Organisational units: service > line > team > post.

Parent ids go through :func:`normalize_id`, so a missing or blank parent is
``None`` and never the string ``"None"``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pilot_eligibility.models.org_scope import normalize_id


def _parent(data: Dict[str, Any], camel: str, snake: str) -> Optional[str]:
    return normalize_id(data.get(camel, data.get(snake)))


@dataclass(frozen=True)
class Service:
    id: str
    name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Service":
        return cls(id=str(data["id"]), name=data.get("name") or "")


@dataclass(frozen=True)
class Line:
    id: str
    service_id: Optional[str]
    name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Line":
        return cls(
            id=str(data["id"]),
            service_id=_parent(data, "serviceId", "service_id"),
            name=data.get("name") or "",
        )


@dataclass(frozen=True)
class Team:
    id: str
    line_id: Optional[str]
    name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        return cls(
            id=str(data["id"]),
            line_id=_parent(data, "lineId", "line_id"),
            name=data.get("name") or "",
        )


@dataclass(frozen=True)
class Post:
    """A workstation. Carries its line as well as its team."""

    id: str
    team_id: Optional[str]
    line_id: Optional[str]
    name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Post":
        return cls(
            id=str(data["id"]),
            team_id=_parent(data, "teamId", "team_id"),
            line_id=_parent(data, "lineId", "line_id"),
            name=data.get("name") or "",
        )
