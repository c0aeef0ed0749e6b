"""
OrgScope – the service/line/team/post selection of an action form.

Each field is optional. Empty strings, ``None`` and the ``"all"`` sentinel
of the filter widgets all mean "not selected".
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

ALL_SENTINEL = "all"

# Narrow to broad
LEVELS = ("post", "team", "line", "service")


def normalize_id(value: Any) -> Optional[str]:
    """Map unset/sentinel identifiers to None, everything else to a stripped str."""
    if value is None:
        return None
    text = str(value).strip()
    if not text or text.lower() == ALL_SENTINEL:
        return None
    return text


@dataclass(frozen=True)
class OrgScope:
    service_id: Optional[str] = None
    line_id: Optional[str] = None
    team_id: Optional[str] = None
    post_id: Optional[str] = None

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, normalize_id(getattr(self, f.name)))

    @property
    def is_open(self) -> bool:
        """True when no level is selected at all."""
        return all(self.get(level) is None for level in LEVELS)

    def get(self, level: str) -> Optional[str]:
        return getattr(self, f"{level}_id")

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "OrgScope":
        """Build from form data using camelCase or snake_case keys."""
        data = data or {}
        return cls(
            service_id=data.get("serviceId", data.get("service_id")),
            line_id=data.get("lineId", data.get("line_id")),
            team_id=data.get("teamId", data.get("team_id")),
            post_id=data.get("postId", data.get("post_id")),
        )

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "serviceId": self.service_id,
            "lineId": self.line_id,
            "teamId": self.team_id,
            "postId": self.post_id,
        }
