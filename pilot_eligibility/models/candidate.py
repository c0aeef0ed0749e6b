"""Candidate pilot record as delivered by the roster supplier."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from pilot_eligibility.models.org_scope import normalize_id
from pilot_eligibility.models.role import Role


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


@dataclass(frozen=True)
class Candidate:
    """
    A user that may be proposed as pilot of an action.

    ``role`` is a :class:`Role` for known codes. Unknown codes are kept as the
    raw string so the policy can report them instead of guessing.
    """

    id: str
    role: Union[Role, str]
    is_active: bool
    service_id: Optional[str] = None
    line_id: Optional[str] = None
    team_id: Optional[str] = None
    post_id: Optional[str] = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""

    def __post_init__(self) -> None:
        parsed = Role.parse(self.role)
        if parsed is not None:
            object.__setattr__(self, "role", parsed)
        object.__setattr__(self, "is_active", _as_bool(self.is_active))
        for name in ("service_id", "line_id", "team_id", "post_id"):
            object.__setattr__(self, name, normalize_id(getattr(self, name)))

    @property
    def role_code(self) -> str:
        return self.role.value if isinstance(self.role, Role) else str(self.role)

    @property
    def display_name(self) -> str:
        name = f"{self.first_name} {self.last_name}".strip()
        return name or self.email or self.id

    def attachment(self, level: str) -> Optional[str]:
        """Return the candidate's own identifier at ``level`` (post/team/line/service)."""
        return getattr(self, f"{level}_id")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Candidate":
        """Create from a roster row (camelCase or snake_case keys)."""

        def pick(camel: str, snake: str, default: Any = None) -> Any:
            if camel in data:
                return data[camel]
            return data.get(snake, default)

        return cls(
            id=str(data.get("id", "")),
            role=data.get("role") or "",
            is_active=pick("isActive", "is_active", False),
            service_id=pick("serviceId", "service_id"),
            line_id=pick("lineId", "line_id"),
            team_id=pick("teamId", "team_id"),
            post_id=pick("postId", "post_id"),
            first_name=pick("firstName", "first_name", "") or "",
            last_name=pick("lastName", "last_name", "") or "",
            email=data.get("email") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "role": self.role_code,
            "isActive": self.is_active,
            "serviceId": self.service_id,
            "lineId": self.line_id,
            "teamId": self.team_id,
            "postId": self.post_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
        }
