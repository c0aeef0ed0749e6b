"""
OrgChart – in-memory service > line > team > post containment.

Backs the cascading selectors of the action form and answers whether a
scope selection is a real path through the organisation.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from pilot_eligibility.exceptions.errors import ScopeContradictionError
from pilot_eligibility.models.org_scope import LEVELS, OrgScope, normalize_id
from pilot_eligibility.models.org_unit import Line, Post, Service, Team


class OrgChart:
    def __init__(
        self,
        services: Iterable[Service] = (),
        lines: Iterable[Line] = (),
        teams: Iterable[Team] = (),
        posts: Iterable[Post] = (),
    ) -> None:
        self.services: List[Service] = list(services)
        self.lines: List[Line] = list(lines)
        self.teams: List[Team] = list(teams)
        self.posts: List[Post] = list(posts)

        self._services: Dict[str, Service] = {s.id: s for s in self.services}
        self._lines: Dict[str, Line] = {l.id: l for l in self.lines}
        self._teams: Dict[str, Team] = {t.id: t for t in self.teams}
        self._posts: Dict[str, Post] = {p.id: p for p in self.posts}

    @classmethod
    def from_dict(cls, data: dict) -> "OrgChart":
        """Create from ``{"services": [...], "lines": [...], "teams": [...], "posts": [...]}``."""
        return cls(
            services=[Service.from_dict(d) for d in data.get("services", [])],
            lines=[Line.from_dict(d) for d in data.get("lines", [])],
            teams=[Team.from_dict(d) for d in data.get("teams", [])],
            posts=[Post.from_dict(d) for d in data.get("posts", [])],
        )

    # ------------------------------------------------------------------ #
    #  Cascading selector options                                        #
    # ------------------------------------------------------------------ #
    def lines_for(self, service_id: Optional[str]) -> List[Line]:
        service_id = normalize_id(service_id)
        if service_id is None:
            return []
        return [l for l in self.lines if l.service_id == service_id]

    def teams_for(self, line_id: Optional[str]) -> List[Team]:
        line_id = normalize_id(line_id)
        if line_id is None:
            return []
        return [t for t in self.teams if t.line_id == line_id]

    def posts_for(self, team_id: Optional[str]) -> List[Post]:
        team_id = normalize_id(team_id)
        if team_id is None:
            return []
        return [p for p in self.posts if p.team_id == team_id]

    # ------------------------------------------------------------------ #
    #  Containment                                                       #
    # ------------------------------------------------------------------ #
    def path_of(self, level: str, unit_id: str) -> Optional[Dict[str, str]]:
        """Return ``{level: id}`` for the unit and its known ancestors, or None if unknown."""
        path: Dict[str, Optional[str]] = {}
        if level == "post":
            post = self._posts.get(unit_id)
            if post is None:
                return None
            path["post"] = post.id
            path["team"] = post.team_id
            path["line"] = post.line_id
        elif level == "team":
            team = self._teams.get(unit_id)
            if team is None:
                return None
            path["team"] = team.id
            path["line"] = team.line_id
        elif level == "line":
            if unit_id not in self._lines:
                return None
            path["line"] = unit_id
        elif level == "service":
            if unit_id not in self._services:
                return None
            return {"service": unit_id}
        else:
            raise ValueError(f"Unknown level: {level}")

        line = self._lines.get(path["line"]) if path["line"] is not None else None
        if line is not None:
            path["service"] = line.service_id
        return {k: v for k, v in path.items() if v is not None}

    def contradictions(self, scope: OrgScope) -> List[str]:
        """Human-readable reasons why ``scope`` is not a path; empty when consistent."""
        problems: List[str] = []
        for level in LEVELS:
            unit_id = scope.get(level)
            if unit_id is None:
                continue
            path = self.path_of(level, unit_id)
            if path is None:
                problems.append(f"unknown {level} '{unit_id}'")
                continue
            for other, expected in path.items():
                chosen = scope.get(other)
                if other != level and chosen is not None and chosen != expected:
                    problems.append(f"{level} '{unit_id}' is not in {other} '{chosen}'")
        return problems

    def is_consistent(self, scope: OrgScope) -> bool:
        return not self.contradictions(scope)

    def validate_scope(self, scope: OrgScope) -> None:
        problems = self.contradictions(scope)
        if problems:
            raise ScopeContradictionError("; ".join(problems))
