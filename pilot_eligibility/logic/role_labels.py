"""Display labels for roles."""
from __future__ import annotations

from typing import Dict, Optional

from core.i18n.locale import locale
from pilot_eligibility.models.role import Role


def role_label(role: object, lang: Optional[str] = None) -> str:
    """
    Return the display label of ``role``.

    Unknown roles come back as their raw code; this never raises.
    """
    if role is None:
        return ""
    code = role.value if isinstance(role, Role) else str(role)
    parsed = Role.parse(code)
    if parsed is None:
        return code
    return locale.t(f"role.{parsed.value}", lang, default=code)


def role_labels(lang: Optional[str] = None) -> Dict[Role, str]:
    """Labels of all roles, junior to senior."""
    return {role: role_label(role, lang) for role in Role}
