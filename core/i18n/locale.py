"""
locale.py

Centralized label dictionaries (i18n) for role and permission names.

Usage
-----
from core.i18n.locale import locale
locale.t("role.team_leader")            # -> "Chef d'équipe"
locale.t("role.team_leader", "en")      # -> "Team leader"
"""

from __future__ import annotations

import threading
from typing import Dict, Optional

from core.config.config_service import config_service
from core.logging.logic.logger import logger

LOCALE_TRACK_MISSING_KEYS = True   # set False in production


class LocaleManager:
    """Stores translations and the default language."""

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #
    def __init__(self, default_lang: str | None = None) -> None:
        self.supported: Dict[str, Dict[str, str]] = {
            "fr": self._fr_dict(),
            "en": self._en_dict(),
            "de": self._de_dict(),
            # add further languages here
        }
        lang = default_lang or config_service.eligibility.label_language
        self.lang = lang if lang in self.supported else "fr"
        self._missing_keys_logged: set[tuple[str, str]] = set()
        self._missing_lock = threading.Lock()

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #
    def set_language(self, lang: str) -> None:
        if lang in self.supported:
            self.lang = lang

    def resolve_language(self, lang: Optional[str]) -> str:
        """Return ``lang`` if supported, else the default language."""
        if lang and lang in self.supported:
            return lang
        return self.lang

    def has(self, key: str, lang: Optional[str] = None) -> bool:
        return key in self.supported[self.resolve_language(lang)]

    def t(self, key: str, lang: Optional[str] = None, *, default: Optional[str] = None) -> str:
        """
        Return the localized string. If the key is missing, log it once per
        (key, language) and return ``default`` or the key itself.
        """
        lang = self.resolve_language(lang)
        value = self.supported[lang].get(key)
        if value is not None:
            return value

        if LOCALE_TRACK_MISSING_KEYS:
            with self._missing_lock:
                first = (key, lang) not in self._missing_keys_logged
                self._missing_keys_logged.add((key, lang))
            if first:
                logger.log(
                    feature="Locale",
                    event="MissingKey",
                    level="WARNING",
                    message=f"Missing translation key '{key}' (lang={lang})",
                )

        return key if default is None else default

    # ------------------------------------------------------------------ #
    # Internal dictionaries                                              #
    # ------------------------------------------------------------------ #
    def _fr_dict(self) -> dict[str, str]:
        return {
            # Roles
            "role.operator": "Opérateur",
            "role.team_leader": "Chef d'équipe",
            "role.supervisor": "Superviseur",
            "role.manager": "Manager",
            "role.admin": "Administrateur",
            # Permissions
            "permission.view_actions": "Voir les actions",
            "permission.view_calendar": "Voir le calendrier",
            "permission.view_dashboard": "Voir le tableau de bord",
            "permission.create_actions": "Créer des actions",
            "permission.edit_actions": "Modifier des actions",
            "permission.validate_actions": "Valider des actions",
            "permission.manage_users": "Gérer les utilisateurs",
            "permission.manage_organization": "Gérer l'organisation",
            "permission.manage_roles": "Gérer les rôles",
            "permission.manage_settings": "Gérer les paramètres",
            "permission.edit_actions.team_leader": "Modifier des actions (périmètre)",
            "permission.edit_actions.supervisor": "Modifier des actions (zone)",
            "permission.edit_actions.manager": "Modifier des actions (service)",
            "permission.edit_actions.admin": "Modifier toutes les actions",
            "permission.manage_users.manager": "Gérer les utilisateurs (service)",
            "permission.manage_users.admin": "Gérer tous les utilisateurs",
        }

    def _en_dict(self) -> dict[str, str]:
        return {
            "role.operator": "Operator",
            "role.team_leader": "Team leader",
            "role.supervisor": "Supervisor",
            "role.manager": "Manager",
            "role.admin": "Administrator",
            "permission.view_actions": "View actions",
            "permission.view_calendar": "View calendar",
            "permission.view_dashboard": "View dashboard",
            "permission.create_actions": "Create actions",
            "permission.edit_actions": "Edit actions",
            "permission.validate_actions": "Validate actions",
            "permission.manage_users": "Manage users",
            "permission.manage_organization": "Manage organization",
            "permission.manage_roles": "Manage roles",
            "permission.manage_settings": "Manage settings",
            "permission.edit_actions.team_leader": "Edit actions (own scope)",
            "permission.edit_actions.supervisor": "Edit actions (area)",
            "permission.edit_actions.manager": "Edit actions (service)",
            "permission.edit_actions.admin": "Edit all actions",
            "permission.manage_users.manager": "Manage users (service)",
            "permission.manage_users.admin": "Manage all users",
        }

    def _de_dict(self) -> dict[str, str]:
        return {
            "role.operator": "Bediener",
            "role.team_leader": "Teamleiter",
            "role.supervisor": "Schichtleiter",
            "role.manager": "Manager",
            "role.admin": "Administrator",
            "permission.view_actions": "Maßnahmen anzeigen",
            "permission.view_calendar": "Kalender anzeigen",
            "permission.view_dashboard": "Dashboard anzeigen",
            "permission.create_actions": "Maßnahmen anlegen",
            "permission.edit_actions": "Maßnahmen bearbeiten",
            "permission.validate_actions": "Maßnahmen freigeben",
            "permission.manage_users": "Benutzer verwalten",
            "permission.manage_organization": "Organisation verwalten",
            "permission.manage_roles": "Rollen verwalten",
            "permission.manage_settings": "Einstellungen verwalten",
            "permission.edit_actions.team_leader": "Maßnahmen bearbeiten (eigener Bereich)",
            "permission.edit_actions.supervisor": "Maßnahmen bearbeiten (Zone)",
            "permission.edit_actions.manager": "Maßnahmen bearbeiten (Abteilung)",
            "permission.edit_actions.admin": "Alle Maßnahmen bearbeiten",
            "permission.manage_users.manager": "Benutzer verwalten (Abteilung)",
            "permission.manage_users.admin": "Alle Benutzer verwalten",
        }


# Singleton instance
locale = LocaleManager()
