"""Tests for the label dictionaries."""

from __future__ import annotations

from core.i18n.locale import LocaleManager
from core.logging.logic.logger import logger


def test_lookup_and_language_switch() -> None:
    lm = LocaleManager(default_lang="en")
    assert lm.t("role.admin") == "Administrator"
    assert lm.t("role.admin", "fr") == "Administrateur"
    lm.set_language("de")
    assert lm.t("role.operator") == "Bediener"
    lm.set_language("klingon")
    assert lm.lang == "de"


def test_unsupported_default_language() -> None:
    assert LocaleManager(default_lang="xx").lang == "fr"


def test_missing_key_logged_once_per_language() -> None:
    lm = LocaleManager(default_lang="fr")
    assert lm.t("nope") == "nope"
    assert lm.t("nope") == "nope"
    assert lm.t("nope", default="fallback") == "fallback"
    assert lm.t("nope", "en") == "nope"
    entries = logger.query_logs(feature="Locale", event="MissingKey")
    assert len(entries) == 2


def test_dictionaries_share_keys() -> None:
    lm = LocaleManager()
    keys = {lang: set(d) for lang, d in lm.supported.items()}
    assert keys["fr"] == keys["en"] == keys["de"]


def test_has_does_not_log_missing_keys() -> None:
    lm = LocaleManager(default_lang="fr")
    assert lm.has("role.admin")
    assert lm.has("permission.manage_users.admin", "en")
    assert not lm.has("permission.view_actions.admin")
    assert logger.query_logs(feature="Locale", event="MissingKey") == []
