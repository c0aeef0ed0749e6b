"""
core/tests/test_config_service.py

Layer precedence and typing of the configuration service.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from core.config.config_service import ConfigService


class TestConfigService(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.missing = self.tmp / "missing.ini"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, name: str, text: str) -> Path:
        path = self.tmp / name
        path.write_text(text, encoding="utf-8")
        return path

    def test_embedded_defaults(self) -> None:
        cs = ConfigService(defaults_ini=self.missing, user_ini=self.missing, environ={})
        self.assertEqual(cs.eligibility.label_language, "fr")
        self.assertTrue(cs.eligibility.reject_inconsistent_scope)
        self.assertTrue(cs.eligibility.report_configuration_gaps)
        self.assertEqual(cs.logging.level, "INFO")
        self.assertEqual(cs.logging.db_path, "")
        self.assertEqual(cs.logging.buffer_size, 1000)
        self.assertEqual(cs.meta_source("Eligibility", "label_language")["layer"], "code")

    def test_layer_precedence(self) -> None:
        defaults = self._write("defaults.ini", "[Eligibility]\nlabel_language = en\nreject_inconsistent_scope = no\n")
        user = self._write("user.ini", "[Eligibility]\nlabel_language = de\n")
        env = {"PILOTS_ELIGIBILITY__REPORT_CONFIGURATION_GAPS": "0", "PILOTS_LOGGING__LEVEL": "DEBUG"}

        cs = ConfigService(defaults_ini=defaults, user_ini=user, environ=env)
        self.assertEqual(cs.eligibility.label_language, "de")
        self.assertFalse(cs.eligibility.reject_inconsistent_scope)
        self.assertFalse(cs.eligibility.report_configuration_gaps)
        self.assertEqual(cs.logging.level, "DEBUG")
        self.assertEqual(cs.meta_source("Eligibility", "label_language")["layer"], "user")
        self.assertEqual(cs.meta_source("Logging", "level")["layer"], "env")

    def test_invalid_number_falls_back_to_default(self) -> None:
        cs = ConfigService(
            defaults_ini=self.missing,
            user_ini=self.missing,
            environ={"PILOTS_LOGGING__BUFFER_SIZE": "lots"},
        )
        self.assertEqual(cs.logging.buffer_size, 1000)

    def test_get_with_cast(self) -> None:
        cs = ConfigService(defaults_ini=self.missing, user_ini=self.missing, environ={})
        self.assertIs(cs.get("Eligibility", "reject_inconsistent_scope", cast=bool), True)
        self.assertEqual(cs.get("Logging", "buffer_size", cast=int), 1000)
        self.assertIsNone(cs.get("Nope", "nothing"))

    def test_unrelated_env_ignored(self) -> None:
        cs = ConfigService(
            defaults_ini=self.missing,
            user_ini=self.missing,
            environ={"PILOTS_BROKEN": "x", "OTHER_ELIGIBILITY__LABEL_LANGUAGE": "en"},
        )
        self.assertEqual(cs.eligibility.label_language, "fr")

    def test_reload_picks_up_changes(self) -> None:
        user = self._write("user.ini", "[Logging]\nlevel = WARNING\n")
        cs = ConfigService(defaults_ini=self.missing, user_ini=user, environ={})
        self.assertEqual(cs.logging.level, "WARNING")
        user.write_text("[Logging]\nlevel = ERROR\n", encoding="utf-8")
        cs.reload()
        self.assertEqual(cs.logging.level, "ERROR")


if __name__ == "__main__":
    unittest.main()
