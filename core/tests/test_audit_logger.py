"""
core/tests/test_audit_logger.py

Audit logger buffer, SQLite persistence and stdlib mirroring.
"""

from __future__ import annotations

import logging
import sqlite3
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from core.logging.logic.logger import Logger, logger


class TestAuditLogger(unittest.TestCase):
    def setUp(self) -> None:
        logger.configure(db_path="", buffer_size=1000)
        logger.clear_logs()

    def tearDown(self) -> None:
        logger.configure(db_path="")
        logger.clear_logs()

    def test_singleton(self) -> None:
        self.assertIs(Logger(), logger)

    def test_log_and_query_in_memory(self) -> None:
        logger.log("PilotEligibility", "ConfigurationGap", level="warning", reference_id="guest")
        logger.log("Locale", "MissingKey", message="x")
        self.assertIsNone(logger.db_path)

        newest = logger.fetch_logs()
        self.assertEqual([e.event for e in newest], ["MissingKey", "ConfigurationGap"])
        gaps = logger.query_logs(feature="PilotEligibility", level="WARNING")
        self.assertEqual(len(gaps), 1)
        self.assertEqual(gaps[0].reference_id, "guest")
        self.assertEqual(gaps[0].as_dict()["log_level"], "WARNING")

    def test_buffer_is_bounded(self) -> None:
        logger.configure(buffer_size=3)
        for n in range(5):
            logger.log("F", f"E{n}")
        self.assertEqual([e.event for e in logger.fetch_logs()], ["E4", "E3", "E2"])

    def test_sqlite_persistence(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            db = Path(tmp) / "sub" / "audit.db"
            logger.configure(db_path=db)
            logger.log("PilotEligibility", "InconsistentScope", level="WARNING", message="bad")
            logger.log("PilotEligibility", "ConfigurationGap", level="WARNING", reference_id="guest")
            self.assertTrue(db.exists())

            rows = logger.query_logs(event="InconsistentScope")
            self.assertEqual(len(rows), 1)
            self.assertEqual(rows[0].message, "bad")
            self.assertEqual(len(logger.fetch_logs(limit=1)), 1)

            logger.clear_logs()
            self.assertEqual(logger.fetch_logs(), [])
            logger.close()

    def test_database_error_keeps_entry_in_memory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            logger.configure(db_path=Path(tmp) / "audit.db")
            locked = sqlite3.OperationalError("database is locked")
            with mock.patch.object(Logger, "_insert_log", side_effect=locked):
                with self.assertLogs("pilot_eligibility.audit", level="ERROR") as captured:
                    entry = logger.log("PilotEligibility", "ConfigurationGap", level="WARNING", reference_id="guest")
            self.assertIsNotNone(entry.id)
            self.assertIn(entry, logger.entries)
            self.assertIn("not persisted", captured.output[0])
            logger.close()

    def test_mirrors_to_stdlib_logging(self) -> None:
        with self.assertLogs("pilot_eligibility.audit", level="WARNING") as captured:
            logger.log("PilotEligibility", "ConfigurationGap", level="WARNING", message="role 'x'")
        self.assertIn("[PilotEligibility/ConfigurationGap] role 'x'", captured.output[0])


if __name__ == "__main__":
    unittest.main()
