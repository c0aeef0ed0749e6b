from __future__ import annotations

import pytest

from core.logging.logic.logger import logger


@pytest.fixture(autouse=True)
def _clean_audit_log():
    """Every test starts with an empty in-memory audit log."""
    logger.configure(db_path="", buffer_size=1000, level="INFO")
    logger.clear_logs()
    yield
    logger.configure(db_path="")
    logger.clear_logs()
