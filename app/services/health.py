"""Database health probe.

Acquires a pooled connection, validates it with a short ping, and reports
one of three outcomes: connected, connection invalid, or connection failed.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from app.db.pool import CONNECTION_ERRORS, get_connection

logger = logging.getLogger(__name__)

DATABASE_LABEL = "MySQL"

STATUS_UP = "UP"
STATUS_DOWN = "DOWN"


@dataclass(frozen=True)
class HealthReport:
    status: str
    details: dict = field(default_factory=dict)

    @property
    def is_up(self) -> bool:
        return self.status == STATUS_UP


async def _is_valid(conn, timeout: float) -> bool:
    """Ping the server without reconnecting; any failure means invalid."""
    try:
        await asyncio.wait_for(conn.ping(reconnect=False), timeout=timeout)
    except CONNECTION_ERRORS as exc:
        logger.debug("Connection validation failed: %s", exc)
        return False
    return True


async def check_database(timeout: float = 1.0) -> HealthReport:
    """Run a single point-in-time database check.

    Args:
        timeout: Seconds allowed for the validation ping.

    Returns:
        HealthReport with status UP or DOWN and fixed diagnostic labels.
        An ``error`` detail is included when the connection could not be
        acquired at all.
    """
    try:
        async with get_connection() as conn:
            valid = await _is_valid(conn, timeout)
    except CONNECTION_ERRORS as exc:
        logger.warning("Database health check failed: %s", exc)
        return HealthReport(
            status=STATUS_DOWN,
            details={
                "database": DATABASE_LABEL,
                "status": "Connection Failed",
                "error": str(exc),
            },
        )

    if not valid:
        logger.warning("Database health check: connection invalid")
        return HealthReport(
            status=STATUS_DOWN,
            details={"database": DATABASE_LABEL, "status": "Connection Invalid"},
        )

    logger.info("Database health check: connected")
    return HealthReport(
        status=STATUS_UP,
        details={"database": DATABASE_LABEL, "status": "Connected"},
    )
