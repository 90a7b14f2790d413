"""Database diagnostic endpoints.

Every handler acquires a pooled connection for the duration of one request
and converts connectivity or query failures into a response instead of
letting them escape to the ASGI server.
"""

from __future__ import annotations

import logging

import aiomysql
from fastapi import APIRouter, HTTPException

from app.db import mapper
from app.db.pool import CONNECTION_ERRORS, describe_pool, get_connection, get_pool
from app.models.database import ConnectionResult, ConnectionTestResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/database", tags=["database"])


def _database_product(server_version: str) -> str:
    return "MariaDB" if "mariadb" in server_version.lower() else "MySQL"


async def _run_mapper(query) -> ConnectionResult:
    """Run one mapper query on a pooled connection.

    Raises:
        HTTPException 503: If the connection cannot be acquired or the query fails.
        HTTPException 500: If the statement definition file is broken.
    """
    try:
        async with get_connection() as conn:
            return await query(conn)
    except mapper.StatementDefinitionError as exc:
        logger.error("%s has no usable statement: %s", query.__name__, exc)
        raise HTTPException(status_code=500, detail=f"Statement definition error: {exc}")
    except (*CONNECTION_ERRORS, mapper.EmptyResultError) as exc:
        logger.warning("%s failed: %s", query.__name__, exc)
        raise HTTPException(status_code=503, detail=f"Database query failed: {exc}")


@router.get(
    "/test-connection",
    response_model=ConnectionTestResponse,
    response_model_exclude_none=True,
)
async def test_connection():
    """Open a pooled connection and report driver and server metadata."""
    try:
        async with get_connection() as conn:
            server_version = conn.get_server_info() or ""
            return ConnectionTestResponse(
                success=True,
                message="Database connection successful",
                driver_name=f"aiomysql {aiomysql.__version__}",
                database_name=_database_product(server_version),
                database_version=server_version,
                url=f"mysql://{conn.user}@{conn.host}:{conn.port}/{conn.db}",
            )
    except CONNECTION_ERRORS as exc:
        logger.warning("Database connection test failed: %s", exc)
        return ConnectionTestResponse(
            success=False,
            message=f"Database connection failed: {exc}",
        )


@router.get("/test-mybatis-annotation", response_model=ConnectionResult)
async def test_inline_statement():
    """Run the connectivity query written inline in the mapper module."""
    return await _run_mapper(mapper.test_connection)


@router.get("/test-mybatis-xml", response_model=ConnectionResult)
async def test_xml_statement():
    """Run the connectivity query defined in mapper.xml."""
    return await _run_mapper(mapper.test_xml_mapping)


@router.get("/version", response_model=ConnectionResult)
async def database_version():
    return await _run_mapper(mapper.get_database_version)


@router.get("/pool-info")
async def pool_info() -> dict:
    """Report pool bounds and live gauges; empty when no pool is available."""
    return describe_pool(get_pool())
