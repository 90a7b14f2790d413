"""Database layer for the diagnostic queries.

All functions are async, take a connection (conn) as the first parameter,
and map exactly one row into a ConnectionResult. None of the statements
take parameters. Two are written inline; the third is read from
``mapper.xml`` next to this module.
"""

from __future__ import annotations

import functools
from pathlib import Path
from xml.etree import ElementTree

import aiomysql

from app.models.database import ConnectionResult

MAPPER_XML = Path(__file__).parent / "mapper.xml"

# `current_time` is a reserved word in MySQL and must stay quoted.
_TEST_CONNECTION_SQL = (
    "SELECT 'Database Connected Successfully' AS result, "
    "CAST(UNIX_TIMESTAMP(NOW(3)) * 1000 AS UNSIGNED) AS `current_time`"
)

_DATABASE_VERSION_SQL = (
    "SELECT VERSION() AS result, "
    "CAST(UNIX_TIMESTAMP(NOW(3)) * 1000 AS UNSIGNED) AS `current_time`"
)


REQUIRED_STATEMENTS = ("testXmlMapping",)


class StatementDefinitionError(Exception):
    """mapper.xml is unreadable, malformed, or lacks a statement."""


class StatementNotFoundError(StatementDefinitionError, KeyError):
    # KeyError would quote the message.
    __str__ = Exception.__str__


class EmptyResultError(LookupError):
    """A diagnostic query returned no row."""


@functools.lru_cache(maxsize=None)
def _load_statements(path: Path | None = None) -> dict[str, str]:
    """Parse every <select> element in the mapper file into {id: sql}."""
    path = path or MAPPER_XML
    try:
        root = ElementTree.parse(path).getroot()
    except (ElementTree.ParseError, OSError) as exc:
        raise StatementDefinitionError(f"Cannot load {path.name}: {exc}") from exc

    statements = {}
    for node in root.iter("select"):
        statement_id = node.get("id")
        if not statement_id:
            raise StatementDefinitionError(f"<select> without an id in {path.name}")
        statements[statement_id] = " ".join((node.text or "").split())
    return statements


def load_statement(statement_id: str) -> str:
    """Return the SQL for *statement_id* from the mapper file.

    Raises:
        StatementNotFoundError: If no statement with that id is defined
            (a KeyError).
        StatementDefinitionError: If the file cannot be read or parsed.
    """
    statements = _load_statements()
    if statement_id not in statements:
        raise StatementNotFoundError(f"No statement {statement_id!r} in {MAPPER_XML.name}")
    return statements[statement_id]


def validate_statements() -> None:
    """Load every statement the endpoints rely on; raise on the first problem."""
    for statement_id in REQUIRED_STATEMENTS:
        load_statement(statement_id)


async def _select_one(conn, sql: str) -> ConnectionResult:
    async with conn.cursor(aiomysql.DictCursor) as cur:
        await cur.execute(sql)
        row = await cur.fetchone()
    if row is None:
        raise EmptyResultError("Diagnostic query returned no rows")
    return ConnectionResult(result=str(row["result"]), current_time=int(row["current_time"]))


async def test_connection(conn) -> ConnectionResult:
    """Run the literal connectivity query."""
    return await _select_one(conn, _TEST_CONNECTION_SQL)


async def get_database_version(conn) -> ConnectionResult:
    """Return the server version string."""
    return await _select_one(conn, _DATABASE_VERSION_SQL)


async def test_xml_mapping(conn) -> ConnectionResult:
    """Same as test_connection, using the statement defined in mapper.xml."""
    return await _select_one(conn, load_statement("testXmlMapping"))

