r"""
Database error classification.

The persistence layer hands us opaque exceptions: a SQLAlchemy `NoResultFound`,
an `IntegrityError` wrapping a driver exception, or a bare driver exception when
the driver is used directly. Each driver encodes "duplicate key" differently:

| Driver family | Modules                                              | Signal                          |
| ------------- | ---------------------------------------------------- | ------------------------------- |
| PostgreSQL    | psycopg2, psycopg, asyncpg                           | SQLSTATE "23505"                |
| MySQL         | pymysql, MySQLdb, mysql.connector, aiomysql, asyncmy | error number 1062               |
| SQLite        | sqlite3, aiosqlite                                   | extended result code 2067/1555  |

`classify_db_error()` centralizes that knowledge so callers only see a
`DatabaseErrorKind`. It never raises and never logs; deciding what an
UNCLASSIFIED error means for the response is the translator's job.

Drivers are recognised by the module of the exception class, which lets us
classify without importing any driver package.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterator, NamedTuple

from sqlalchemy.exc import NoResultFound


class DatabaseErrorKind(str, Enum):
    RECORD_NOT_FOUND = "record_not_found"
    UNIQUE_CONSTRAINT_VIOLATION = "unique_constraint_violation"
    UNCLASSIFIED = "unclassified"


class Driver(str, Enum):
    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE = "sqlite"


# https://www.postgresql.org/docs/current/errcodes-appendix.html
POSTGRES_UNIQUE_VIOLATION = "23505"

# https://dev.mysql.com/doc/mysql-errors/8.0/en/server-error-reference.html (ER_DUP_ENTRY)
MYSQL_DUP_ENTRY = 1062

# https://www.sqlite.org/rescode.html
SQLITE_CONSTRAINT_PRIMARYKEY = 1555
SQLITE_CONSTRAINT_UNIQUE = 2067

# Hard stop for pathological wrap chains.
_MAX_CHAIN_DEPTH = 16


# =================================================================================================================
# Driver identity
# =================================================================================================================

_DRIVER_MODULES: dict[str, Driver] = {
    "psycopg2": Driver.POSTGRES,
    "psycopg": Driver.POSTGRES,
    "asyncpg": Driver.POSTGRES,
    "pymysql": Driver.MYSQL,
    "MySQLdb": Driver.MYSQL,
    "mysql": Driver.MYSQL,
    "aiomysql": Driver.MYSQL,
    "asyncmy": Driver.MYSQL,
    "sqlite3": Driver.SQLITE,
    "_sqlite3": Driver.SQLITE,
    "aiosqlite": Driver.SQLITE,
}


def identify_driver(exc: BaseException) -> Driver | None:
    """Return the driver family that raised `exc`, judged by the top-level package of its class."""
    for cls in type(exc).__mro__:
        top_level = (cls.__module__ or "").split(".", 1)[0]
        driver = _DRIVER_MODULES.get(top_level)
        if driver is not None:
            return driver
    return None


# =================================================================================================================
# Unique-violation signatures
# =================================================================================================================

def _postgres_unique(exc: BaseException) -> bool:
    # psycopg2 exposes `pgcode`; psycopg 3 and asyncpg expose `sqlstate`.
    code = getattr(exc, "pgcode", None) or getattr(exc, "sqlstate", None)
    return code == POSTGRES_UNIQUE_VIOLATION


def _mysql_unique(exc: BaseException) -> bool:
    # mysql.connector exposes `errno`; pymysql / MySQLdb put the number in args[0].
    code = getattr(exc, "errno", None)
    if code is None and exc.args:
        code = exc.args[0]
    return code == MYSQL_DUP_ENTRY


def _sqlite_unique(exc: BaseException) -> bool:
    code = getattr(exc, "sqlite_errorcode", None)
    if code is not None:
        return code in (SQLITE_CONSTRAINT_UNIQUE, SQLITE_CONSTRAINT_PRIMARYKEY)
    # Interpreters built without extended codes only leave the message behind.
    return "unique constraint failed" in str(exc).lower()


class UniqueViolationSignature(NamedTuple):
    driver: Driver
    matches: Callable[[BaseException], bool]


UNIQUE_VIOLATION_SIGNATURES: tuple[UniqueViolationSignature, ...] = (
    UniqueViolationSignature(Driver.POSTGRES, _postgres_unique),
    UniqueViolationSignature(Driver.MYSQL, _mysql_unique),
    UniqueViolationSignature(Driver.SQLITE, _sqlite_unique),
)


def is_unique_constraint_violation(exc: BaseException) -> bool:
    """
    True when `exc` is a driver exception signalling a unique / primary-key violation.

    Only the exception itself is inspected; see `classify_db_error()` for the
    wrap-chain walk.
    """
    driver = identify_driver(exc)
    if driver is None:
        return False
    for signature in UNIQUE_VIOLATION_SIGNATURES:
        if signature.driver is driver:
            try:
                return bool(signature.matches(exc))
            except Exception:
                # A driver exception with an unexpected shape is simply not a match.
                return False
    return False


# =================================================================================================================
# Classifier
# =================================================================================================================

def iter_error_chain(exc: BaseException) -> Iterator[BaseException]:
    """
    Yield `exc` and everything it wraps, outermost first.

    Follows SQLAlchemy's `DBAPIError.orig`, then `__cause__`, then `__context__`
    unless it was detached with `raise ... from None` (`__suppress_context__`).
    Each exception is yielded once, and the walk stops after `_MAX_CHAIN_DEPTH` steps.
    """
    seen: set[int] = set()
    pending = [exc]
    while pending and len(seen) < _MAX_CHAIN_DEPTH:
        current = pending.pop(0)
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        context = None if current.__suppress_context__ else current.__context__
        for linked in (getattr(current, "orig", None), current.__cause__, context):
            if isinstance(linked, BaseException) and id(linked) not in seen:
                pending.append(linked)


def classify_db_error(exc: BaseException) -> DatabaseErrorKind:
    """
    Classify an opaque persistence-layer exception.

    Rules, first match wins:
      1. a "no rows" sentinel anywhere in the chain -> RECORD_NOT_FOUND
      2. a driver unique-violation anywhere in the chain -> UNIQUE_CONSTRAINT_VIOLATION
      3. anything else -> UNCLASSIFIED
    """
    chain = list(iter_error_chain(exc))

    if any(isinstance(e, NoResultFound) for e in chain):
        return DatabaseErrorKind.RECORD_NOT_FOUND

    if any(is_unique_constraint_violation(e) for e in chain):
        return DatabaseErrorKind.UNIQUE_CONSTRAINT_VIOLATION

    return DatabaseErrorKind.UNCLASSIFIED


__all__ = [
    "DatabaseErrorKind",
    "Driver",
    "POSTGRES_UNIQUE_VIOLATION",
    "MYSQL_DUP_ENTRY",
    "SQLITE_CONSTRAINT_PRIMARYKEY",
    "SQLITE_CONSTRAINT_UNIQUE",
    "UNIQUE_VIOLATION_SIGNATURES",
    "identify_driver",
    "is_unique_constraint_violation",
    "iter_error_chain",
    "classify_db_error",
]
