# storage_api/storage/sql_errors.py
"""Translation of SQLAlchemy / driver errors into domain errors."""
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from storage_api.errors import InternalError, NotUniqueError, StorageError

logger = logging.getLogger(__name__)

MYSQL_DUPLICATE_ENTRY = 1062
POSTGRES_UNIQUE_VIOLATION = "23505"
SQLITE_CONSTRAINT_UNIQUE = 2067
SQLITE_CONSTRAINT_PRIMARYKEY = 1555


def is_duplicate_key(exc: IntegrityError) -> bool:
    """Checks the engine-specific error code carried by the DBAPI exception."""
    orig = exc.orig

    # sqlite3 (Python 3.11+)
    if getattr(orig, "sqlite_errorcode", None) in (SQLITE_CONSTRAINT_UNIQUE, SQLITE_CONSTRAINT_PRIMARYKEY):
        return True
    # psycopg2 exposes pgcode, psycopg 3 exposes sqlstate
    if POSTGRES_UNIQUE_VIOLATION in (getattr(orig, "pgcode", None), getattr(orig, "sqlstate", None)):
        return True
    # mysql-connector uses errno, PyMySQL / mysqlclient put the code first in args
    if getattr(orig, "errno", None) == MYSQL_DUPLICATE_ENTRY:
        return True
    args = getattr(orig, "args", ())
    if args and args[0] == MYSQL_DUPLICATE_ENTRY:
        return True

    return "UNIQUE constraint failed" in str(orig)


def translate_error(exc: SQLAlchemyError, action: str, resource: str) -> StorageError:
    """Builds the domain error for a failed statement and logs it."""
    if isinstance(exc, IntegrityError) and is_duplicate_key(exc):
        logger.warning("%s %s rejected: duplicate key", action, resource)
        return NotUniqueError(f"{resource} not unique", original_exception=exc)

    logger.exception("%s %s failed", action, resource)
    return InternalError(f"failed to {action} {resource}", original_exception=exc)
