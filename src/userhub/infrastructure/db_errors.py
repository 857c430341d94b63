"""
Classification of persistence errors into the application error taxonomy.

Database errors are classified exactly once, at the boundary where a
database call result is consumed (``DatabaseSessionManager.session``).

Rules, in order:
1. already an ``AppError``            -> unchanged
2. no row found                       -> NotFound
3. pool checkout or connect timed out -> RequestTimeout
   other connection failure (OSError) -> InternalServerError
4. integrity constraint (SQLSTATE 23) -> ``CONSTRAINT_VIOLATIONS`` table,
                                         else InternalServerError with code
5. driver message contains "timeout"  -> RequestTimeout
6. anything else                      -> InternalServerError

``CONSTRAINT_VIOLATIONS`` is authoritative: codes missing from it map to a
generic internal error. Add new engine codes to the table.
"""

from sqlalchemy import exc as sa_exc

from userhub.domain.errors import (
    AppError,
    BadRequestError,
    ConflictError,
    InternalServerError,
    NotFoundError,
    RequestTimeoutError,
    UnprocessableContentError,
)

INTEGRITY_CONSTRAINT_CLASS = "23"

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
NOT_NULL_VIOLATION = "23502"
CHECK_VIOLATION = "23514"

# PostgreSQL SQLSTATE -> (error class, detail)
CONSTRAINT_VIOLATIONS: dict[str, tuple[type[AppError], str]] = {
    UNIQUE_VIOLATION: (ConflictError, "Resource already exists"),
    FOREIGN_KEY_VIOLATION: (ConflictError, "Referenced resource conflict"),
    NOT_NULL_VIOLATION: (BadRequestError, "Required value is missing"),
    CHECK_VIOLATION: (UnprocessableContentError, "Value violates a constraint"),
}


def extract_sqlstate(error: BaseException) -> str | None:
    """
    Find the SQLSTATE code of a database error.

    Looks at the wrapped DBAPI exception (``orig``) and its cause, reading
    ``sqlstate`` (asyncpg) or ``pgcode`` (psycopg).

    Args:
        error: Exception raised by SQLAlchemy or the driver

    Returns:
        Five-character SQLSTATE code, or None if none is exposed
    """
    candidates = [error]
    orig = getattr(error, "orig", None)
    if orig is not None:
        candidates.append(orig)
        if orig.__cause__ is not None:
            candidates.append(orig.__cause__)

    for candidate in candidates:
        for attr in ("sqlstate", "pgcode"):
            code = getattr(candidate, attr, None)
            if isinstance(code, str) and code:
                return code
    return None


def _error_message(error: BaseException) -> str:
    orig = getattr(error, "orig", None)
    return str(orig if orig is not None else error)


def classify_db_error(error: BaseException) -> AppError:
    """
    Convert a persistence-layer error into an ``AppError``.

    Args:
        error: Exception raised by a database call

    Returns:
        The classified application error (not raised)
    """
    if isinstance(error, AppError):
        return error

    if isinstance(error, sa_exc.NoResultFound):
        return NotFoundError("Resource not found")

    # Driver connect timeouts surface as the builtin TimeoutError, unwrapped
    if isinstance(error, (sa_exc.TimeoutError, TimeoutError)):
        return RequestTimeoutError("Database connection timed out")

    if isinstance(error, OSError):
        return InternalServerError(f"DB connection error: {error!r}")

    code = extract_sqlstate(error)
    if isinstance(error, sa_exc.IntegrityError) or (
        code is not None and code.startswith(INTEGRITY_CONSTRAINT_CLASS)
    ):
        if code in CONSTRAINT_VIOLATIONS:
            error_cls, detail = CONSTRAINT_VIOLATIONS[code]
            return error_cls(detail)
        return InternalServerError(
            f"Unhandled constraint violation [{code}]: {_error_message(error)}"
        )

    # The driver message only: str(error) also holds SQL text and parameters
    if "timeout" in _error_message(error):
        return RequestTimeoutError("Database operation timed out")

    if code is not None:
        return InternalServerError(f"DB error [{code}]: {_error_message(error)}")
    return InternalServerError(f"DB error: {error}")
