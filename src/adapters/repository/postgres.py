"""
PostgreSQL repository adapter - Implements UserRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Consistency Design:
-------------------
1. **Registration races**: A UNIQUE index on LOWER(email) makes concurrent
   registrations of one address resolve to exactly one row. The losing
   INSERT raises UniqueViolation, surfaced as ConflictError.

2. **Confirmation races**: update_user() accepts expected column values and
   folds them into the UPDATE's WHERE clause. Two requests confirming with
   the same token both verify the hash, but only the first UPDATE matches;
   the second sees zero rows and gets None.

3. **All-or-nothing creation**: a user is created by a single INSERT ...
   RETURNING, so a cancelled request never leaves a partial row visible.
"""

import logging
import uuid
from collections.abc import Mapping
from pathlib import Path

from psycopg import sql
from psycopg.errors import UniqueViolation
from psycopg_pool import ConnectionPool

from src.domain.exceptions import ConflictError
from src.domain.models import NewUser, User

logger = logging.getLogger(__name__)

_COLUMNS = "id, email, first_name, last_name, password_hash, confirmation_token_hash, created_at"

_UPDATABLE_COLUMNS = frozenset(
    {"first_name", "last_name", "password_hash", "confirmation_token_hash"}
)


def _row_to_user(row: tuple) -> User:
    return User(
        id=str(row[0]),
        email=row[1],
        first_name=row[2],
        last_name=row[3],
        password_hash=row[4],
        confirmation_token_hash=row[5],
        created_at=row[6],
    )


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def create_user(self, new_user: NewUser) -> User:
        """
        Insert a user row and return it.

        Raises:
            ConflictError: If the email is already taken (case-insensitive)
        """
        query = f"""
            INSERT INTO users (email, first_name, last_name, password_hash, confirmation_token_hash)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING {_COLUMNS}
        """
        params = (
            new_user.email,
            new_user.first_name,
            new_user.last_name,
            new_user.password_hash,
            new_user.confirmation_token_hash,
        )

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(query, params)
                row = cursor.fetchone()
                conn.commit()
        except UniqueViolation:
            raise ConflictError(new_user.email) from None

        return _row_to_user(row)

    def get_user_by_email(self, email: str) -> User | None:
        query = f"SELECT {_COLUMNS} FROM users WHERE LOWER(email) = LOWER(%s)"
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(query, (email,))
            row = cursor.fetchone()
        return _row_to_user(row) if row is not None else None

    def get_user_by_id(self, user_id: str) -> User | None:
        if not _is_uuid(user_id):
            return None
        query = f"SELECT {_COLUMNS} FROM users WHERE id = %s"
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(query, (user_id,))
            row = cursor.fetchone()
        return _row_to_user(row) if row is not None else None

    def update_user(
        self,
        user_id: str,
        changes: Mapping[str, object],
        expected: Mapping[str, object] | None = None,
    ) -> User | None:
        """
        Apply a partial update, optionally guarded by expected column values.

        Column names are checked against a whitelist and quoted as
        identifiers; values are always bound parameters.

        Returns:
            The updated User, or None if no row matched
        """
        expected = expected or {}
        unknown = (set(changes) | set(expected)) - _UPDATABLE_COLUMNS
        if unknown:
            raise ValueError(f"Cannot update columns: {sorted(unknown)}")
        if not changes:
            return self.get_user_by_id(user_id)
        if not _is_uuid(user_id):
            return None

        assignments = sql.SQL(", ").join(
            sql.SQL("{} = %s").format(sql.Identifier(name)) for name in changes
        )
        conditions = [sql.SQL("id = %s")]
        conditions.extend(
            sql.SQL("{} IS NOT DISTINCT FROM %s").format(sql.Identifier(name))
            for name in expected
        )
        query = sql.SQL("UPDATE users SET {} WHERE {} RETURNING {}").format(
            assignments,
            sql.SQL(" AND ").join(conditions),
            sql.SQL(_COLUMNS),
        )
        params = [*changes.values(), user_id, *expected.values()]

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(query, params)
            row = cursor.fetchone()
            conn.commit()
        return _row_to_user(row) if row is not None else None


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
