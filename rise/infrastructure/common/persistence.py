"""Helpers for atomic writes against the relational store."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from rise.exceptions import StoreUnavailableError

logger = structlog.get_logger(__name__)


def upsert_statement(db: Session, model: type[Any]) -> Any:  # noqa: ANN401
    """
    Dialect-specific INSERT that supports ON CONFLICT clauses.

    Both PostgreSQL and SQLite expose ``on_conflict_do_update`` and
    ``on_conflict_do_nothing`` with the same signature.
    """
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert(model)
    if dialect == "sqlite":
        return sqlite.insert(model)
    raise NotImplementedError(f"Upserts are not supported on dialect '{dialect}'")


@contextmanager
def atomic_write(db: Session, operation: str) -> Iterator[None]:
    """
    Commit the statements issued inside the block, or roll them all back.

    Connectivity failures surface as StoreUnavailableError; every other
    error is re-raised unchanged after the rollback.
    """
    try:
        yield
        db.commit()
    except OperationalError as e:
        db.rollback()
        logger.error("store_unavailable", operation=operation, error=str(e.orig))
        raise StoreUnavailableError from e
    except Exception:
        db.rollback()
        raise
