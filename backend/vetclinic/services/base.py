"""Module: base."""

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from datetime import date, datetime
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vetclinic.core.exceptions import InternalError

logger = logging.getLogger(__name__)


def format_date(value: Any) -> Any:
    """Render DATE values as ``YYYY-MM-DD``; anything else passes through."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value


def missing_id(value: int | None) -> bool:
    # Store-generated keys start at 1, so 0 and negatives never reference a row.
    return value is None or value <= 0


def row_to_dict(row: Mapping[str, Any], id_keys: tuple[str, ...] = ()) -> dict[str, Any]:
    # Identifiers leave the API as strings.
    d = dict(row)
    for key in id_keys:
        if d.get(key) is not None:
            d[key] = str(d[key])
    return d


class BaseService:
    """Holds the request-scoped session every resource handler works through."""

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def store_errors(self, action: str) -> Iterator[None]:
        # Store failures are logged with detail and reported generically.
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Error %s", action)
            raise InternalError(f"Error {action}") from exc
