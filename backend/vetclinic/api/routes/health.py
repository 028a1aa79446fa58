"""Module: health."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vetclinic.api.routes.deps import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


# Endpoint: liveness probe that also reports whether the database answers.
@router.get("")
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError:
        logger.warning("Health check could not reach the database", exc_info=True)
        database = "unavailable"
    return {"status": "ok", "database": database}
