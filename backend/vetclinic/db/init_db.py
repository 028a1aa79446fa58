from sqlalchemy.engine import Engine

from vetclinic.db.base import Base
from vetclinic.db.session import engine

# IMPORTANT: import models so they register with Base.metadata
import vetclinic.db.models  # noqa: F401


def init_db(bind: Engine | None = None) -> None:
    Base.metadata.create_all(bind=bind or engine)
