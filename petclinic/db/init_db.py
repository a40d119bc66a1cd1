from sqlalchemy import Engine

from petclinic.db.base import Base

# IMPORTANT: import models so they register with Base.metadata
import petclinic.db.models  # noqa: F401


def init_db(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)
