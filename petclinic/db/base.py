"""Module: base."""

from sqlalchemy.orm import DeclarativeBase


# Shared SQLAlchemy declarative base that all table mappings inherit from.
# Its metadata is what init_db() hands to create_all().
class Base(DeclarativeBase):
    pass
