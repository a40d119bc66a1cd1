"""Module: pet_type."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petclinic.db.base import Base


# Closed lookup set (cat, dog, lizard, ...), seeded rather than user-created.
class PetTypeRow(Base):
    __tablename__ = "types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(80), nullable=False, unique=True)
