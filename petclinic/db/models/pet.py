"""Module: pet."""

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petclinic.db.base import Base


# A pet always belongs to one owner and references one pet type.
class PetRow(Base):
    __tablename__ = "pets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    type_id: Mapped[int] = mapped_column(Integer, ForeignKey("types.id"), nullable=False)
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("owners.id"),
        nullable=False,
        index=True,
    )
