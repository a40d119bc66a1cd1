"""Module: vet."""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column

from petclinic.db.base import Base

# Link table for the vet <-> specialty many-to-many association.
vet_specialties = Table(
    "vet_specialties",
    Base.metadata,
    Column("vet_id", Integer, ForeignKey("vets.id"), primary_key=True),
    Column("specialty_id", Integer, ForeignKey("specialties.id"), primary_key=True),
)


class VetRow(Base):
    __tablename__ = "vets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(30), nullable=False)
    last_name: Mapped[str] = mapped_column(String(30), nullable=False)
