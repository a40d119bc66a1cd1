"""Storage identity as an explicit two-state value.

A record starts out ``UNASSIGNED`` and becomes ``Assigned(n)`` once the
repository has written it. The state never goes back, and an assigned value
never changes.
"""

from __future__ import annotations

from dataclasses import dataclass

from petclinic.core.exceptions import IdentityAlreadyAssigned


@dataclass(frozen=True)
class Unassigned:
    def __repr__(self) -> str:
        return "UNASSIGNED"


@dataclass(frozen=True)
class Assigned:
    value: int


Identity = Unassigned | Assigned

UNASSIGNED = Unassigned()


class IdentityMixin:
    """Identity helpers for dataclasses that carry an ``id: Identity`` field."""

    id: Identity

    @property
    def is_new(self) -> bool:
        return isinstance(self.id, Unassigned)

    @property
    def id_value(self) -> int | None:
        if isinstance(self.id, Assigned):
            return self.id.value
        return None

    def assign_identity(self, value: int) -> None:
        if isinstance(self.id, Assigned):
            if self.id.value != value:
                raise IdentityAlreadyAssigned(
                    f"{type(self).__name__} already has id {self.id.value}, refusing {value}"
                )
            return
        self.id = Assigned(value)
