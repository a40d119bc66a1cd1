"""Domain exceptions shared by the repositories and request handlers."""


class PetClinicError(Exception):
    """Base class for errors raised by the clinic application."""


class NotFoundError(PetClinicError):
    """A path identity or lookup referenced a row that does not exist."""

    def __init__(self, resource: str, identifier: object):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found with id: {identifier}")


class ConstraintViolationError(PetClinicError):
    """Storage rejected a write, e.g. a required column was left empty."""


class IdentityAlreadyAssigned(PetClinicError):
    """A persisted record was given a second, different identity."""
