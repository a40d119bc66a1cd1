"""Module: binding.

Field-scoped validation errors. Validation code only ever adds to a
``BindingResult``; the handler looks at ``has_errors`` and decides whether to
save or to redisplay the form.
"""

from __future__ import annotations

from dataclasses import dataclass, field

REQUIRED = "required"
INVALID_FORMAT = "invalid-format"
DUPLICATE = "duplicate"
FUTURE_DATE = "future-date"
NOT_FOUND = "not-found"

DEFAULT_MESSAGES = {
    REQUIRED: "is required",
    INVALID_FORMAT: "has an invalid format",
    DUPLICATE: "is already in use",
    FUTURE_DATE: "must not be in the future",
    NOT_FOUND: "has not been found",
}


@dataclass(frozen=True)
class FieldError:
    field: str | None
    code: str
    message: str


@dataclass
class BindingResult:
    errors: list[FieldError] = field(default_factory=list)

    def reject_value(self, field_name: str, code: str, message: str | None = None) -> None:
        self.errors.append(FieldError(field_name, code, message or DEFAULT_MESSAGES.get(code, code)))

    def reject(self, code: str, message: str | None = None) -> None:
        self.errors.append(FieldError(None, code, message or DEFAULT_MESSAGES.get(code, code)))

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_field_errors(self, field_name: str) -> bool:
        return any(e.field == field_name for e in self.errors)

    def get_field_error(self, field_name: str) -> FieldError | None:
        return next((e for e in self.errors if e.field == field_name), None)

    @property
    def global_errors(self) -> list[FieldError]:
        return [e for e in self.errors if e.field is None]

    def codes(self) -> dict[str | None, list[str]]:
        out: dict[str | None, list[str]] = {}
        for e in self.errors:
            out.setdefault(e.field, []).append(e.code)
        return out
