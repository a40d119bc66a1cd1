"""Module: forms.

Declarative per-field rules for the HTML forms. Field aliases are the form
input names (``firstName``, ``birthDate``...), so errors come back keyed by
the same names the templates render.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from typing import Annotated, TypeVar

from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationError
from pydantic.alias_generators import to_camel

from petclinic.validation.binding import INVALID_FORMAT, REQUIRED, BindingResult

NonBlank = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
TenDigits = Annotated[str, StringConstraints(strip_whitespace=True, pattern=r"^[0-9]{10}$")]


class _Form(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, extra="ignore")


class OwnerForm(_Form):
    id: int | None = None
    first_name: NonBlank
    last_name: NonBlank
    address: NonBlank
    city: NonBlank
    telephone: TenDigits


class PetForm(_Form):
    # Required-ness of these is a cross-field rule, see pet_validator.
    id: int | None = None
    name: str | None = None
    birth_date: dt.date | None = None
    type: str | None = None


class VisitForm(_Form):
    date: dt.date | None = None
    description: NonBlank


F = TypeVar("F", bound=_Form)

_MISSING = {"missing", "string_too_short"}


def bind_form(form_cls: type[F], data: Mapping[str, object]) -> tuple[F | None, BindingResult]:
    """Validate submitted form data without raising.

    Blank inputs count as absent, so an empty required field reports
    ``required`` rather than a format error.
    """
    cleaned = {
        k: v.strip() if isinstance(v, str) else v
        for k, v in data.items()
        if not (v is None or (isinstance(v, str) and not v.strip()))
    }
    result = BindingResult()
    try:
        return form_cls.model_validate(cleaned), result
    except ValidationError as exc:
        for err in exc.errors():
            field_name = str(err["loc"][0]) if err["loc"] else None
            code = REQUIRED if err["type"] in _MISSING else INVALID_FORMAT
            if field_name is None:
                result.reject(code)
            elif not result.has_field_errors(field_name):
                result.reject_value(field_name, code)
        return None, result
