"""Exception handlers that turn domain errors into the generic error page.

Validation problems never reach these handlers: the request handlers catch
them and redisplay the form. What arrives here ends the request:

- ``NotFoundError``: 404, the page names the missing resource
- ``ConstraintViolationError``: 500, storage rejected a write
- anything else: 500

5xx pages never include exception text.
"""

from __future__ import annotations

from fastapi import FastAPI, Request

from petclinic.api.views import render
from petclinic.core.exceptions import ConstraintViolationError, NotFoundError
from petclinic.core.logging import get_logger

logger = get_logger(__name__)

GENERIC_MESSAGE = "Something happened..."


def _error_page(request: Request, status_code: int, title: str, detail: str):
    return render(
        request,
        "error.html",
        {"status": status_code, "title": title, "detail": detail},
        status_code=status_code,
    )


async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning("not_found", path=request.url.path, resource=exc.resource, identifier=str(exc.identifier))
    return _error_page(request, 404, "Not Found", str(exc))


async def constraint_violation_handler(request: Request, exc: ConstraintViolationError):
    logger.error("constraint_violation", path=request.url.path, exc_info=exc)
    return _error_page(request, 500, "Internal Server Error", GENERIC_MESSAGE)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
    return _error_page(request, 500, "Internal Server Error", GENERIC_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ConstraintViolationError, constraint_violation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
