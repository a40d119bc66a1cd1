"""Module: views.

Template rendering and flash messages. A flash message is stored in the
signed session cookie by the handler that redirects and popped by the next
page that renders.
"""

from pathlib import Path

from fastapi import Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def flash(request: Request, message: str) -> None:
    request.session["message"] = message


def flash_error(request: Request, message: str) -> None:
    request.session["error"] = message


def render(request: Request, name: str, context: dict | None = None, status_code: int = 200):
    ctx = dict(context or {})
    # Error pages can render outside the session middleware.
    session = request.scope.get("session")
    if session is not None:
        ctx.setdefault("message", session.pop("message", None))
        ctx.setdefault("error", session.pop("error", None))
    return templates.TemplateResponse(request, name, ctx, status_code=status_code)


def redirect(url: str) -> RedirectResponse:
    # 303 so the browser follows a POST with a GET.
    return RedirectResponse(url, status_code=303)
