"""Module: system."""

from fastapi import APIRouter, Request

from petclinic.api.views import render

router = APIRouter()


@router.get("/", summary="Welcome page")
def welcome(request: Request):
    return render(request, "welcome.html")


# Endpoint: always fails, to show the generic error page.
@router.get("/oups", summary="Trigger an unhandled error")
def trigger_exception():
    raise RuntimeError("Expected: handler used to showcase what happens when an exception is thrown")
