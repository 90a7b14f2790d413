from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from app.config import settings

router = APIRouter(tags=["pages"])

WELCOME_PAGE_MESSAGE = "Welcome to the Library Management System!"


def _templates(request: Request):
    """Shortcut to the Jinja2 templates instance on app state."""
    return request.app.state.templates


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Render the welcome page."""
    return _templates(request).TemplateResponse(
        request,
        "index.html",
        {"app_name": settings.APP_NAME, "message": WELCOME_PAGE_MESSAGE},
    )
