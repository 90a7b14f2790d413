from __future__ import annotations

import time

from fastapi import APIRouter

from app.config import settings
from app.models.database import WelcomeResponse

router = APIRouter()

WELCOME_API_MESSAGE = "Library Management System started successfully!"


@router.get("/api/welcome", response_model=WelcomeResponse)
async def welcome():
    """Return the application name, a fixed greeting, and the current time in ms."""
    return WelcomeResponse(
        application_name=settings.APP_NAME,
        message=WELCOME_API_MESSAGE,
        timestamp=int(time.time() * 1000),
    )
