"""Browser sign-in and sign-out backed by a session cookie."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from microblog.config import get_settings
from microblog.database import get_db
from microblog.exceptions import SIGNIN_PATH, safe_return_path
from microblog.services.auth import authenticate_user, create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sessions"])


@router.get(SIGNIN_PATH)
async def signin_page():
    """Describe the sign-in form."""
    return {
        "detail": "Please sign in to access this page.",
        "action": "/sessions",
        "fields": ["email", "password"],
    }


@router.post("/sessions")
async def create_session(
    request: Request,
    email: Annotated[str, Form()],
    password: Annotated[str, Form()],
    db: Annotated[Session, Depends(get_db)],
):
    """Sign in and forward to the page that asked for it, or to the profile."""
    settings = get_settings()
    user = authenticate_user(db, email, password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email/password combination",
        )

    return_to = safe_return_path(request.cookies.get(settings.return_to_cookie_name))
    target = return_to or f"/api/v1/users/{user.id}"

    response = RedirectResponse(url=target, status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=create_access_token(user.id, user.email),
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
        max_age=settings.jwt_expiration_minutes * 60,
    )
    response.delete_cookie(settings.return_to_cookie_name)
    logger.info(f"User {user.id} signed in, forwarding to {target}")
    return response


@router.delete("/sessions")
async def destroy_session():
    """Sign out by dropping the session cookie."""
    settings = get_settings()
    response = RedirectResponse(url=SIGNIN_PATH, status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(settings.session_cookie_name)
    return response
