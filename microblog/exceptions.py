"""Application exceptions and their handlers."""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from microblog.config import get_settings

logger = logging.getLogger(__name__)

SIGNIN_PATH = "/signin"


class SignInRequired(Exception):
    """Raised when a request needs an authenticated user and has none."""

    def __init__(self, detail: str = "Not authenticated"):
        super().__init__(detail)
        self.detail = detail


def wants_html(request: Request) -> bool:
    """Check whether the client is a browser asking for a page."""
    return "text/html" in request.headers.get("accept", "")


def safe_return_path(path: str | None) -> str | None:
    """Only local absolute paths are valid forwarding targets."""
    # Browsers read "/\" as "//", a protocol-relative URL
    if not path or not path.startswith("/") or path[1:2] in ("/", "\\"):
        return None
    return path


async def sign_in_required_handler(request: Request, exc: SignInRequired):
    """Send browsers to the sign-in page, everyone else gets a 401.

    The requested path is remembered in a cookie so that signing in can
    forward back to it.
    """
    if request.method == "GET" and wants_html(request):
        settings = get_settings()
        return_to = request.url.path
        if request.url.query:
            return_to = f"{return_to}?{request.url.query}"

        logger.debug(f"Redirecting to sign-in, will return to {return_to}")
        response = RedirectResponse(url=SIGNIN_PATH, status_code=status.HTTP_303_SEE_OTHER)
        response.set_cookie(
            key=settings.return_to_cookie_name,
            value=return_to,
            httponly=True,
            samesite="lax",
            secure=settings.is_production,
        )
        return response

    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": exc.detail},
        headers={"WWW-Authenticate": "Bearer"},
    )
