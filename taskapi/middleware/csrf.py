"""Double-submit CSRF protection.

The token lives in a cookie; state-changing requests must echo it back in a
header. A cross-site page can make the browser send the cookie but cannot
read it to fill in the header.
"""
import hmac
import logging
import secrets
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from taskapi.config import (
    API_DOMAIN,
    CSRF_COOKIE_MAX_AGE,
    CSRF_COOKIE_NAME,
    CSRF_HEADER_NAME,
    CSRF_TOKEN_LENGTH,
)

logger = logging.getLogger(__name__)

SAFE_METHODS = {"GET", "HEAD", "OPTIONS", "TRACE"}


def generate_csrf_token(length: int = CSRF_TOKEN_LENGTH) -> str:
    return secrets.token_urlsafe(length)[:length]


class CSRFMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, cookie_domain: str = API_DOMAIN):
        super().__init__(app)
        self.cookie_domain = cookie_domain or None

    async def dispatch(self, request, call_next):
        token = request.cookies.get(CSRF_COOKIE_NAME) or generate_csrf_token()

        if request.method not in SAFE_METHODS:
            sent = request.headers.get(CSRF_HEADER_NAME)
            if not sent:
                logger.warning(f"CSRF token missing on {request.method} {request.url.path}")
                return JSONResponse(status_code=400, content={"detail": "missing csrf token in request header"})
            if not hmac.compare_digest(sent.encode(), token.encode()):
                logger.warning(f"CSRF token mismatch on {request.method} {request.url.path}")
                return JSONResponse(status_code=403, content={"detail": "invalid csrf token"})

        request.state.csrf_token = token
        response = await call_next(request)
        response.set_cookie(
            CSRF_COOKIE_NAME,
            token,
            max_age=CSRF_COOKIE_MAX_AGE,
            path="/",
            domain=self.cookie_domain,
            secure=True,
            httponly=True,
            samesite="none",
        )
        return response
