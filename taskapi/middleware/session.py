"""Reject requests to protected path prefixes that carry no valid session.

Runs before routing, so a request without a session never gets its body
decoded or reaches a controller.
"""
from fastapi import HTTPException
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from taskapi.routers.deps import SESSION_COOKIE_NAME, authenticate


class SessionMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, protected_prefixes=("/tasks",)):
        super().__init__(app)
        self.protected_prefixes = tuple(protected_prefixes)

    def _is_protected(self, path: str) -> bool:
        return any(path == p or path.startswith(p + "/") for p in self.protected_prefixes)

    async def dispatch(self, request, call_next):
        if request.method != "OPTIONS" and self._is_protected(request.url.path):
            try:
                authenticate(request.cookies.get(SESSION_COOKIE_NAME))
            except HTTPException as e:
                return JSONResponse(status_code=e.status_code, content={"detail": e.detail})
        return await call_next(request)
