from datetime import datetime, timedelta, UTC
from fastapi import Request, Response, status
from taskapi.config import API_DOMAIN, COOKIE_EXPIRE_HOURS
from taskapi.routers.deps import SESSION_COOKIE_NAME
from taskapi.schemas.user import CsrfTokenResponse, UserRequest, UserResponse


class UserController:
    def __init__(self, user_usecase, cookie_domain: str = API_DOMAIN):
        self.user_usecase = user_usecase
        self.cookie_domain = cookie_domain or None

    def sign_up(self, user: UserRequest) -> UserResponse:
        return self.user_usecase.sign_up(user)

    def log_in(self, user: UserRequest) -> Response:
        token = self.user_usecase.login(user)
        response = Response(status_code=status.HTTP_200_OK)
        # cookie lifetime is independent of the token exp
        response.set_cookie(
            SESSION_COOKIE_NAME,
            token,
            expires=datetime.now(UTC) + timedelta(hours=COOKIE_EXPIRE_HOURS),
            path="/",
            domain=self.cookie_domain,
            secure=True,
            httponly=True,
            samesite="none",
        )
        return response

    def log_out(self) -> Response:
        response = Response(status_code=status.HTTP_200_OK)
        response.delete_cookie(
            SESSION_COOKIE_NAME,
            path="/",
            domain=self.cookie_domain,
            secure=True,
            httponly=True,
            samesite="none",
        )
        return response

    def csrf_token(self, request: Request) -> CsrfTokenResponse:
        return CsrfTokenResponse(csrf_token=request.state.csrf_token)
