from fastapi import APIRouter, status
from taskapi.schemas.user import CsrfTokenResponse, UserResponse


def build_auth_router(user_controller) -> APIRouter:
    """Public routes: sign-up, login, logout and CSRF token issuance."""
    router = APIRouter(tags=["auth"])
    router.add_api_route(
        "/signup",
        user_controller.sign_up,
        methods=["POST"],
        response_model=UserResponse,
        status_code=status.HTTP_201_CREATED,
    )
    router.add_api_route("/login", user_controller.log_in, methods=["POST"], status_code=status.HTTP_200_OK)
    router.add_api_route("/logout", user_controller.log_out, methods=["POST"], status_code=status.HTTP_200_OK)
    router.add_api_route("/csrf", user_controller.csrf_token, methods=["GET"], response_model=CsrfTokenResponse)
    return router
