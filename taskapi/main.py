import logging
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from taskapi import config
from taskapi.controllers.task import TaskController
from taskapi.controllers.user import UserController
from taskapi.database import init_db, make_engine, make_session_factory
from taskapi.errors import AppError
from taskapi.middleware.csrf import CSRFMiddleware
from taskapi.middleware.session import SessionMiddleware
from taskapi.repositories.task import TaskRepository
from taskapi.repositories.user import UserRepository
from taskapi.routers.auth import build_auth_router
from taskapi.routers.tasks import build_task_router
from taskapi.usecases.task import TaskUsecase
from taskapi.usecases.user import UserUsecase
from taskapi.validators.task import TaskValidator
from taskapi.validators.user import UserValidator

logger = logging.getLogger(__name__)


def create_app(engine=None) -> FastAPI:
    """Build every component bottom-up and return the wired application."""
    if engine is None:
        engine = make_engine(config.DATABASE_URL)
    init_db(engine)
    session_factory = make_session_factory(engine)

    if not config.SECRET:
        logger.warning("SECRET is not set; session tokens are signed with an empty key")

    user_validator = UserValidator()
    task_validator = TaskValidator()
    user_repository = UserRepository(session_factory)
    task_repository = TaskRepository(session_factory)
    user_usecase = UserUsecase(user_repository, user_validator)
    task_usecase = TaskUsecase(task_repository, task_validator)
    user_controller = UserController(user_usecase, cookie_domain=config.API_DOMAIN)
    task_controller = TaskController(task_usecase)

    app = FastAPI(title="Task API")
    app.include_router(build_auth_router(user_controller))
    app.include_router(build_task_router(task_controller))

    # last added runs first: CORS, then CSRF, then the session check
    app.add_middleware(SessionMiddleware, protected_prefixes=("/tasks",))
    app.add_middleware(CSRFMiddleware, cookie_domain=config.API_DOMAIN)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "PUT", "POST", "DELETE"],
        allow_headers=["Origin", "Content-Type", "Accept", "Access-Control-Allow-Headers", config.CSRF_HEADER_NAME],
    )

    register_exception_handlers(app)
    return app


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    # Malformed bodies and path parameters are client errors, not 422s
    @app.exception_handler(RequestValidationError)
    async def decode_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def run() -> None:
    import uvicorn

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("taskapi.main:create_app", factory=True, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
