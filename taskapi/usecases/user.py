import logging
from taskapi.errors import InvalidCredentialsError, PasswordHashError, RecordNotFoundError
from taskapi.models.user import User
from taskapi.schemas.user import UserRequest, UserResponse
from taskapi.utils.auth import create_token, hash_password, verify_password

logger = logging.getLogger(__name__)


class UserUsecase:
    def __init__(self, user_repository, user_validator):
        self.user_repository = user_repository
        self.user_validator = user_validator

    def sign_up(self, user: UserRequest) -> UserResponse:
        self.user_validator.validate(user)
        try:
            hashed = hash_password(user.password)
        except ValueError as e:
            raise PasswordHashError(str(e)) from e

        new_user = self.user_repository.create_user(User(email=user.email, password=hashed))
        logger.info(f"Signed up user {new_user.id}")
        return UserResponse(id=new_user.id, email=new_user.email)

    def login(self, user: UserRequest) -> str:
        """Check the credentials and return a signed session token.

        Unknown email and wrong password fail the same way, so a caller
        cannot probe which addresses are registered.
        """
        self.user_validator.validate(user)
        try:
            stored_user = self.user_repository.get_user_by_email(user.email)
        except RecordNotFoundError:
            logger.warning("Login failed: unknown email")
            raise InvalidCredentialsError()

        if not verify_password(user.password, stored_user.password):
            logger.warning(f"Login failed: password mismatch for user {stored_user.id}")
            raise InvalidCredentialsError()

        logger.info(f"User {stored_user.id} logged in")
        return create_token(stored_user.id)
