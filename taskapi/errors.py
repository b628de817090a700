"""Application errors.

Every failure a use-case can report is an ``AppError`` carrying the message
sent back to the client and the HTTP status it maps to.
"""


class AppError(Exception):
    status_code = 500
    default_message = "internal error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "invalid input"


class PasswordHashError(AppError):
    status_code = 400
    default_message = "password cannot be hashed"


class InvalidCredentialsError(AppError):
    status_code = 401
    default_message = "invalid email or password"


class RecordNotFoundError(AppError):
    status_code = 404
    default_message = "record not found"


class ObjectDoesNotExistError(AppError):
    status_code = 404
    default_message = "object does not exist"


class DuplicateRecordError(AppError):
    status_code = 409
    default_message = "record already exists"
