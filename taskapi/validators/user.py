from email_validator import EmailNotValidError, validate_email
from taskapi.errors import ValidationError
from taskapi.schemas.user import UserRequest


class UserValidator:
    def validate(self, user: UserRequest) -> None:
        """Check presence of email and password and the shape of the email.

        The address is only checked, never normalized; what the client sent
        is what gets stored.
        """
        if not user.email:
            raise ValidationError("email is required")
        try:
            validate_email(user.email, check_deliverability=False)
        except EmailNotValidError:
            raise ValidationError("is not valid email format")
        if not user.password:
            raise ValidationError("password is required")
