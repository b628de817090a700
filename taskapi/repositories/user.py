import logging
from sqlalchemy.exc import IntegrityError
from taskapi.errors import DuplicateRecordError, RecordNotFoundError
from taskapi.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, session_factory):
        self._session_factory = session_factory

    def get_user_by_email(self, email: str) -> User:
        with self._session_factory() as db:
            user = db.query(User).filter(User.email == email).first()
        if user is None:
            raise RecordNotFoundError()
        return user

    def create_user(self, user: User) -> User:
        with self._session_factory() as db:
            db.add(user)
            try:
                db.commit()
            except IntegrityError as e:
                db.rollback()
                logger.warning(f"Could not create user: {e.orig}")
                raise DuplicateRecordError(str(e.orig)) from e
            db.refresh(user)
        return user
