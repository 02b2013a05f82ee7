import hmac
import logging
from typing import Optional
from passlib.context import CryptContext

from movie_catalog.config.catalog import SESSION_USER_ID_KEY
from movie_catalog.domain.models import User
from movie_catalog.repositories.interface.user_repository import UserRepository
from movie_catalog.service.session_service import SessionService
from movie_catalog.exceptions.auth import InvalidCredentialsException

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def verify_password(plain_password: str, stored_password: str) -> bool:
    # Seeded accounts store the password as-is; hashed values go through passlib.
    if pwd_context.identify(stored_password):
        try:
            return pwd_context.verify(plain_password, stored_password)
        except ValueError:
            # looks like a hash but does not parse; compare it as stored text
            logger.warning("Stored password resembles a malformed hash, comparing as plain text")
    return hmac.compare_digest(plain_password.encode("utf-8"), stored_password.encode("utf-8"))


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


class AuthService:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    def validate_credentials(self, username: str, password: str) -> Optional[User]:
        """Return the user when ``password`` matches, None for any failure.

        An unknown username and a wrong password are reported the same way.
        """
        user = self.user_repository.find_by_username(username)
        if user is None or not verify_password(password, user.password):
            return None
        return user

    def login(self, session: SessionService, username: str, password: str) -> User:
        user = self.validate_credentials(username, password)
        if user is None:
            logger.warning(f"Failed login attempt for username {username!r}")
            raise InvalidCredentialsException("Invalid username or password")

        session.login(user)
        session.set_object(SESSION_USER_ID_KEY, user.id)
        return user
