import logging
from typing import Any, Dict, Optional

from movie_catalog.domain.models import User
from movie_catalog.exceptions.auth import NotLoggedInException

logger = logging.getLogger(__name__)


class SessionService:
    """Holds the single active user plus a free-form key/value bag.

    One instance lives for the lifetime of the application and is handed to
    whoever needs it. It is single-tenant: a second ``login`` replaces the
    first user.
    """

    def __init__(self):
        self._active_user: Optional[User] = None
        self._data: Dict[str, Any] = {}

    def login(self, user: User) -> None:
        self._active_user = user
        logger.info(f"User {user.username} logged in")

    def is_logged_in(self) -> bool:
        return self._active_user is not None

    def logout(self) -> None:
        if self._active_user is not None:
            logger.info(f"User {self._active_user.username} logged out")
        self._active_user = None
        self._data.clear()

    def get_active(self) -> Optional[User]:
        return self._active_user

    def set_object(self, key: str, value: Any) -> None:
        self._data[key] = value

    def get_object(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    def require_active(self) -> User:
        if self._active_user is None:
            raise NotLoggedInException("No user logged in. Please log in again.")
        return self._active_user
