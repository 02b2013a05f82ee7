import logging
from fastapi import Depends, HTTPException, status

from movie_catalog.domain.models import User
from movie_catalog.exceptions.auth import NotLoggedInException
from movie_catalog.service.dependencies import get_session_service
from movie_catalog.service.session_service import SessionService

logger = logging.getLogger(__name__)

def get_current_user(session: SessionService = Depends(get_session_service)) -> User:
    try:
        return session.require_active()
    except NotLoggedInException as e:
        logger.warning("Request without an active session")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e)
        )

def get_current_admin_user(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only administrators can register movies"
        )
    return current_user
