import logging
from fastapi import APIRouter, Depends, HTTPException, status

from movie_catalog.domain.dto import LoginRequest, UserProfile
from movie_catalog.domain.models import User
from movie_catalog.auth.dependencies import get_current_user
from movie_catalog.service.dependencies import get_auth_service, get_session_service
from movie_catalog.service.auth_service import AuthService
from movie_catalog.service.session_service import SessionService
from movie_catalog.exceptions.auth import InvalidCredentialsException

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    responses={404: {"description": "Not found"}}
)

@router.post("/login", response_model=UserProfile)
def login(
    credentials: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
    session: SessionService = Depends(get_session_service)
):
    try:
        user = auth_service.login(session, credentials.username, credentials.password)
        return UserProfile.from_domain(user)
    except InvalidCredentialsException as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Login failed: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to login"
        )

@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(session: SessionService = Depends(get_session_service)):
    session.logout()

@router.get("/me", response_model=UserProfile)
def read_user_me(current_user: User = Depends(get_current_user)):
    return UserProfile.from_domain(current_user)
