import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status

from movie_catalog.domain.dto import CopyCreate, CopyUpdate, CopyResponse, CopyListResponse
from movie_catalog.domain.models import User
from movie_catalog.auth.dependencies import get_current_user
from movie_catalog.service.dependencies import get_copy_service
from movie_catalog.service.copy_service import CopyService
from movie_catalog.exceptions.catalog import InvalidRequestException, ResourceNotFoundException
from movie_catalog.exceptions.repository import RepositoryException

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/copies",
    tags=["Copies"],
    responses={404: {"description": "Not found"}}
)


@router.get("", response_model=CopyListResponse)
def list_my_copies(
    search: Optional[str] = None,
    current_user: User = Depends(get_current_user),
    copy_service: CopyService = Depends(get_copy_service)
):
    try:
        copies = copy_service.list_user_copies(current_user, search)
    except RepositoryException as e:
        logger.error(f"Failed to load copies of user {current_user.id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to load copies")

    return CopyListResponse(
        total=len(copies),
        copies=[CopyResponse.from_domain(copy) for copy in copies]
    )


@router.get("/{copy_id}", response_model=CopyResponse)
def get_copy(
    copy_id: int,
    current_user: User = Depends(get_current_user),
    copy_service: CopyService = Depends(get_copy_service)
):
    try:
        return CopyResponse.from_domain(copy_service.get_user_copy(current_user, copy_id))
    except ResourceNotFoundException as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CopyResponse)
def add_copy(
    copy_data: CopyCreate,
    current_user: User = Depends(get_current_user),
    copy_service: CopyService = Depends(get_copy_service)
):
    try:
        copy = copy_service.add_copy(
            current_user,
            movie_id=copy_data.movie_id,
            condition=copy_data.condition,
            medium=copy_data.medium
        )
        return CopyResponse.from_domain(copy)
    except InvalidRequestException as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RepositoryException as e:
        logger.error(f"Failed to save copy: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to save copy")


@router.put("/{copy_id}", response_model=CopyResponse)
def update_copy(
    copy_id: int,
    copy_data: CopyUpdate,
    current_user: User = Depends(get_current_user),
    copy_service: CopyService = Depends(get_copy_service)
):
    try:
        copy = copy_service.update_copy(
            current_user,
            copy_id,
            condition=copy_data.condition,
            medium=copy_data.medium,
            movie_id=copy_data.movie_id
        )
        return CopyResponse.from_domain(copy)
    except ResourceNotFoundException as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidRequestException as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RepositoryException as e:
        logger.error(f"Failed to update copy {copy_id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to update copy")


@router.delete("/{copy_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_copy(
    copy_id: int,
    current_user: User = Depends(get_current_user),
    copy_service: CopyService = Depends(get_copy_service)
):
    try:
        copy_service.delete_copy(current_user, copy_id)
    except ResourceNotFoundException as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RepositoryException as e:
        logger.error(f"Failed to delete copy {copy_id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to delete copy")
