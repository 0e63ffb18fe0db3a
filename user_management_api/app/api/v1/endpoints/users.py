"""
User endpoints for API v1.

Listing, registration and update of users.  Validation lives in
``UserService``; these handlers only translate its errors into HTTP
status codes.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from user_management_api.app.core.errors import DuplicateEmailError, InvalidInputError, UserNotFoundError
from user_management_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from user_management_api.app.services.user_service import UserService


router = APIRouter()


def get_user_service(request: Request) -> UserService:
    """Return the service instance built by ``create_app``."""
    return request.app.state.user_service


@router.get("/", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return all users in storage order."""
    return [UserRead.model_validate(user) for user in service.get_all_users()]


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(
    user: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Register a new user.

    Responds with 422 if the name or e‑mail is malformed and 409 if the
    e‑mail is already registered.
    """
    try:
        created = service.create_user(user.name, user.email)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.to_dict()) from e
    except DuplicateEmailError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.to_dict()) from e
    return UserRead.model_validate(created)


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: int,
    body: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Replace a user's name and e‑mail."""
    try:
        updated = service.update_user(user_id, body.name, body.email)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.to_dict()) from e
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.to_dict()) from e
    except DuplicateEmailError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.to_dict()) from e
    return UserRead.model_validate(updated)
