"""
User endpoints for API v1.

CRUD for the user directory plus bulk registration, status changes and
the reporting queries (name search, age range, status filter and
statistics).  Registering an e‑mail address that is already taken
answers 409 with kind ``conflict``.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, Query, status

from catalog_api.app.api.dependencies import get_user_service
from catalog_api.app.schemas.user import StatusUpdate, User, UserCreate, UserStatistics, UserUpdate
from catalog_api.app.services.user_service import UserService

router = APIRouter()


@router.get("/", response_model=List[User])
def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
    return service.list_all()


@router.get("/search", response_model=List[User])
def search_users(
    name: str = Query(..., description="Case-insensitive part of the name"),
    service: UserService = Depends(get_user_service),
) -> List[User]:
    return service.search_by_name(name)


@router.get("/age-range", response_model=List[User])
def list_users_by_age(
    min_age: int = Query(..., alias="minAge"),
    max_age: int = Query(..., alias="maxAge"),
    service: UserService = Depends(get_user_service),
) -> List[User]:
    """Return users whose age lies in ``[minAge, maxAge]``."""
    return service.list_by_age_range(min_age, max_age)


@router.get("/statistics", response_model=UserStatistics)
def user_statistics(service: UserService = Depends(get_user_service)) -> UserStatistics:
    return service.statistics()


@router.get("/status-counts", response_model=Dict[str, int])
def count_users_by_status(service: UserService = Depends(get_user_service)) -> Dict[str, int]:
    return service.count_by_status()


@router.get("/status/{user_status}", response_model=List[User])
def list_users_by_status(user_status: str, service: UserService = Depends(get_user_service)) -> List[User]:
    return service.list_by_status(user_status)


@router.get("/{user_id}", response_model=User)
def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> User:
    return service.get_by_id(user_id)


@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(user_in: UserCreate, service: UserService = Depends(get_user_service)) -> User:
    return service.create(user_in.to_entity())


@router.post("/bulk", response_model=List[User], status_code=status.HTTP_201_CREATED)
def create_users_bulk(users_in: List[UserCreate], service: UserService = Depends(get_user_service)) -> List[User]:
    """Register several users at once.

    Either every user is created or, when one of them is invalid or
    its e‑mail is taken, none is.
    """
    return service.create_bulk([u.to_entity() for u in users_in])


@router.put("/{user_id}", response_model=User)
def update_user(user_id: int, user_in: UserUpdate, service: UserService = Depends(get_user_service)) -> User:
    return service.update(user_id, user_in.model_dump(exclude_unset=True, exclude_none=True))


@router.patch("/{user_id}/status", response_model=User)
def update_user_status(
    user_id: int,
    body: StatusUpdate,
    service: UserService = Depends(get_user_service),
) -> User:
    return service.update_status(user_id, body.status)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> None:
    service.delete(user_id)
    return None
