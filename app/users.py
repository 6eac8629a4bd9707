"""User account routes for the Contacts API."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from . import schemas
from .auth import get_current_user
from .models import User
from .user_service import UserService, get_user_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=schemas.WebResponse[schemas.UserResponse])
def register(
    payload: dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
):
    """
    Register a new user.

    Args:
        payload (dict): ``username``, ``password`` and ``name``.
        service (UserService): User workflow.

    Raises:
        HTTPException: If the username is already taken.

    Returns:
        WebResponse[UserResponse]: The registered user without token.
    """
    return {"data": service.register(payload)}


@router.post("/login", response_model=schemas.WebResponse[schemas.UserResponse])
def login(
    payload: dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
):
    """
    Authenticate a user and return a new session token.

    The token is sent back in the ``Authorization`` header of later requests.
    """
    return {"data": service.login(payload)}


@router.get("/current", response_model=schemas.WebResponse[schemas.UserResponse])
def read_current(
    service: UserService = Depends(get_user_service),
    current_user: User = Depends(get_current_user),
):
    """Retrieve details of the currently authenticated user."""
    return {"data": service.get(current_user)}


@router.patch("/current", response_model=schemas.WebResponse[schemas.UserResponse])
def update_current(
    payload: dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
    current_user: User = Depends(get_current_user),
):
    """Update name and/or password of the current user."""
    return {"data": service.update(current_user, payload)}


@router.delete("/current", response_model=schemas.WebResponse[bool])
def logout(
    service: UserService = Depends(get_user_service),
    current_user: User = Depends(get_current_user),
):
    """Log out by clearing the session token."""
    service.logout(current_user)
    return {"data": True}
