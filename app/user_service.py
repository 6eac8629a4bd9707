"""User workflow: registration, login, profile updates and logout."""

import logging
from typing import Any, Mapping

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from . import crud
from .auth import create_token, get_password_hash, verify_password
from .database import get_db
from .logging import get_logger
from .models import User
from .schemas import (
    LoginUserRequest,
    RegisterUserRequest,
    UpdateUserRequest,
    UserResponse,
)
from .validation import ValidationService, get_validation_service


class UserService:
    """Account operations; passwords are hashed and never logged."""

    def __init__(
        self,
        db: Session,
        validator: ValidationService,
        logger: logging.Logger | None = None,
    ):
        self.db = db
        self.validator = validator
        self.logger = logger or get_logger(__name__)

    def register(self, request: Mapping[str, Any]) -> UserResponse:
        """
        Create a new user.

        Raises:
            ValidationError: If the request violates the register schema.
            HTTPException: 400 if the username is already taken.
        """
        register_request = self.validator.validate(RegisterUserRequest, request)
        self.logger.debug("UserService.register(%s)", register_request.username)

        if crud.get_user_by_username(self.db, register_request.username):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username already exists",
            )

        user = crud.create_user(
            self.db,
            username=register_request.username,
            hashed_password=get_password_hash(register_request.password),
            name=register_request.name,
        )
        self.logger.info("Registered user %s", user.username)
        return UserResponse(username=user.username, name=user.name)

    def login(self, request: Mapping[str, Any]) -> UserResponse:
        """
        Check credentials and issue a fresh session token.

        Raises:
            HTTPException: 401 if the username or password does not match.
        """
        login_request = self.validator.validate(LoginUserRequest, request)
        self.logger.debug("UserService.login(%s)", login_request.username)

        user = crud.get_user_by_username(self.db, login_request.username)
        if not user or not verify_password(login_request.password, user.password):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Username or password is invalid",
            )

        user = crud.update_user(self.db, user, {"token": create_token()})
        return UserResponse(username=user.username, name=user.name, token=user.token)

    def get(self, user: User) -> UserResponse:
        return UserResponse(username=user.username, name=user.name)

    def update(self, user: User, request: Mapping[str, Any]) -> UserResponse:
        """Change the display name and/or password of the current user."""
        update_request = self.validator.validate(UpdateUserRequest, request)
        self.logger.debug(
            "UserService.update(%s, fields=%s)",
            user.username,
            sorted(update_request.model_fields_set),
        )

        changes: dict[str, Any] = {}
        if update_request.name:
            changes["name"] = update_request.name
        if update_request.password:
            changes["password"] = get_password_hash(update_request.password)

        user = crud.update_user(self.db, user, changes)
        return UserResponse(username=user.username, name=user.name)

    def logout(self, user: User) -> None:
        """Invalidate the current session token."""
        self.logger.debug("UserService.logout(%s)", user.username)
        crud.update_user(self.db, user, {"token": None})


def get_user_service(
    db: Session = Depends(get_db),
    validator: ValidationService = Depends(get_validation_service),
) -> UserService:
    """Dependency building a UserService for the current request."""
    return UserService(db, validator, get_logger(__name__))
