"""Contact workflow: validation, ownership checks and response mapping."""

import logging
from typing import Any, Mapping

from fastapi import Depends
from sqlalchemy.orm import Session

from . import crud
from .database import get_db
from .errors import NotFoundError
from .logging import get_logger
from .models import Contact, User
from .schemas import (
    MAX_ID,
    ContactResponse,
    CreateContactRequest,
    UpdateContactRequest,
)
from .validation import ValidationService, get_validation_service


class ContactService:
    """
    Create, read, update and remove contacts on behalf of a user.

    A contact is reachable only through the user named by its
    ``username`` column; a contact owned by someone else is reported
    exactly like a missing one.

    Args:
        db (Session): Database session used for every storage call.
        validator (ValidationService): Request schema validator.
        logger (logging.Logger): Logger receiving operation traces.
    """

    def __init__(
        self,
        db: Session,
        validator: ValidationService,
        logger: logging.Logger | None = None,
    ):
        self.db = db
        self.validator = validator
        self.logger = logger or get_logger(__name__)

    @staticmethod
    def to_contact_response(contact: Contact) -> ContactResponse:
        """Project a stored contact onto the public response shape."""
        return ContactResponse(
            id=contact.id,
            first_name=contact.first_name,
            last_name=contact.last_name,
            email=contact.email,
            phone=contact.phone,
        )

    def check_contact_must_exist(self, username: str, contact_id: int) -> Contact:
        """
        Return the contact identified by ``contact_id`` if ``username`` owns it.

        Raises:
            NotFoundError: If no such contact belongs to the user.
        """
        contact = None
        if 0 < contact_id <= MAX_ID:
            contact = crud.find_contact(self.db, username, contact_id)
        if contact is None:
            self.logger.info(
                "Contact %s not found for user %s", contact_id, username
            )
            raise NotFoundError("Contact is not found")
        return contact

    def create(self, user: User, request: Mapping[str, Any]) -> ContactResponse:
        """
        Validate and store a new contact owned by ``user``.

        Raises:
            ValidationError: If the request violates the create schema.
        """
        self.logger.debug("ContactService.create(%s, %s)", user.username, request)
        create_request = self.validator.validate(CreateContactRequest, request)
        contact = crud.create_contact(
            self.db, create_request.model_dump(), username=user.username
        )
        return self.to_contact_response(contact)

    def get(self, user: User, contact_id: int) -> ContactResponse:
        """Return one of the user's contacts."""
        self.logger.debug("ContactService.get(%s, %s)", user.username, contact_id)
        contact = self.check_contact_must_exist(user.username, contact_id)
        return self.to_contact_response(contact)

    def update(self, user: User, request: Mapping[str, Any]) -> ContactResponse:
        """
        Change the fields present in ``request`` on one of the user's contacts.

        Fields missing from the request keep their stored value.

        Raises:
            ValidationError: If the request violates the update schema.
            NotFoundError: If the contact does not belong to the user.
        """
        self.logger.debug("ContactService.update(%s, %s)", user.username, request)
        update_request = self.validator.validate(UpdateContactRequest, request)
        contact = self.check_contact_must_exist(user.username, update_request.id)
        changes = update_request.model_dump(exclude_unset=True, exclude={"id"})
        contact = crud.update_contact(self.db, contact, changes)
        return self.to_contact_response(contact)

    def remove(self, user: User, contact_id: int) -> None:
        """
        Delete one of the user's contacts together with its addresses.

        Raises:
            NotFoundError: If the contact does not belong to the user.
        """
        self.logger.debug("ContactService.remove(%s, %s)", user.username, contact_id)
        contact = self.check_contact_must_exist(user.username, contact_id)
        crud.delete_contact(self.db, contact)


def get_contact_service(
    db: Session = Depends(get_db),
    validator: ValidationService = Depends(get_validation_service),
) -> ContactService:
    """Dependency building a ContactService for the current request."""
    return ContactService(db, validator, get_logger(__name__))
