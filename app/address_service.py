"""Address workflow scoped to a contact owned by the caller."""

import logging
from typing import Any, Mapping

from fastapi import Depends
from sqlalchemy.orm import Session

from . import crud
from .contact_service import ContactService
from .database import get_db
from .errors import NotFoundError
from .logging import get_logger
from .models import Address, User
from .schemas import (
    AddressResponse,
    CreateAddressRequest,
    GetAddressRequest,
    RemoveAddressRequest,
    UpdateAddressRequest,
)
from .validation import ValidationService, get_validation_service


class AddressService:
    """
    Manage the addresses of a user's contacts.

    Every operation first resolves the contact through
    :meth:`ContactService.check_contact_must_exist`, then the address
    through its ``contact_id``.
    """

    def __init__(
        self,
        db: Session,
        validator: ValidationService,
        contacts: ContactService,
        logger: logging.Logger | None = None,
    ):
        self.db = db
        self.validator = validator
        self.contacts = contacts
        self.logger = logger or get_logger(__name__)

    @staticmethod
    def to_address_response(address: Address) -> AddressResponse:
        return AddressResponse(
            id=address.id,
            street=address.street,
            city=address.city,
            province=address.province,
            country=address.country,
            postal_code=address.postal_code,
        )

    def check_address_must_exist(self, contact_id: int, address_id: int) -> Address:
        address = crud.find_address(self.db, contact_id, address_id)
        if address is None:
            self.logger.info(
                "Address %s not found for contact %s", address_id, contact_id
            )
            raise NotFoundError("Address is not found")
        return address

    def create(self, user: User, request: Mapping[str, Any]) -> AddressResponse:
        self.logger.debug("AddressService.create(%s, %s)", user.username, request)
        create_request = self.validator.validate(CreateAddressRequest, request)
        self.contacts.check_contact_must_exist(user.username, create_request.contact_id)
        address = crud.create_address(self.db, create_request.model_dump())
        return self.to_address_response(address)

    def get(self, user: User, request: Mapping[str, Any]) -> AddressResponse:
        self.logger.debug("AddressService.get(%s, %s)", user.username, request)
        get_request = self.validator.validate(GetAddressRequest, request)
        self.contacts.check_contact_must_exist(user.username, get_request.contact_id)
        address = self.check_address_must_exist(
            get_request.contact_id, get_request.address_id
        )
        return self.to_address_response(address)

    def update(self, user: User, request: Mapping[str, Any]) -> AddressResponse:
        """Change the fields present in ``request``; others are kept."""
        self.logger.debug("AddressService.update(%s, %s)", user.username, request)
        update_request = self.validator.validate(UpdateAddressRequest, request)
        self.contacts.check_contact_must_exist(user.username, update_request.contact_id)
        address = self.check_address_must_exist(
            update_request.contact_id, update_request.id
        )
        changes = update_request.model_dump(
            exclude_unset=True, exclude={"id", "contact_id"}
        )
        address = crud.update_address(self.db, address, changes)
        return self.to_address_response(address)

    def remove(self, user: User, request: Mapping[str, Any]) -> AddressResponse:
        """Delete an address and return what it held."""
        self.logger.debug("AddressService.remove(%s, %s)", user.username, request)
        remove_request = self.validator.validate(RemoveAddressRequest, request)
        self.contacts.check_contact_must_exist(user.username, remove_request.contact_id)
        address = self.check_address_must_exist(
            remove_request.contact_id, remove_request.address_id
        )
        response = self.to_address_response(address)
        crud.delete_address(self.db, address)
        return response

    def list(self, user: User, contact_id: int) -> list[AddressResponse]:
        """Return every address of one of the user's contacts."""
        self.logger.debug("AddressService.list(%s, %s)", user.username, contact_id)
        contact = self.contacts.check_contact_must_exist(user.username, contact_id)
        return [
            self.to_address_response(address)
            for address in crud.list_addresses(self.db, contact.id)
        ]


def get_address_service(
    db: Session = Depends(get_db),
    validator: ValidationService = Depends(get_validation_service),
) -> AddressService:
    """Dependency building an AddressService for the current request."""
    contacts = ContactService(db, validator)
    return AddressService(db, validator, contacts, get_logger(__name__))
