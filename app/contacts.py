"""Contact management routes for the Contacts API."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path

from . import schemas
from .auth import get_current_user
from .contact_service import ContactService, get_contact_service
from .models import User

#: Identifier taken from the URL; out-of-range values are rejected with 400
PathId = Annotated[int, Path(gt=0, le=schemas.MAX_ID)]

router = APIRouter(prefix="/api/contacts", tags=["contacts"])


@router.post("", response_model=schemas.WebResponse[schemas.ContactResponse])
def create_contact(
    payload: dict[str, Any] = Body(...),
    service: ContactService = Depends(get_contact_service),
    current_user: User = Depends(get_current_user),
):
    """
    Create a new contact owned by the current user.

    Args:
        payload (dict): Contact fields; validated against CreateContactRequest.
        service (ContactService): Contact workflow.
        current_user (User): Authenticated user.

    Returns:
        WebResponse[ContactResponse]: Created contact.
    """
    return {"data": service.create(current_user, payload)}


@router.get(
    "/{contact_id}", response_model=schemas.WebResponse[schemas.ContactResponse]
)
def get_contact(
    contact_id: PathId,
    service: ContactService = Depends(get_contact_service),
    current_user: User = Depends(get_current_user),
):
    """
    Retrieve a single contact by ID for the current user.

    Raises:
        NotFoundError: If the contact is missing or owned by another user.
    """
    return {"data": service.get(current_user, contact_id)}


@router.put(
    "/{contact_id}", response_model=schemas.WebResponse[schemas.ContactResponse]
)
def update_contact(
    contact_id: PathId,
    payload: dict[str, Any] = Body(...),
    service: ContactService = Depends(get_contact_service),
    current_user: User = Depends(get_current_user),
):
    """
    Update an existing contact.

    Only fields provided in the request body are changed; the ``id``
    always comes from the path.

    Raises:
        ValidationError: If the body violates UpdateContactRequest.
        NotFoundError: If the contact is missing or owned by another user.
    """
    request = {**payload, "id": contact_id}
    return {"data": service.update(current_user, request)}


@router.delete("/{contact_id}", response_model=schemas.WebResponse[bool])
def remove_contact(
    contact_id: PathId,
    service: ContactService = Depends(get_contact_service),
    current_user: User = Depends(get_current_user),
):
    """
    Delete a contact owned by the current user, with its addresses.

    Returns:
        WebResponse[bool]: ``{"data": true}``.
    """
    service.remove(current_user, contact_id)
    return {"data": True}
