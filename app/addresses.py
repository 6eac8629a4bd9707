"""Address routes nested under a contact."""

from typing import Any, List

from fastapi import APIRouter, Body, Depends

from . import schemas
from .address_service import AddressService, get_address_service
from .auth import get_current_user
from .contacts import PathId
from .models import User

router = APIRouter(prefix="/api/contacts/{contact_id}/addresses", tags=["addresses"])


@router.post("", response_model=schemas.WebResponse[schemas.AddressResponse])
def create_address(
    contact_id: PathId,
    payload: dict[str, Any] = Body(...),
    service: AddressService = Depends(get_address_service),
    current_user: User = Depends(get_current_user),
):
    """Add an address to one of the current user's contacts."""
    request = {**payload, "contact_id": contact_id}
    return {"data": service.create(current_user, request)}


@router.get("", response_model=schemas.WebResponse[List[schemas.AddressResponse]])
def list_addresses(
    contact_id: PathId,
    service: AddressService = Depends(get_address_service),
    current_user: User = Depends(get_current_user),
):
    """List every address of a contact."""
    return {"data": service.list(current_user, contact_id)}


@router.get(
    "/{address_id}", response_model=schemas.WebResponse[schemas.AddressResponse]
)
def get_address(
    contact_id: PathId,
    address_id: PathId,
    service: AddressService = Depends(get_address_service),
    current_user: User = Depends(get_current_user),
):
    request = {"contact_id": contact_id, "address_id": address_id}
    return {"data": service.get(current_user, request)}


@router.put(
    "/{address_id}", response_model=schemas.WebResponse[schemas.AddressResponse]
)
def update_address(
    contact_id: PathId,
    address_id: PathId,
    payload: dict[str, Any] = Body(...),
    service: AddressService = Depends(get_address_service),
    current_user: User = Depends(get_current_user),
):
    """
    Update an address; only fields present in the body change.

    Raises:
        NotFoundError: If the contact or the address cannot be found.
    """
    request = {**payload, "contact_id": contact_id, "id": address_id}
    return {"data": service.update(current_user, request)}


@router.delete("/{address_id}", response_model=schemas.WebResponse[bool])
def remove_address(
    contact_id: PathId,
    address_id: PathId,
    service: AddressService = Depends(get_address_service),
    current_user: User = Depends(get_current_user),
):
    request = {"contact_id": contact_id, "address_id": address_id}
    service.remove(current_user, request)
    return {"data": True}
