from typing import Annotated, Generic, Optional, TypeVar

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")

#: Largest value an SQL INTEGER primary key can hold
MAX_ID = 2**63 - 1

RowId = Annotated[int, Field(gt=0, le=MAX_ID)]


def check_email_format(value):
    """Reject malformed addresses but keep the value exactly as sent."""
    if value is None:
        return value
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from exc
    return value


class WebResponse(BaseModel, Generic[T]):
    """Envelope wrapping every successful response body."""

    data: T


class RegisterUserRequest(BaseModel):
    """Payload for registering a new user."""

    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=100)
    name: str = Field(min_length=1, max_length=100)


class LoginUserRequest(BaseModel):
    """Credentials used to obtain a session token."""

    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=100)


class UpdateUserRequest(BaseModel):
    """Fields of the current user that may be changed (all optional)."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    password: Optional[str] = Field(default=None, min_length=1, max_length=100)


class UserResponse(BaseModel):
    """Public view of a user."""

    username: str
    name: str
    token: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class CreateContactRequest(BaseModel):
    """Schema for creating new contact.

    Unknown keys, including a client-supplied ``username``, are dropped.
    """

    first_name: str = Field(min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    email: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=100)

    @field_validator("email")
    @classmethod
    def email_format(cls, value):
        return check_email_format(value)


class UpdateContactRequest(BaseModel):
    """Schema for updating contact (all fields but ``id`` optional)."""

    id: RowId
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    email: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=100)

    @field_validator("first_name")
    @classmethod
    def first_name_not_null(cls, value):
        if value is None:
            raise ValueError("first_name cannot be null")
        return value

    @field_validator("email")
    @classmethod
    def email_format(cls, value):
        return check_email_format(value)


class ContactResponse(BaseModel):
    """Contact as returned to the client; owner and addresses are omitted."""

    id: int
    first_name: str
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class CreateAddressRequest(BaseModel):
    """Schema for adding an address to a contact."""

    contact_id: RowId
    street: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, max_length=100)
    province: Optional[str] = Field(default=None, max_length=100)
    country: str = Field(min_length=1, max_length=100)
    postal_code: str = Field(min_length=1, max_length=10)


class GetAddressRequest(BaseModel):
    """Identifies one address of one contact."""

    contact_id: RowId
    address_id: RowId


class RemoveAddressRequest(GetAddressRequest):
    """Identifies the address to delete."""

    pass


class UpdateAddressRequest(BaseModel):
    """Schema for updating an address (all fields but the ids optional)."""

    id: RowId
    contact_id: RowId
    street: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, max_length=100)
    province: Optional[str] = Field(default=None, max_length=100)
    country: Optional[str] = Field(default=None, min_length=1, max_length=100)
    postal_code: Optional[str] = Field(default=None, min_length=1, max_length=10)

    @field_validator("country", "postal_code")
    @classmethod
    def required_columns_not_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class AddressResponse(BaseModel):
    """Address as returned to the client."""

    id: int
    street: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    country: str
    postal_code: str

    model_config = ConfigDict(from_attributes=True)
