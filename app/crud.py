"""CRUD operations for users, contacts and addresses.

This module contains database interaction logic for the three entities,
isolated from FastAPI route handlers and from the ownership rules the
services enforce.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from . import models


def get_user_by_username(db: Session, username: str) -> models.User | None:
    """
    Retrieve a user by username.

    Args:
        db (Session): Database session.
        username (str): User identifier.

    Returns:
        User | None: User if found, otherwise ``None``.
    """
    return db.execute(
        select(models.User).where(models.User.username == username)
    ).scalar_one_or_none()


def get_user_by_token(db: Session, token: str) -> models.User | None:
    """
    Retrieve the user holding a session token.

    Args:
        db (Session): Database session.
        token (str): Session token.

    Returns:
        User | None: User if found, otherwise ``None``.
    """
    return db.execute(
        select(models.User).where(models.User.token == token)
    ).scalars().first()


def create_user(
    db: Session, username: str, hashed_password: str, name: str
) -> models.User:
    """
    Create and persist a new user.

    Args:
        db (Session): SQLAlchemy database session.
        username (str): Unique username.
        hashed_password (str): Securely hashed password.
        name (str): Display name.

    Returns:
        User: Newly created user instance.
    """
    user = models.User(username=username, password=hashed_password, name=name)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def update_user(db: Session, user: models.User, changes: dict) -> models.User:
    """
    Update columns of a user.

    Args:
        db (Session): Database session.
        user (User): Target user.
        changes (dict): Column values to set.

    Returns:
        User: Updated user instance.
    """
    target = get_user_by_username(db, user.username) or user
    for key, value in changes.items():
        setattr(target, key, value)
    db.add(target)
    db.commit()
    db.refresh(target)
    return target


def create_contact(db: Session, data: dict, username: str) -> models.Contact:
    """
    Create a new contact owned by the given user.

    Args:
        db (Session): Database session.
        data (dict): Validated contact fields.
        username (str): Owner of the contact.

    Returns:
        Contact: Newly created contact.
    """
    contact = models.Contact(**data, username=username)
    db.add(contact)
    db.commit()
    db.refresh(contact)
    return contact


def find_contact(db: Session, username: str, contact_id: int) -> models.Contact | None:
    """
    Retrieve the first contact matching both owner and identifier.

    Args:
        db (Session): Database session.
        username (str): Contact owner.
        contact_id (int): Contact identifier.

    Returns:
        Contact | None: Contact if found, otherwise ``None``.
    """
    return db.execute(
        select(models.Contact).where(
            models.Contact.username == username,
            models.Contact.id == contact_id,
        )
    ).scalars().first()


def update_contact(db: Session, contact: models.Contact, changes: dict):
    """
    Update mutable fields of a contact.

    Args:
        db (Session): Database session.
        contact (Contact): Contact instance.
        changes (dict): Fields to update.

    Returns:
        Contact: Updated contact.
    """
    for key, value in changes.items():
        setattr(contact, key, value)

    db.add(contact)
    db.commit()
    db.refresh(contact)
    return contact


def delete_contact(db: Session, contact: models.Contact):
    """
    Delete a contact and, through the relationship cascade, its addresses.

    Args:
        db (Session): Database session.
        contact (Contact): Contact to delete.
    """
    db.delete(contact)
    db.commit()
    return None


def create_address(db: Session, data: dict) -> models.Address:
    """
    Create a new address; ``data`` must carry ``contact_id``.

    Args:
        db (Session): Database session.
        data (dict): Validated address fields.

    Returns:
        Address: Newly created address.
    """
    address = models.Address(**data)
    db.add(address)
    db.commit()
    db.refresh(address)
    return address


def find_address(db: Session, contact_id: int, address_id: int) -> models.Address | None:
    """
    Retrieve an address belonging to the given contact.

    Args:
        db (Session): Database session.
        contact_id (int): Owning contact.
        address_id (int): Address identifier.

    Returns:
        Address | None: Address if found, otherwise ``None``.
    """
    return db.execute(
        select(models.Address).where(
            models.Address.contact_id == contact_id,
            models.Address.id == address_id,
        )
    ).scalars().first()


def list_addresses(db: Session, contact_id: int) -> list[models.Address]:
    """Return every address of a contact ordered by id."""
    return list(
        db.scalars(
            select(models.Address)
            .where(models.Address.contact_id == contact_id)
            .order_by(models.Address.id)
        ).all()
    )


def update_address(db: Session, address: models.Address, changes: dict):
    """
    Update mutable fields of an address.

    Args:
        db (Session): Database session.
        address (Address): Address instance.
        changes (dict): Fields to update.

    Returns:
        Address: Updated address.
    """
    for key, value in changes.items():
        setattr(address, key, value)

    db.add(address)
    db.commit()
    db.refresh(address)
    return address


def delete_address(db: Session, address: models.Address):
    """Delete an address from the database."""
    db.delete(address)
    db.commit()
    return None
