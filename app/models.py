"""Database models for the Contacts API.

This module defines SQLAlchemy ORM models used by the application:
users own contacts, and contacts own addresses.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from .database import Base


class User(Base):
    """
    SQLAlchemy model representing an application user.

    A user is identified by its username and owns zero or more contacts.
    ``token`` holds the current session token and is empty after logout.
    """

    __tablename__ = "users"

    username = Column(String(100), primary_key=True)
    password = Column(String(100), nullable=False)
    name = Column(String(100), nullable=False)
    token = Column(String(100), nullable=True, index=True)

    #: List of contacts owned by the user
    contacts = relationship(
        "Contact",
        back_populates="user",
        cascade="all, delete-orphan",
    )


class Contact(Base):
    """
    SQLAlchemy model representing a contact entry.

    Each contact belongs to exactly one user, referenced by username.
    """

    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=True)
    email = Column(String(100), nullable=True)
    phone = Column(String(100), nullable=True)

    #: Username of the owning user
    username = Column(
        String(100),
        ForeignKey("users.username", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user = relationship("User", back_populates="contacts")

    #: Addresses are removed together with their contact
    addresses = relationship(
        "Address",
        back_populates="contact",
        cascade="all, delete-orphan",
    )


class Address(Base):
    """SQLAlchemy model representing a postal address of a contact."""

    __tablename__ = "addresses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    street = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True)
    province = Column(String(100), nullable=True)
    country = Column(String(100), nullable=False)
    postal_code = Column(String(10), nullable=False)

    contact_id = Column(
        Integer,
        ForeignKey("contacts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    contact = relationship("Contact", back_populates="addresses")
