import pytest

from app import crud
from app.auth import get_password_hash
from app.contact_service import ContactService
from app.errors import NotFoundError, ValidationError
from app.validation import ValidationService


def create_user(db_session, username):
    return crud.create_user(
        db_session, username=username, hashed_password=get_password_hash("x"), name=username
    )


@pytest.fixture()
def service(db_session):
    return ContactService(db_session, ValidationService())


def test_create_then_get_returns_same_response(db_session, service):
    alice = create_user(db_session, "alice")
    created = service.create(alice, {"first_name": "Ann", "email": "ann@x.com"})
    assert created.first_name == "Ann"
    assert created.last_name is None
    assert service.get(alice, created.id) == created


def test_get_hides_contacts_of_other_users(db_session, service):
    alice = create_user(db_session, "alice")
    bob = create_user(db_session, "bob")
    created = service.create(alice, {"first_name": "Ann"})

    with pytest.raises(NotFoundError):
        service.get(bob, created.id)
    with pytest.raises(NotFoundError):
        service.update(bob, {"id": created.id, "last_name": "Lee"})
    with pytest.raises(NotFoundError):
        service.remove(bob, created.id)

    assert service.get(alice, created.id).last_name is None


def test_update_rejects_invalid_payload_without_writing(db_session, service):
    alice = create_user(db_session, "alice")
    created = service.create(alice, {"first_name": "Ann"})

    with pytest.raises(ValidationError) as excinfo:
        service.update(alice, {"id": created.id, "email": "broken"})
    assert excinfo.value.errors[0]["field"] == "email"
    assert service.get(alice, created.id).email is None


def test_update_requires_id(db_session, service):
    alice = create_user(db_session, "alice")
    with pytest.raises(ValidationError):
        service.update(alice, {"first_name": "Ann"})


def test_update_can_clear_optional_field(db_session, service):
    alice = create_user(db_session, "alice")
    created = service.create(alice, {"first_name": "Ann", "phone": "0800"})
    updated = service.update(alice, {"id": created.id, "phone": None})
    assert updated.phone is None
    assert updated.first_name == "Ann"


def test_remove_then_get_fails(db_session, service):
    alice = create_user(db_session, "alice")
    created = service.create(alice, {"first_name": "Ann"})
    assert service.remove(alice, created.id) is None
    with pytest.raises(NotFoundError):
        service.get(alice, created.id)


def test_email_longer_than_column_is_rejected(db_session, service):
    alice = create_user(db_session, "alice")
    long_email = "ann@" + "a" * 50 + "." + "b" * 50 + ".com"
    with pytest.raises(ValidationError):
        service.create(alice, {"first_name": "Ann", "email": long_email})


def test_out_of_range_id_is_not_found(db_session, service):
    alice = create_user(db_session, "alice")
    with pytest.raises(NotFoundError):
        service.get(alice, 2**64)
    with pytest.raises(NotFoundError):
        service.remove(alice, 0)
