from fastapi import status

from app import models


def create_contact(client, headers, first_name="Ann"):
    response = client.post(
        "/api/contacts", json={"first_name": first_name}, headers=headers
    )
    return response.json()["data"]["id"]


def create_address(client, headers, contact_id, **fields):
    payload = {"country": "Indonesia", "postal_code": "12345", **fields}
    response = client.post(
        f"/api/contacts/{contact_id}/addresses", json=payload, headers=headers
    )
    assert response.status_code == status.HTTP_200_OK
    return response.json()["data"]


def test_create_and_get_address(client, alice):
    contact_id = create_contact(client, alice)
    created = create_address(client, alice, contact_id, street="Jalan 1", city="Jakarta")
    assert created["street"] == "Jalan 1"
    assert created["province"] is None

    response = client.get(
        f"/api/contacts/{contact_id}/addresses/{created['id']}", headers=alice
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["data"] == created


def test_create_address_validation(client, alice):
    contact_id = create_contact(client, alice)
    response = client.post(
        f"/api/contacts/{contact_id}/addresses",
        json={"postal_code": "12345678901"},
        headers=alice,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {"country", "postal_code"}


def test_address_of_other_users_contact_is_not_found(client, alice, bob):
    contact_id = create_contact(client, alice)
    address = create_address(client, alice, contact_id)

    response = client.post(
        f"/api/contacts/{contact_id}/addresses",
        json={"country": "X", "postal_code": "1"},
        headers=bob,
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["errors"] == "Contact is not found"

    response = client.get(
        f"/api/contacts/{contact_id}/addresses/{address['id']}", headers=bob
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_get_address_under_wrong_contact(client, alice):
    first = create_contact(client, alice, "Ann")
    second = create_contact(client, alice, "Ben")
    address = create_address(client, alice, first)

    response = client.get(
        f"/api/contacts/{second}/addresses/{address['id']}", headers=alice
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["errors"] == "Address is not found"


def test_update_address_keeps_omitted_fields(client, alice):
    contact_id = create_contact(client, alice)
    address = create_address(client, alice, contact_id, city="Jakarta")

    response = client.put(
        f"/api/contacts/{contact_id}/addresses/{address['id']}",
        json={"street": "Jalan 2"},
        headers=alice,
    )
    assert response.status_code == status.HTTP_200_OK
    data = response.json()["data"]
    assert data["street"] == "Jalan 2"
    assert data["city"] == "Jakarta"
    assert data["country"] == "Indonesia"


def test_list_and_remove_addresses(client, alice):
    contact_id = create_contact(client, alice)
    first = create_address(client, alice, contact_id, city="Jakarta")
    second = create_address(client, alice, contact_id, city="Bandung")

    response = client.get(f"/api/contacts/{contact_id}/addresses", headers=alice)
    assert [item["id"] for item in response.json()["data"]] == [first["id"], second["id"]]

    response = client.delete(
        f"/api/contacts/{contact_id}/addresses/{first['id']}", headers=alice
    )
    assert response.json() == {"data": True}

    response = client.get(f"/api/contacts/{contact_id}/addresses", headers=alice)
    assert [item["id"] for item in response.json()["data"]] == [second["id"]]


def test_removing_contact_removes_its_addresses(client, db_session, alice):
    contact_id = create_contact(client, alice)
    create_address(client, alice, contact_id)
    create_address(client, alice, contact_id)

    response = client.delete(f"/api/contacts/{contact_id}", headers=alice)
    assert response.status_code == status.HTTP_200_OK

    remaining = (
        db_session.query(models.Address)
        .filter(models.Address.contact_id == contact_id)
        .count()
    )
    assert remaining == 0
