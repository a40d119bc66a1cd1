OWNER_FORM = {
    "firstName": "Jean",
    "lastName": "Dupont",
    "address": "1 Rue A",
    "city": "Paris",
    "telephone": "0102030405",
}


def location_id(response) -> int:
    """Owner id from a ``/owners/{id}`` redirect."""
    assert response.status_code == 303, response.text
    return int(response.headers["location"].rstrip("/").split("/")[2])


def post_owner(client, **overrides) -> int:
    data = {**OWNER_FORM, **overrides}
    return location_id(client.post("/owners/new", data=data))


def post_pet(client, owner_id: int, name="Rex", type="dog", birth_date="2020-01-01"):
    return client.post(
        f"/owners/{owner_id}/pets/new",
        data={"name": name, "type": type, "birthDate": birth_date},
    )
