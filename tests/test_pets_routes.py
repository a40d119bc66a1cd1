from datetime import date, timedelta

from tests.helpers import post_owner, post_pet


def test_pet_creation_form_lists_types(client):
    owner_id = post_owner(client)
    response = client.get(f"/owners/{owner_id}/pets/new")
    assert response.status_code == 200
    assert '<option value="bird">' in response.text
    assert '<option value="snake">' in response.text


def test_create_pet(client):
    owner_id = post_owner(client)
    response = post_pet(client, owner_id)
    assert response.status_code == 303
    assert response.headers["location"] == f"/owners/{owner_id}"
    detail = client.get(f"/owners/{owner_id}").text
    assert "Rex" in detail
    assert "New Pet has been Added" in detail


def test_duplicate_pet_name_is_case_insensitive(client):
    owner_id = post_owner(client)
    assert post_pet(client, owner_id, name="Rex").status_code == 303
    response = post_pet(client, owner_id, name="rex", type="cat")
    assert response.status_code == 200
    assert 'data-field="name" data-code="duplicate"' in response.text


def test_same_pet_name_under_different_owners(client):
    first = post_owner(client)
    second = post_owner(client, lastName="Martin")
    assert post_pet(client, first, name="Rex").status_code == 303
    assert post_pet(client, second, name="Rex").status_code == 303


def test_future_birth_date_is_rejected(client):
    owner_id = post_owner(client)
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    response = post_pet(client, owner_id, birth_date=tomorrow)
    assert response.status_code == 200
    assert 'data-field="birthDate" data-code="future-date"' in response.text


def test_birth_date_today_is_accepted(client):
    owner_id = post_owner(client)
    assert post_pet(client, owner_id, birth_date=date.today().isoformat()).status_code == 303


def test_new_pet_requires_name_type_and_birth_date(client):
    owner_id = post_owner(client)
    response = client.post(f"/owners/{owner_id}/pets/new", data={"name": "", "birthDate": ""})
    assert response.status_code == 200
    assert 'data-field="name" data-code="required"' in response.text
    assert 'data-field="type" data-code="required"' in response.text
    assert 'data-field="birthDate" data-code="required"' in response.text
    assert "Rex" not in client.get(f"/owners/{owner_id}").text


def test_unknown_pet_type(client):
    owner_id = post_owner(client)
    response = post_pet(client, owner_id, type="unicorn")
    assert response.status_code == 200
    assert 'data-field="type" data-code="not-found"' in response.text


def test_pet_routes_for_missing_owner(client):
    assert client.get("/owners/999/pets/new").status_code == 404
    assert post_pet(client, 999).status_code == 404


def _pet_id(client, owner_id, name):
    # Pet ids show up in the detail page as id="pet-<id>".
    text = client.get(f"/owners/{owner_id}").text
    marker = f'<dd class="pet-name">{name}</dd>'
    head = text[: text.index(marker)]
    return int(head[head.rindex('id="pet-') + len('id="pet-'):].split('"')[0])


def test_edit_pet(client):
    owner_id = post_owner(client)
    post_pet(client, owner_id, name="Rex")
    pet_id = _pet_id(client, owner_id, "Rex")

    form = client.get(f"/owners/{owner_id}/pets/{pet_id}/edit")
    assert form.status_code == 200
    assert 'value="Rex"' in form.text
    assert "<option value=\"dog\" selected>" in form.text

    response = client.post(
        f"/owners/{owner_id}/pets/{pet_id}/edit",
        data={"id": str(pet_id), "name": "Rexy", "birthDate": "2019-05-01", "type": "cat"},
    )
    assert response.status_code == 303
    detail = client.get(f"/owners/{owner_id}").text
    assert "Rexy" in detail
    assert "2019-05-01" in detail
    assert "cat" in detail
    assert "Pet details has been edited" in detail


def test_edit_pet_keeping_its_own_name(client):
    owner_id = post_owner(client)
    post_pet(client, owner_id, name="Rex")
    pet_id = _pet_id(client, owner_id, "Rex")
    response = client.post(
        f"/owners/{owner_id}/pets/{pet_id}/edit",
        data={"name": "REX", "birthDate": "2020-01-01", "type": "dog"},
    )
    assert response.status_code == 303


def test_edit_pet_onto_sibling_name_is_duplicate(client):
    owner_id = post_owner(client)
    post_pet(client, owner_id, name="Rex")
    post_pet(client, owner_id, name="Bella")
    pet_id = _pet_id(client, owner_id, "Bella")
    response = client.post(
        f"/owners/{owner_id}/pets/{pet_id}/edit",
        data={"name": "rex", "birthDate": "2020-01-01", "type": "dog"},
    )
    assert response.status_code == 200
    assert 'data-field="name" data-code="duplicate"' in response.text


def test_edit_missing_pet(client):
    owner_id = post_owner(client)
    assert client.get(f"/owners/{owner_id}/pets/42/edit").status_code == 404


def test_unparseable_birth_date_only_flags_the_date(client):
    owner_id = post_owner(client)
    response = post_pet(client, owner_id, name="Rex", birth_date="01/02/2020")
    assert response.status_code == 200
    assert 'data-field="birthDate" data-code="invalid-format"' in response.text
    assert 'data-field="name"' not in response.text
    assert 'value="Rex"' in response.text
