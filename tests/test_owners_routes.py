from sqlalchemy import func, select

from petclinic.db.models.owner import OwnerRow
from tests.helpers import OWNER_FORM, post_owner


def test_creation_form_renders(client):
    response = client.get("/owners/new")
    assert response.status_code == 200
    assert 'name="telephone"' in response.text


def test_create_owner_redirects_to_detail(client):
    response = client.post("/owners/new", data=OWNER_FORM)
    assert response.status_code == 303
    location = response.headers["location"]
    assert location.startswith("/owners/")

    detail = client.get(location)
    assert detail.status_code == 200
    assert "Jean Dupont" in detail.text
    assert "0102030405" in detail.text
    assert "New Owner Created" in detail.text
    # The flash message is shown once.
    assert "New Owner Created" not in client.get(location).text


def test_create_owner_with_bad_telephone_is_not_persisted(client, session):
    response = client.post("/owners/new", data={**OWNER_FORM, "telephone": "12345"})
    assert response.status_code == 200
    assert 'data-field="telephone" data-code="invalid-format"' in response.text
    assert 'value="Jean"' in response.text
    assert session.execute(select(func.count(OwnerRow.id))).scalar_one() == 0


def test_create_owner_missing_fields(client):
    response = client.post("/owners/new", data={**OWNER_FORM, "lastName": "", "city": ""})
    assert response.status_code == 200
    assert 'data-field="lastName" data-code="required"' in response.text
    assert 'data-field="city" data-code="required"' in response.text


def test_find_form_renders(client):
    assert client.get("/owners/find").status_code == 200


def test_search_without_match_shows_not_found(client, make_owner):
    make_owner(last_name="Franklin")
    response = client.get("/owners", params={"lastName": "Nobody"})
    assert response.status_code == 200
    assert 'data-field="lastName" data-code="not-found"' in response.text


def test_search_single_match_redirects(client, make_owner):
    owner = make_owner(last_name="Franklin")
    make_owner(last_name="Davis")
    response = client.get("/owners", params={"lastName": "Frank"})
    assert response.status_code == 303
    assert response.headers["location"] == f"/owners/{owner.id_value}"


def test_search_many_matches_lists_with_pagination(client, make_owner):
    for i in range(7):
        make_owner(last_name=f"Davis{i}")
    response = client.get("/owners", params={"lastName": "Davis", "page": 1})
    assert response.status_code == 200
    assert 'data-total-items="7"' in response.text
    assert 'data-total-pages="2"' in response.text
    assert 'data-current-page="1"' in response.text
    assert "Davis4" in response.text
    assert "Davis5" not in response.text


def test_search_defaults_to_everyone(client, make_owner):
    make_owner(last_name="Black")
    make_owner(last_name="Coleman")
    response = client.get("/owners")
    assert response.status_code == 200
    assert "Black" in response.text and "Coleman" in response.text


def test_edit_form_is_prefilled(client, make_owner):
    owner = make_owner()
    response = client.get(f"/owners/{owner.id_value}/edit")
    assert response.status_code == 200
    assert 'value="Franklin"' in response.text


def test_update_owner(client, make_owner):
    owner = make_owner(pets=[("Leo", "cat")])
    data = {**OWNER_FORM, "id": str(owner.id_value), "city": "Lyon"}
    response = client.post(f"/owners/{owner.id_value}/edit", data=data)
    assert response.status_code == 303
    assert response.headers["location"] == f"/owners/{owner.id_value}"

    detail = client.get(f"/owners/{owner.id_value}").text
    assert "Lyon" in detail
    assert "Owner Values Updated" in detail
    # Pets are untouched by an owner edit.
    assert "Leo" in detail


def test_update_rejects_mismatched_hidden_id(client, make_owner, session):
    owner = make_owner()
    other = make_owner(last_name="Davis")
    data = {**OWNER_FORM, "id": str(other.id_value), "lastName": "Tampered"}
    response = client.post(f"/owners/{owner.id_value}/edit", data=data)
    assert response.status_code == 303
    assert response.headers["location"] == f"/owners/{owner.id_value}/edit"
    names = set(session.execute(select(OwnerRow.last_name)).scalars())
    assert names == {"Franklin", "Davis"}


def test_update_with_invalid_values_redisplays(client, make_owner):
    owner = make_owner()
    response = client.post(f"/owners/{owner.id_value}/edit", data={**OWNER_FORM, "telephone": "abc"})
    assert response.status_code == 200
    assert 'data-field="telephone"' in response.text


def test_missing_owner_is_not_found(client):
    assert client.get("/owners/999").status_code == 404
    assert client.get("/owners/999/edit").status_code == 404
    response = client.post("/owners/999/edit", data=OWNER_FORM)
    assert response.status_code == 404


def test_created_owner_is_retrievable(client):
    owner_id = post_owner(client, firstName="Maria", lastName="Escobito", telephone="6085557683")
    text = client.get(f"/owners/{owner_id}").text
    assert "Maria Escobito" in text
    assert "6085557683" in text


def test_single_match_redirects_from_any_page(client, make_owner):
    owner = make_owner(last_name="Franklin")
    response = client.get("/owners", params={"lastName": "Frank", "page": 2})
    assert response.status_code == 303
    assert response.headers["location"] == f"/owners/{owner.id_value}"


def test_non_ascii_digit_telephone_is_rejected(client, session):
    arabic_indic = "".join(chr(0x0660 + i) for i in range(10))
    response = client.post("/owners/new", data={**OWNER_FORM, "telephone": arabic_indic})
    assert response.status_code == 200
    assert 'data-field="telephone" data-code="invalid-format"' in response.text
    assert session.execute(select(func.count(OwnerRow.id))).scalar_one() == 0
