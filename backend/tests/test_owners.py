"""Owner endpoints and OwnerService."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from vetclinic.core.exceptions import InternalError, NotFoundError, ValidationError
from vetclinic.db.models.owner import Owner
from vetclinic.db.models.pet import Pet
from vetclinic.schemas.owner import OwnerPayload
from vetclinic.services.owner_service import OwnerService

OWNER_INPUT = {
    "first_name": "Grace",
    "last_name": "Hopper",
    "email": "grace@example.com",
    "telephone": "0411111111",
    "address": "2 Compiler Rd",
    "city": "Arlington",
}


class TestOwnerApi:
    def test_create_then_get_returns_input(self, client):
        resp = client.post("/api/owners", json=OWNER_INPUT)
        assert resp.status_code == 201
        body = resp.json()
        assert body["message"] == "Owner created successfully"

        owner = client.get(f"/api/owners/{body['id']}").json()
        assert owner["id"] == body["id"]
        for key, value in OWNER_INPUT.items():
            assert owner[key] == value
        assert owner["created_at"]

    @pytest.mark.parametrize("missing", ["first_name", "last_name", "email"])
    def test_create_requires_name_and_email(self, client, missing):
        payload = {k: v for k, v in OWNER_INPUT.items() if k != missing}
        resp = client.post("/api/owners", json=payload)
        assert resp.status_code == 400
        assert resp.json()["message"] == "Required fields: first_name, last_name, email"

    def test_create_rejects_empty_email(self, client):
        resp = client.post("/api/owners", json={**OWNER_INPUT, "email": ""})
        assert resp.status_code == 400

    def test_get_missing_owner_is_404(self, client):
        resp = client.get("/api/owners/999")
        assert resp.status_code == 404
        assert resp.json() == {"error": "not_found", "message": "Owner not found"}

    def test_non_numeric_owner_id_is_400(self, client):
        resp = client.get("/api/owners/abc")
        assert resp.status_code == 400
        assert resp.json()["error"] == "validation_error"

    def test_list_includes_name_and_pet_count(self, client, owner_with_pets):
        client.post("/api/owners", json=OWNER_INPUT)
        owners = client.get("/api/owners").json()

        assert [o["first_name"] for o in owners] == ["Grace", "Ada"]
        ada = owners[1]
        assert ada["name"] == "Ada Lovelace"
        assert ada["pets_count"] == 2
        assert owners[0]["pets_count"] == 0

    def test_list_pets_for_owner(self, client, owner_with_pets):
        pets = client.get(f"/api/owners/{owner_with_pets['owner_id']}/pets").json()
        assert [p["name"] for p in pets] == ["Rex", "Tom"]
        assert all(p["owner_id"] == str(owner_with_pets["owner_id"]) for p in pets)

    def test_list_pets_for_unknown_owner_is_empty(self, client):
        resp = client.get("/api/owners/424242/pets")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_update_overwrites_every_field(self, client):
        owner_id = client.post("/api/owners", json=OWNER_INPUT).json()["id"]
        changes = {"first_name": "Grace B.", "last_name": "Hopper", "email": "gbh@example.com"}

        resp = client.put(f"/api/owners/{owner_id}", json=changes)
        assert resp.status_code == 200

        owner = client.get(f"/api/owners/{owner_id}").json()
        assert owner["first_name"] == "Grace B."
        assert owner["email"] == "gbh@example.com"
        # Not sent, therefore cleared.
        assert owner["telephone"] is None
        assert owner["city"] is None

    def test_update_missing_owner_succeeds_silently(self, client):
        resp = client.put("/api/owners/999", json=OWNER_INPUT)
        assert resp.status_code == 200
        assert client.get("/api/owners/999").status_code == 404

    def test_delete_cascades_to_pets(self, client, owner_with_pets):
        owner_id = owner_with_pets["owner_id"]
        resp = client.delete(f"/api/owners/{owner_id}")
        assert resp.status_code == 200
        assert resp.json() == {"message": "Owner deleted successfully"}

        assert client.get(f"/api/owners/{owner_id}").status_code == 404
        assert client.get(f"/api/owners/{owner_id}/pets").json() == []
        for pet_id in owner_with_pets["pet_ids"]:
            assert client.get(f"/api/pets/{pet_id}").status_code == 404

    def test_delete_missing_owner_is_404(self, client):
        resp = client.delete("/api/owners/999")
        assert resp.status_code == 404


class TestOwnerServiceTransactions:
    def test_failed_owner_delete_restores_pets(self, db_session, owner_with_pets, monkeypatch):
        service = OwnerService(db_session)
        real_execute = db_session.execute
        calls = []

        def flaky_execute(statement, *args, **kwargs):
            calls.append(statement)
            if len(calls) == 2:
                raise OperationalError("DELETE FROM owners", {}, Exception("connection lost"))
            return real_execute(statement, *args, **kwargs)

        monkeypatch.setattr(db_session, "execute", flaky_execute)
        with pytest.raises(InternalError):
            service.delete(owner_with_pets["owner_id"])
        monkeypatch.undo()

        remaining = db_session.execute(
            select(func.count(Pet.id)).where(Pet.owner_id == owner_with_pets["owner_id"])
        ).scalar_one()
        assert remaining == 2
        assert db_session.get(Owner, owner_with_pets["owner_id"]) is not None

    def test_missing_owner_delete_leaves_orphans_untouched(self, db_session, lookups):
        # Pets pointing at an owner id that has no row are not removed by a failed delete.
        db_session.add(Pet(name="Ghost", type_id=lookups["dog"], gender="unknown", owner_id=77))
        db_session.commit()

        with pytest.raises(NotFoundError):
            OwnerService(db_session).delete(77)

        count = db_session.execute(select(func.count(Pet.id)).where(Pet.owner_id == 77)).scalar_one()
        assert count == 1

    def test_create_validates_before_touching_store(self, db_session):
        with pytest.raises(ValidationError):
            OwnerService(db_session).create(OwnerPayload(first_name="Only"))
        assert db_session.execute(select(func.count(Owner.id))).scalar_one() == 0
