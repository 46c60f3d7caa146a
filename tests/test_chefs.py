"""
API tests for /api/v1/chefs.
"""

import pytest

from tests.fakes import bearer

pytestmark = pytest.mark.api

URL = "/api/v1/chefs"


class TestPublicChefSearch:
    def test_list_is_public_and_best_rated_first(self, client, make_chef):
        _, low = make_chef("jamie", rating=3.9)
        _, high = make_chef("gordon", rating=4.8)

        response = client.get(URL)

        assert response.status_code == 200
        assert [c["id"] for c in response.json()["chefs"]] == [high["id"], low["id"]]

    def test_available_filter(self, client, make_chef):
        _, free = make_chef("gordon")
        make_chef("jamie", is_available=False)

        response = client.get(URL, params={"available": "true"})

        assert [c["id"] for c in response.json()["chefs"]] == [free["id"]]

    def test_specialty_filter(self, client, make_chef):
        make_chef("gordon", specialties=["french"])
        _, sushi = make_chef("jiro", specialties=["japanese", "sushi"])

        response = client.get(URL, params={"specialty": "sushi"})

        assert [c["id"] for c in response.json()["chefs"]] == [sushi["id"]]

    def test_get_one(self, client, make_chef):
        _, chef = make_chef("gordon", bio="Hell's kitchen")

        response = client.get(URL, params={"id": chef["id"]})

        assert response.json()["chef"]["bio"] == "Hell's kitchen"

    def test_get_missing(self, client):
        response = client.get(URL, params={"id": "chefs-missing"})

        assert response.status_code == 404
        assert response.json()["error"] == "Chef not found"


class TestChefProfileLifecycle:
    def test_create_profile_promotes_user_to_chef(self, client, db, make_user):
        user = make_user("alice")

        response = client.post(URL, json={"hourly_rate": 65, "specialties": ["thai"]},
                               headers=bearer("alice"))

        assert response.status_code == 201
        chef = response.json()["chef"]
        assert chef["user_id"] == user["id"]
        assert chef["is_available"] is True
        assert chef["specialties"] == ["thai"]
        assert db.row("users", user["id"])["role"] == "chef"

    def test_second_profile_is_rejected(self, client, db, make_chef):
        make_chef("gordon")

        response = client.post(URL, json={"hourly_rate": 65}, headers=bearer("gordon"))

        assert response.status_code == 400
        assert response.json()["error"] == "Chef profile already exists"
        assert len(db.tables["chefs"]) == 1

    def test_create_requires_hourly_rate(self, client, make_user):
        make_user("alice")

        response = client.post(URL, json={"bio": "home cook"}, headers=bearer("alice"))

        assert response.status_code == 400

    def test_create_requires_token(self, client, db):
        response = client.post(URL, json={"hourly_rate": 65})

        assert response.status_code == 401
        assert db.calls == []

    def test_update_only_supplied_fields(self, client, db, make_chef):
        _, chef = make_chef("gordon", bio="original")

        response = client.put(URL, json={"is_available": False}, headers=bearer("gordon"))

        assert response.status_code == 200
        body = response.json()["chef"]
        assert body["is_available"] is False
        assert body["bio"] == "original"
        assert db.row("chefs", chef["id"])["hourly_rate"] == 50

    def test_update_requires_chef_role(self, client, make_user):
        make_user("alice")

        response = client.put(URL, json={"is_available": False}, headers=bearer("alice"))

        assert response.status_code == 403

    def test_delete_profile_reverts_role_to_customer(self, client, db, make_chef):
        user, chef = make_chef("gordon")

        response = client.delete(URL, headers=bearer("gordon"))

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Chef profile deleted successfully"}
        assert db.row("chefs", chef["id"]) is None
        assert db.row("users", user["id"])["role"] == "customer"

    def test_delete_missing_profile_is_404(self, client, make_user):
        make_user("orphan", role="chef")

        response = client.delete(URL, headers=bearer("orphan"))

        assert response.status_code == 404


class TestChefUpdateNulls:
    @pytest.mark.parametrize("field", ["is_available", "specialties", "hourly_rate",
                                       "experience_years", "portfolio_images"])
    def test_null_for_required_column_is_validation_error(self, client, db, make_chef, field):
        _, chef = make_chef("gordon")
        before = dict(chef)

        response = client.put(URL, json={field: None}, headers=bearer("gordon"))

        assert response.status_code == 400
        assert field in response.json()["details"]
        assert db.row("chefs", chef["id"]) == before

    def test_null_clears_nullable_column(self, client, db, make_chef):
        _, chef = make_chef("gordon", bio="original")

        response = client.put(URL, json={"bio": None}, headers=bearer("gordon"))

        assert response.status_code == 200
        assert response.json()["chef"]["bio"] is None


class TestMalformedIds:
    def test_get_chef_with_malformed_id_is_404(self, client, db):
        db.strict_uuids = True

        response = client.get(URL, params={"id": "abc"})

        assert response.status_code == 404
        assert response.json()["error"] == "Chef not found"
