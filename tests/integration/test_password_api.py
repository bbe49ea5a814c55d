"""
Integration tests for the password HTTP API.

Runs the FastAPI application end to end over a fresh in-memory store.
"""
import pytest

from passgen.core.models.errors import DigestUnavailableError
from passgen.core.services.search_hash import SearchHashGenerator
from passgen.schemas.password import ErrorResponse


def _check(client, password):
    return client.post("/api/password/complexity", content=password, headers={"Content-Type": "text/plain"})


def _delete(client, password):
    return client.request("DELETE", "/api/password", content=password, headers={"Content-Type": "text/plain"})


@pytest.mark.integration
def test_ping(client):
    response = client.get("/api/ping")
    assert response.status_code == 200
    assert response.json() == {"message": "pong"}


@pytest.mark.integration
def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["services"]["repository"]["status"] == "healthy"


class TestGenerate:
    """Test POST /api/password/generate."""

    @pytest.mark.integration
    def test_generate_batch(self, client):
        response = client.post("/api/password/generate", json={
            "length": 12,
            "lower_case": True,
            "upper_case": True,
            "special_case": True,
            "amount": 5
        })

        assert response.status_code == 201
        body = response.json()
        assert len(body["passwords"]) == 5
        assert all(len(password) == 12 for password in body["passwords"])
        assert body["duplicates"] == []
        assert body["complexity"] == "HIGH"

    @pytest.mark.integration
    def test_defaults(self, client):
        response = client.post("/api/password/generate", json={"length": 10})

        assert response.status_code == 201
        [password] = response.json()["passwords"]
        assert password.islower()
        assert response.json()["complexity"] == "LOW"

    @pytest.mark.integration
    @pytest.mark.parametrize("payload,message", [
        ({"length": 2}, "between 3 and 32"),
        ({"length": 33}, "between 3 and 32"),
        ({"length": 10, "lower_case": False}, "At least one character class"),
        ({"length": 10, "amount": 1001}, "more than 1000"),
        ({"length": 10, "amount": 0}, "At least one password"),
    ])
    def test_rule_violations(self, client, payload, message):
        response = client.post("/api/password/generate", json=payload)

        assert response.status_code == 400
        assert message in response.json()["detail"]

    @pytest.mark.integration
    def test_malformed_body(self, client):
        response = client.post("/api/password/generate", json={"lower_case": True})
        assert response.status_code == 422


class TestComplexity:
    """Test POST /api/password/complexity."""

    @pytest.mark.integration
    def test_unknown_password(self, client):
        response = _check(client, "aB!defghi")

        assert response.status_code == 200
        assert response.json() == {
            "password": "aB!defghi",
            "complexity": "HIGH",
            "generation_date_time": None
        }

    @pytest.mark.integration
    def test_generated_password(self, client):
        generated = client.post("/api/password/generate", json={"length": 20, "upper_case": True}).json()
        [password] = generated["passwords"]

        response = _check(client, password)

        assert response.status_code == 200
        assert response.json()["complexity"] == "MEDIUM"
        assert response.json()["generation_date_time"] is not None

    @pytest.mark.integration
    @pytest.mark.parametrize("password", ["", "ab", "x" * 33])
    def test_invalid_length(self, client, password):
        assert _check(client, password).status_code == 400

    @pytest.mark.integration
    def test_invalid_utf8(self, client):
        response = client.post(
            "/api/password/complexity",
            content=b"\xff\xfe\xfd\xfc",
            headers={"Content-Type": "text/plain"}
        )
        assert response.status_code == 400

    @pytest.mark.integration
    def test_digest_failure(self, client, monkeypatch):
        def unavailable(self, text):
            raise DigestUnavailableError("md5", "disabled")

        monkeypatch.setattr(SearchHashGenerator, "generate", unavailable)

        response = _check(client, "abcdef")

        assert response.status_code == 500
        assert "md5" in response.json()["detail"]


class TestDelete:
    """Test DELETE /api/password."""

    @pytest.mark.integration
    def test_delete_generated(self, client):
        generated = client.post("/api/password/generate", json={"length": 8, "amount": 2}).json()
        password = generated["passwords"][0]

        response = _delete(client, password)

        assert response.status_code == 200
        assert response.json()["password"] == password
        assert response.json()["generation_date_time"] is not None
        assert _check(client, password).json()["generation_date_time"] is None

    @pytest.mark.integration
    def test_delete_unknown(self, client):
        response = _delete(client, "abcdef")

        assert response.status_code == 200
        assert response.json()["complexity"] == "LOW"
        assert response.json()["generation_date_time"] is None

    @pytest.mark.integration
    def test_invalid_length(self, client):
        assert _delete(client, "ab").status_code == 400


class TestOpenAPI:
    """Test the documented error responses."""

    @pytest.mark.integration
    @pytest.mark.parametrize("path,method", [
        ("/api/password/generate", "post"),
        ("/api/password/complexity", "post"),
        ("/api/password", "delete"),
    ])
    def test_error_responses_documented(self, client, path, method):
        responses = client.get("/openapi.json").json()["paths"][path][method]["responses"]

        for code in ("400", "500"):
            schema = responses[code]["content"]["application/json"]["schema"]
            assert schema["$ref"].endswith("/ErrorResponse")

    @pytest.mark.integration
    def test_error_body_matches_schema(self, client):
        response = client.post("/api/password/generate", json={"length": 2})

        assert ErrorResponse.model_validate(response.json()).detail.startswith("Password length")
