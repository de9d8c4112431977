"""End-to-end tests for the author and health endpoints."""

from uuid import uuid4

from src.library_api.api.http.app import create_app


class TestAuthorsApi:
    def test_create_author(self, client):
        response = client.post(
            "/api/authors",
            json={"first_name": "Octavia", "last_name": "Butler", "genre": "Science fiction"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["last_name"] == "Butler"
        assert response.headers["location"] == f"http://testserver/api/authors/{body['id']}"

        fetched = client.get(response.headers["location"])
        assert fetched.status_code == 200
        assert fetched.json() == body

    def test_create_author_requires_names(self, client):
        response = client.post("/api/authors", json={"first_name": "Octavia"})
        assert response.status_code == 422

    def test_list_authors(self, client, seeded_author_id):
        response = client.get("/api/authors")

        assert response.status_code == 200
        assert [a["id"] for a in response.json()] == [seeded_author_id]

    def test_unknown_author(self, client):
        assert client.get(f"/api/authors/{uuid4()}").status_code == 404

    def test_new_author_can_own_books(self, client):
        author = client.post(
            "/api/authors", json={"first_name": "Frank", "last_name": "Herbert"}
        ).json()

        response = client.post(
            f"/api/authors/{author['id']}/books", json={"title": "Dune", "description": "Spice"}
        )
        assert response.status_code == 201


class TestHealth:
    def test_liveness(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "library-api"}

    def test_readiness(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"] == {"status": "healthy", "type": "sqlite"}

    def test_readiness_reports_database_failure(self, client, monkeypatch):
        app_deps = client.app.state.app_dependencies
        monkeypatch.setattr(app_deps.database_service, "health_check", lambda: False)

        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"


class TestApplicationFactory:
    def test_docs_disabled_in_production(self, test_config):
        test_config.app.environment = "production"
        app = create_app(test_config)

        assert app.docs_url is None
        assert app.redoc_url is None

    def test_docs_enabled_outside_production(self, test_config):
        assert create_app(test_config).docs_url == "/docs"

    def test_api_prefix_is_configurable(self, test_config):
        test_config.app.api_prefix = "/v2"
        paths = {route.path for route in create_app(test_config).routes}

        assert "/v2/authors/{author_id}/books/{book_id}" in paths
        assert "/health" in paths
