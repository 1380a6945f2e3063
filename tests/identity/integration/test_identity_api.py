"""Integration tests for registration, login and session endpoints."""


class TestRegisterEndpoint:
    def test_register_logs_in(self, client):
        response = client.post(
            "/api/register",
            json={"username": "jane", "email": "jane@example.com", "password": "s3cret-pass", "name": "Jane Doe"},
        )
        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "jane"
        assert body["role"] == "customer"
        assert "password" not in body
        assert "passwordHash" not in body

        assert client.get("/api/user").json()["id"] == body["id"]

    def test_duplicate_username_is_400(self, client, make_user):
        make_user(username="jane")
        response = client.post(
            "/api/register",
            json={"username": "jane", "email": "new@example.com", "password": "s3cret-pass", "name": "Jane"},
        )
        assert response.status_code == 400
        assert "username" in response.json()["error"]

    def test_cannot_register_as_admin(self, client):
        response = client.post(
            "/api/register",
            json={
                "username": "mallory",
                "email": "m@example.com",
                "password": "s3cret-pass",
                "name": "Mallory",
                "role": "admin",
            },
        )
        assert response.status_code == 201
        assert response.json()["role"] == "customer"


class TestLoginEndpoint:
    def test_login_and_logout(self, client, make_user):
        make_user(username="jane", password="s3cret-pass")

        response = client.post("/api/login", json={"username": "jane", "password": "s3cret-pass"})
        assert response.status_code == 200
        assert client.get("/api/user").status_code == 200

        assert client.post("/api/logout").json() == {"status": "ok"}
        assert client.get("/api/user").status_code == 401

    def test_bad_credentials_are_401(self, client, make_user):
        make_user(username="jane", password="s3cret-pass")
        response = client.post("/api/login", json={"username": "jane", "password": "wrong-pass"})
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid username or password"}

    def test_current_user_requires_session(self, client):
        response = client.get("/api/user")
        assert response.status_code == 401
        assert response.json() == {"error": "Not authenticated"}
