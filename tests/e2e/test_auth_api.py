"""End-to-end tests for the authentication routes."""

from urllib.parse import parse_qs, urlparse

from tests.e2e.helpers import FRONTEND, register


class TestLocalAuthFlow:
    """Register, log in and log out with a username."""

    def test_register_sets_session_cookie(self, client):
        """Registration logs the client in."""
        # Act
        response = client.post("/auth/register", data={"username": "alice"})

        # Assert
        assert response.status_code == 303
        assert response.headers["location"] == f"{FRONTEND}/"
        assert "session" in response.cookies

        me = client.get("/auth/me").json()
        assert me["authenticated"] is True
        assert me["user"]["handle"] == "alice"

    def test_me_is_anonymous_without_cookie(self, client):
        """Anonymous clients are reported, not rejected."""
        response = client.get("/auth/me")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "user": None}

    def test_register_duplicate_redirects_with_error(self, client, other_client):
        """A taken username sends the client back to the form."""
        register(client, "alice")

        response = other_client.post("/auth/register", data={"username": "alice"})

        assert response.status_code == 303
        location = response.headers["location"]
        assert location.startswith(f"{FRONTEND}/register?")
        assert parse_qs(urlparse(location).query)["error"] == ["User already exists"]

    def test_login_existing_user(self, client, other_client):
        """A second client can log in as a registered user."""
        register(client, "alice")

        response = other_client.post("/auth/login", data={"username": "alice"})

        assert response.status_code == 303
        assert other_client.get("/auth/me").json()["user"]["handle"] == "alice"

    def test_login_unknown_user_redirects_with_error(self, client):
        """Unknown usernames go back to the login page."""
        response = client.post("/auth/login", data={"username": "ghost"})

        assert response.status_code == 303
        location = response.headers["location"]
        assert location.startswith(f"{FRONTEND}/login?")
        assert parse_qs(urlparse(location).query)["error"] == ["User not found"]

    def test_login_blank_username_redirects_with_error(self, client):
        """A blank username is a validation error."""
        response = client.post("/auth/login", data={"username": ""})

        assert response.status_code == 303
        query = parse_qs(urlparse(response.headers["location"]).query)
        assert query["error"] == ["Username is required"]

    def test_login_overlong_username_redirects_with_error(self, client):
        """A username longer than any stored handle is not found."""
        response = client.post("/auth/login", data={"username": "a" * 256})

        assert response.status_code == 303
        location = response.headers["location"]
        assert location.startswith(f"{FRONTEND}/login?")
        assert parse_qs(urlparse(location).query)["error"] == ["User not found"]

    def test_register_overlong_username_redirects_with_error(self, client):
        """An overlong username goes back to the registration form."""
        response = client.post("/auth/register", data={"username": "a" * 256})

        assert response.status_code == 303
        location = response.headers["location"]
        assert location.startswith(f"{FRONTEND}/register?")
        assert "1-255" in parse_qs(urlparse(location).query)["error"][0]
        assert client.get("/auth/me").json()["authenticated"] is False

    def test_logout_clears_session(self, client):
        """Logout destroys the session."""
        register(client, "alice")

        response = client.get("/auth/logout")

        assert response.status_code == 303
        assert response.headers["location"] == f"{FRONTEND}/"
        assert client.get("/auth/me").json()["authenticated"] is False

    def test_tampered_cookie_is_anonymous(self, client):
        """A forged session cookie is ignored."""
        client.cookies.set("session", "forged.token.value")

        assert client.get("/auth/me").json()["authenticated"] is False


class TestGoogleAuthFlow:
    """Google login with the mock OAuth client."""

    def _start(self, client) -> str:
        response = client.get("/auth/google")
        assert response.status_code == 302
        location = response.headers["location"]
        assert "mock=true" in location
        return parse_qs(urlparse(location).query)["state"][0]

    def test_first_login_redirects_to_register(self, client):
        """A new Google identity must pick a username first."""
        # Arrange
        state = self._start(client)

        # Act
        response = client.get(
            "/auth/google/callback", params={"code": "alice", "state": state}
        )

        # Assert
        assert response.status_code == 303
        assert response.headers["location"] == f"{FRONTEND}/register"
        assert client.get("/auth/me").json()["authenticated"] is False

    def test_claim_handle_then_login_again(self, client, other_client):
        """After claiming a handle, later Google logins go straight home."""
        # Arrange
        state = self._start(client)
        client.get("/auth/google/callback", params={"code": "alice", "state": state})

        # Act
        register(client, "alice")

        # Assert
        me = client.get("/auth/me").json()
        assert me["authenticated"] is True
        assert me["user"]["handle"] == "alice"
        assert me["user"]["email"] == "alice@example.com"

        state = self._start(other_client)
        response = other_client.get(
            "/auth/google/callback", params={"code": "alice", "state": state}
        )
        assert response.headers["location"] == f"{FRONTEND}/"
        other_me = other_client.get("/auth/me").json()
        assert other_me["user"]["user_id"] == me["user"]["user_id"]

    def test_state_mismatch_is_rejected(self, client):
        """A callback whose state was not issued to this client fails."""
        self._start(client)

        response = client.get(
            "/auth/google/callback", params={"code": "alice", "state": "forged"}
        )

        assert response.status_code == 303
        assert response.headers["location"].startswith(f"{FRONTEND}/login?error=")
        assert client.get("/auth/me").json()["authenticated"] is False
