"""
Admin login and session checks
"""
from datetime import timedelta

from app.models import Admin
from app.routers.auth import create_access_token, verify_password, get_password_hash

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "correct horse battery staple"


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        hashed = get_password_hash("secret")
        assert hashed != "secret"
        assert verify_password("secret", hashed) is True

    def test_wrong_password_rejected(self):
        hashed = get_password_hash("secret")
        assert verify_password("Secret", hashed) is False

    def test_malformed_hash_rejected(self):
        """A legacy plaintext value in the column never verifies"""
        assert verify_password("secret", "secret") is False


class TestLogin:
    def test_login_returns_token_and_session(self, client, admin):
        response = client.post(
            "/api/auth/login",
            data={"username": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["access_token"]
        assert body["expires_at"]
        assert body["admin"] == {"id": admin.id, "email": ADMIN_EMAIL, "name": "Site Admin"}

    def test_login_email_is_case_insensitive(self, client, admin):
        response = client.post(
            "/api/auth/login",
            data={"username": ADMIN_EMAIL.upper(), "password": ADMIN_PASSWORD},
        )
        assert response.status_code == 200

    def test_wrong_password(self, client, admin):
        response = client.post(
            "/api/auth/login",
            data={"username": ADMIN_EMAIL, "password": "nope"},
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Incorrect email or password"

    def test_unknown_email(self, client, admin):
        response = client.post(
            "/api/auth/login",
            data={"username": "someone@example.com", "password": ADMIN_PASSWORD},
        )
        assert response.status_code == 401


class TestSessionGate:
    def test_me(self, client, auth_headers):
        response = client.get("/api/auth/me", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["email"] == ADMIN_EMAIL

    def test_admin_routes_require_token(self, client):
        assert client.get("/api/admin/stats").status_code == 401
        assert client.get("/api/admin/countries").status_code == 401
        assert client.get("/api/admin/applications").status_code == 401

    def test_garbage_token_rejected(self, client):
        response = client.get("/api/admin/stats", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401

    def test_expired_token_rejected(self, client, admin):
        token, _ = create_access_token({"sub": admin.id}, expires_delta=timedelta(minutes=-5))
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_token_of_deleted_admin_rejected(self, client, db, admin, auth_headers):
        """The admin row must still exist when the token is used"""
        db.query(Admin).filter(Admin.id == admin.id).delete()
        db.commit()
        response = client.get("/api/admin/stats", headers=auth_headers)
        assert response.status_code == 401
