import uuid
from datetime import timedelta

from fastapi import status
from sqlalchemy import delete

from hypehouse.core.security import create_access_token, create_refresh_token
from hypehouse.models.user import UserRole, ROLE_ADMIN
from hypehouse.services.auth_service import AuthService

API = "/api/v1"


class TestIsAdmin:
    """Admin role check"""

    async def test_anonymous_is_not_admin(self, db_session):
        assert await AuthService.is_admin(db_session, None) is False

    async def test_user_without_roles(self, db_session):
        user = await AuthService.create_user(db_session, "nobody@hypehouserecords.com", "password123")
        assert await AuthService.is_admin(db_session, user.id) is False

    async def test_user_with_only_user_role(self, db_session, regular_user):
        assert await AuthService.is_admin(db_session, regular_user.id) is False

    async def test_admin_role(self, db_session, admin_user):
        assert await AuthService.is_admin(db_session, admin_user.id) is True

    async def test_unknown_user_id(self, db_session):
        assert await AuthService.is_admin(db_session, uuid.uuid4()) is False

    async def test_grant_role_is_idempotent(self, db_session, regular_user):
        first = await AuthService.grant_role(db_session, regular_user.id, ROLE_ADMIN)
        second = await AuthService.grant_role(db_session, regular_user.id, ROLE_ADMIN)
        assert first.id == second.id
        assert await AuthService.is_admin(db_session, regular_user.id) is True

    async def test_identity_rows_carry_timestamps(self, db_session):
        user = await AuthService.create_user(db_session, "stamped@hypehouserecords.com", "password123")
        role = await AuthService.grant_role(db_session, user.id, ROLE_ADMIN)

        assert user.created_at is not None
        assert user.updated_at is not None
        assert role.created_at is not None
        assert role.updated_at is not None


class TestAdminLogin:
    """Admin login, refresh and session"""

    async def test_login_success(self, client, admin_user):
        response = await client.post(
            f"{API}/admin/login",
            data={"username": "admin@hypehouserecords.com", "password": "admin-password"},
        )
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["access_token"]
        assert data["refresh_token"]

    async def test_login_is_case_insensitive_on_email(self, client, admin_user):
        response = await client.post(
            f"{API}/admin/login",
            data={"username": "Admin@HypeHouseRecords.com", "password": "admin-password"},
        )
        assert response.status_code == status.HTTP_200_OK

    async def test_rejections_are_indistinguishable(self, client, admin_user, regular_user):
        attempts = [
            {"username": "admin@hypehouserecords.com", "password": "wrong"},
            {"username": "ghost@hypehouserecords.com", "password": "admin-password"},
            {"username": "fan@hypehouserecords.com", "password": "fan-password"},
        ]
        for form in attempts:
            response = await client.post(f"{API}/admin/login", data=form)
            assert response.status_code == status.HTTP_401_UNAUTHORIZED
            assert response.json()["detail"] == "Invalid credentials"

    async def test_session_for_admin(self, client, admin_headers, admin_user):
        response = await client.get(f"{API}/admin/session", headers=admin_headers)
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["user_id"] == str(admin_user.id)
        assert data["is_admin"] is True

    async def test_refresh_issues_new_pair(self, client, admin_user):
        refresh = create_refresh_token(subject=str(admin_user.id))
        response = await client.post(f"{API}/admin/refresh", json={"refresh_token": refresh})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["access_token"]

    async def test_refresh_rejects_access_token(self, client, admin_user):
        access = create_access_token(subject=str(admin_user.id))
        response = await client.post(f"{API}/admin/refresh", json={"refresh_token": access})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_refresh_rejects_non_admin(self, client, regular_user):
        refresh = create_refresh_token(subject=str(regular_user.id))
        response = await client.post(f"{API}/admin/refresh", json={"refresh_token": refresh})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestAdminGate:
    """Every admin route answers 401 to anonymous and 403 to non-admins"""

    ADMIN_GETS = [
        "/admin/session",
        "/admin/dashboard",
        "/admin/promos",
        "/admin/artists",
        "/admin/music",
        "/admin/music/artist-options",
        "/admin/events",
        "/admin/demos",
    ]

    async def test_anonymous_gets_401(self, client):
        for path in self.ADMIN_GETS:
            response = await client.get(f"{API}{path}")
            assert response.status_code == status.HTTP_401_UNAUTHORIZED, path

    async def test_garbage_token_gets_401(self, client):
        headers = {"Authorization": "Bearer not-a-jwt"}
        response = await client.get(f"{API}/admin/artists", headers=headers)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_expired_token_gets_401(self, client, admin_user):
        token = create_access_token(subject=str(admin_user.id), expires_delta=timedelta(seconds=-1))
        response = await client.get(f"{API}/admin/artists", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_non_admin_gets_403(self, client, user_headers):
        for path in self.ADMIN_GETS:
            response = await client.get(f"{API}{path}", headers=user_headers)
            assert response.status_code == status.HTTP_403_FORBIDDEN, path

    async def test_non_admin_cannot_write(self, client, user_headers):
        response = await client.post(f"{API}/admin/artists", json={"name": "Sneaky"}, headers=user_headers)
        assert response.status_code == status.HTTP_403_FORBIDDEN

        response = await client.get(f"{API}/artists")
        assert response.json() == []

    async def test_revoked_role_loses_access(self, client, db_session, regular_user, user_headers):
        await AuthService.grant_role(db_session, regular_user.id, ROLE_ADMIN)
        response = await client.get(f"{API}/admin/artists", headers=user_headers)
        assert response.status_code == status.HTTP_200_OK

        await db_session.execute(
            delete(UserRole).where(UserRole.user_id == regular_user.id, UserRole.role == ROLE_ADMIN)
        )
        await db_session.commit()

        response = await client.get(f"{API}/admin/artists", headers=user_headers)
        assert response.status_code == status.HTTP_403_FORBIDDEN

    async def test_dashboard_counts(self, client, admin_headers):
        await client.post(f"{API}/admin/artists", json={"name": "Marcus Wave"}, headers=admin_headers)
        response = await client.get(f"{API}/admin/dashboard", headers=admin_headers)
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["artists"] == 1
        assert data["pending_demos"] == 0
