import pytest
from fastapi import status
from sqlalchemy import select

from hypehouse.models.demo import DemoSubmission
from hypehouse.services.demo_service import DemoService

API = "/api/v1"

BIO_50 = "x" * 50


def demo_form(**overrides):
    form = {
        "artistName": "Marcus Wave",
        "email": "marcus@gmail.com",
        "genre": "R&B",
        "musicLink": "https://soundcloud.com/marcuswave/demo",
        "bio": BIO_50,
    }
    form.update(overrides)
    return form


async def stored_submissions(db_session):
    result = await db_session.execute(select(DemoSubmission))
    return list(result.scalars().all())


class TestSubmitDemo:
    """Public demo form"""

    async def test_valid_submission(self, client, db_session):
        response = await client.post(f"{API}/submit", json=demo_form())
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json() == {
            "success": True,
            "message": "Demo submitted successfully! We'll be in touch.",
        }

        rows = await stored_submissions(db_session)
        assert len(rows) == 1
        assert rows[0].artist_name == "Marcus Wave"
        assert rows[0].status == "pending"
        assert rows[0].social_link is None

    async def test_bio_length_boundary(self, client, db_session):
        response = await client.post(f"{API}/submit", json=demo_form(bio="x" * 49))
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert await stored_submissions(db_session) == []

        response = await client.post(f"{API}/submit", json=demo_form(bio=BIO_50))
        assert response.status_code == status.HTTP_201_CREATED

    async def test_status_cannot_be_chosen(self, client, db_session):
        response = await client.post(f"{API}/submit", json=demo_form(status="accepted"))
        assert response.status_code == status.HTTP_201_CREATED
        rows = await stored_submissions(db_session)
        assert rows[0].status == "pending"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"artistName": "M"},
            {"artistName": "M" * 101},
            {"email": "not-an-email"},
            {"genre": "Polka"},
            {"genre": ""},
            {"musicLink": "soundcloud.com/marcus"},
            {"bio": "x" * 1001},
            {"socialLink": "instagram"},
        ],
    )
    async def test_invalid_fields_are_rejected(self, client, db_session, overrides):
        response = await client.post(f"{API}/submit", json=demo_form(**overrides))
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert await stored_submissions(db_session) == []

    async def test_empty_social_link_is_accepted(self, client, db_session):
        response = await client.post(f"{API}/submit", json=demo_form(socialLink=""))
        assert response.status_code == status.HTTP_201_CREATED

    async def test_genres_endpoint(self, client):
        response = await client.get(f"{API}/submit/genres")
        assert "Electronic / Dance" in response.json()
        assert response.json()[-1] == "Other"


class TestAdminDemos:
    """Reviewing submissions"""

    async def submit(self, client, **overrides):
        response = await client.post(f"{API}/submit", json=demo_form(**overrides))
        assert response.status_code == status.HTTP_201_CREATED

    async def test_submission_is_not_publicly_readable(self, client):
        await self.submit(client)
        response = await client.get(f"{API}/admin/demos")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_status_filter_and_updates(self, client, admin_headers):
        await self.submit(client, artistName="First Artist")
        await self.submit(client, artistName="Second Artist")

        response = await client.get(f"{API}/admin/demos", headers=admin_headers)
        submissions = response.json()
        assert len(submissions) == 2
        target = next(s for s in submissions if s["artist_name"] == "First Artist")

        response = await client.patch(
            f"{API}/admin/demos/{target['id']}/status", json={"status": "accepted"}, headers=admin_headers
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "accepted"

        response = await client.get(f"{API}/admin/demos", params={"status": "accepted"}, headers=admin_headers)
        assert [s["artist_name"] for s in response.json()] == ["First Artist"]

        response = await client.get(f"{API}/admin/demos", params={"status": "pending"}, headers=admin_headers)
        assert [s["artist_name"] for s in response.json()] == ["Second Artist"]

        response = await client.get(f"{API}/admin/dashboard", headers=admin_headers)
        assert response.json()["demo_submissions"] == 2
        assert response.json()["pending_demos"] == 1

    async def test_unknown_status_is_rejected(self, client, admin_headers):
        await self.submit(client)
        submission = (await client.get(f"{API}/admin/demos", headers=admin_headers)).json()[0]
        response = await client.patch(
            f"{API}/admin/demos/{submission['id']}/status", json={"status": "maybe"}, headers=admin_headers
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    async def test_notes(self, client, admin_headers):
        await self.submit(client)
        submission = (await client.get(f"{API}/admin/demos", headers=admin_headers)).json()[0]
        url = f"{API}/admin/demos/{submission['id']}/notes"

        response = await client.patch(url, json={"admin_notes": "Strong vocals"}, headers=admin_headers)
        assert response.json()["admin_notes"] == "Strong vocals"
        assert response.json()["status"] == "pending"

        response = await client.patch(url, json={"admin_notes": None}, headers=admin_headers)
        assert response.json()["admin_notes"] is None

    async def test_delete_requires_confirmation(self, client, admin_headers):
        await self.submit(client)
        submission = (await client.get(f"{API}/admin/demos", headers=admin_headers)).json()[0]
        url = f"{API}/admin/demos/{submission['id']}"

        assert (await client.delete(url, headers=admin_headers)).status_code == status.HTTP_400_BAD_REQUEST
        assert (await client.delete(f"{url}?confirm=true", headers=admin_headers)).status_code == status.HTTP_200_OK
        assert (await client.get(url, headers=admin_headers)).status_code == status.HTTP_404_NOT_FOUND

    def test_submissions_have_no_flag_toggles(self):
        assert not hasattr(DemoService, "toggle_active")
        assert not hasattr(DemoService, "toggle_featured")
