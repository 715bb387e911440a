from datetime import datetime, timedelta, timezone

from fastapi import status

from hypehouse.models.event import Event
from hypehouse.services.event_service import EventService, partition_events

API = "/api/v1"

NOW = datetime(2024, 3, 15, 20, 0, tzinfo=timezone.utc)


def make_event(title, event_date, is_featured=False):
    return Event(
        title=title,
        venue="The Venue",
        location="London",
        event_date=event_date,
        is_featured=is_featured,
        is_active=True,
    )


class TestPartitionEvents:
    """Upcoming/past split against a fixed clock"""

    def test_split_around_now(self):
        before = make_event("Before", NOW - timedelta(minutes=1))
        after = make_event("After", NOW + timedelta(minutes=1))

        partition = partition_events([before, after], NOW)

        assert partition.upcoming == [after]
        assert partition.past == [before]

    def test_event_exactly_now_is_upcoming(self):
        on_time = make_event("On time", NOW)
        partition = partition_events([on_time], NOW)
        assert partition.upcoming == [on_time]
        assert partition.past == []

    def test_same_event_moves_to_past_as_clock_advances(self):
        show = make_event("Show", NOW + timedelta(hours=1))
        assert partition_events([show], NOW).upcoming == [show]
        assert partition_events([show], NOW + timedelta(hours=2)).past == [show]

    def test_featured_prefers_flagged_upcoming(self):
        first = make_event("First", NOW + timedelta(days=1))
        flagged = make_event("Flagged", NOW + timedelta(days=5), is_featured=True)
        partition = partition_events([first, flagged], NOW)
        assert partition.featured is flagged

    def test_featured_falls_back_to_next_upcoming(self):
        first = make_event("First", NOW + timedelta(days=1))
        second = make_event("Second", NOW + timedelta(days=2))
        partition = partition_events([first, second], NOW)
        assert partition.featured is first

    def test_flagged_past_event_is_never_featured(self):
        old = make_event("Old", NOW - timedelta(days=1), is_featured=True)
        partition = partition_events([old], NOW)
        assert partition.featured is None

    def test_naive_datetimes_are_treated_as_utc(self):
        naive = make_event("Naive", datetime(2024, 3, 15, 19, 59))
        assert partition_events([naive], NOW).past == [naive]


class TestListPartitioned:
    async def test_only_active_events(self, db_session):
        db_session.add_all([
            make_event("Soon", NOW + timedelta(days=1)),
            Event(
                title="Hidden", venue="V", location="L",
                event_date=NOW + timedelta(days=2), is_active=False,
            ),
            make_event("Gone", NOW - timedelta(days=1)),
        ])
        await db_session.commit()

        partition = await EventService.list_partitioned(db_session, NOW)

        assert [e.title for e in partition.upcoming] == ["Soon"]
        assert [e.title for e in partition.past] == ["Gone"]
        assert partition.featured.title == "Soon"


class TestEventRoutes:
    async def test_admin_create_and_public_listing(self, client, admin_headers):
        future = (datetime.now(timezone.utc) + timedelta(days=30)).replace(microsecond=0)
        past = (datetime.now(timezone.utc) - timedelta(days=30)).replace(microsecond=0)

        for title, when in [("Launch Party", future), ("Last Year", past)]:
            response = await client.post(
                f"{API}/admin/events",
                json={
                    "title": title,
                    "venue": "Fabric",
                    "location": "London",
                    "event_date": when.isoformat(),
                    "ticket_price": "£15",
                },
                headers=admin_headers,
            )
            assert response.status_code == status.HTTP_201_CREATED, response.text

        response = await client.get(f"{API}/events")
        data = response.json()
        assert [e["title"] for e in data["upcoming"]] == ["Launch Party"]
        assert [e["title"] for e in data["past"]] == ["Last Year"]
        assert data["past"][0]["is_past"] is True
        assert data["featured"]["title"] == "Launch Party"

    async def test_missing_required_fields(self, client, admin_headers):
        response = await client.post(
            f"{API}/admin/events", json={"title": "No venue"}, headers=admin_headers
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    async def test_no_events(self, client):
        response = await client.get(f"{API}/events")
        assert response.json() == {"featured": None, "upcoming": [], "past": []}

    async def test_detail_placeholder_for_malformed_id(self, client):
        response = await client.get(f"{API}/events/not-a-uuid")
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["is_placeholder"] is True
        assert data["venue"] == "TBA"

    async def test_detail_placeholder_for_inactive(self, client, admin_headers):
        response = await client.post(
            f"{API}/admin/events",
            json={
                "title": "Secret Show",
                "venue": "Somewhere",
                "location": "Manchester",
                "event_date": "2030-01-01T20:00:00Z",
                "is_active": False,
            },
            headers=admin_headers,
        )
        event_id = response.json()["id"]

        response = await client.get(f"{API}/events/{event_id}")
        assert response.json()["is_placeholder"] is True

        await client.post(f"{API}/admin/events/{event_id}/toggle-active", headers=admin_headers)
        response = await client.get(f"{API}/events/{event_id}")
        data = response.json()
        assert data["is_placeholder"] is False
        assert data["title"] == "Secret Show"
        assert data["is_past"] is False

    async def test_admin_list_includes_inactive(self, client, admin_headers):
        for title, is_active in [("Open Night", True), ("Private Rehearsal", False)]:
            response = await client.post(
                f"{API}/admin/events",
                json={
                    "title": title,
                    "venue": "Fabric",
                    "location": "London",
                    "event_date": "2030-06-01T20:00:00Z",
                    "is_active": is_active,
                },
                headers=admin_headers,
            )
            assert response.status_code == status.HTTP_201_CREATED, response.text

        response = await client.get(f"{API}/admin/events", headers=admin_headers)
        assert response.status_code == status.HTTP_200_OK
        listed = {e["title"]: e["is_active"] for e in response.json()}
        assert listed == {"Open Night": True, "Private Rehearsal": False}

        response = await client.get(f"{API}/events")
        assert [e["title"] for e in response.json()["upcoming"]] == ["Open Night"]
