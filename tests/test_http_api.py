from unittest.mock import MagicMock

import httpx
import pytest

from venue_calendar.errors import InfrastructureError
from venue_calendar.services.http import MEDIA_TYPE, create_app

pytestmark = pytest.mark.unit

STANDUP = {
    "name": "Standup",
    "location_id": "R1",
    "location": "Room One",
    "description": "Daily sync",
    "guests": ["u2"],
    "owner": "u1",
    "start_time": "2024-03-04T09:00:00+07:00",
    "end_time": "2024-03-04T10:00:00+07:00",
}

VENUE_ID = "5f0c1e2d3a4b5c6d7e8f9012"

MARCH_WEEK = {"start_time": "2024-03-03T00:00:00+07:00", "end_time": "2024-03-09T23:59:59+07:00"}


def _client(app) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")


def _error_id(response: httpx.Response) -> str:
    return response.json()["errors"][0]["id"]


class TestHealth:
    async def test_health_returns_ok(self, app):
        async with _client(app) as client:
            response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestVenuesAndRooms:
    async def test_create_and_fetch_venue(self, app):
        async with _client(app) as client:
            created = await client.post("/venues", json={"data": {"name": "HQ"}})
            venue_id = created.json()["data"]["id"]
            fetched = await client.get(f"/venues/{venue_id}")

        assert created.status_code == 201
        assert created.headers["content-type"].startswith(MEDIA_TYPE)
        assert fetched.status_code == 200
        assert fetched.json()["data"]["name"] == "HQ"
        assert "rooms" not in fetched.json()["data"]

    async def test_venue_listing_includes_rooms(self, app):
        async with _client(app) as client:
            venue = (await client.post("/venues", json={"data": {"name": "HQ"}})).json()["data"]
            room = await client.post("/rooms", json={"data": {"name": "Alpha", "venue_id": venue["id"], "capacity": "8"}})
            listing = await client.get("/venues")
            venue_rooms = await client.get(f"/venues/{venue['id']}/rooms")

        assert room.status_code == 201
        assert listing.json()["data"][0]["rooms"][0]["name"] == "Alpha"
        assert [item["name"] for item in venue_rooms.json()["data"]] == ["Alpha"]

    async def test_room_with_malformed_venue_id_is_rejected(self, app):
        async with _client(app) as client:
            response = await client.post("/rooms", json={"data": {"name": "Alpha", "venue_id": "V1"}})
            rooms = await client.get("/rooms")

        assert response.status_code == 400
        assert _error_id(response) == "bad_request"
        assert rooms.json()["data"] == []

    async def test_room_with_upper_case_venue_id_is_listed_under_venue(self, app):
        async with _client(app) as client:
            venue_id = (await client.post("/venues", json={"data": {"name": "HQ"}})).json()["data"]["id"]
            created = await client.post("/rooms", json={"data": {"name": "Alpha", "venue_id": venue_id.upper()}})
            by_venue = await client.get(f"/venues/{venue_id.upper()}/rooms")
            listing = await client.get("/venues")

        assert created.status_code == 201
        assert created.json()["data"]["venue_id"] == venue_id
        assert [item["name"] for item in by_venue.json()["data"]] == ["Alpha"]
        assert [room["name"] for room in listing.json()["data"][0]["rooms"]] == ["Alpha"]

    async def test_update_room(self, app):
        async with _client(app) as client:
            room_id = (await client.post("/rooms", json={"data": {"name": "Alpha", "venue_id": VENUE_ID}})).json()["data"]["id"]
            updated = await client.patch(f"/rooms/{room_id}", json={"data": {"name": "Beta", "venue_id": VENUE_ID}})
            rooms = await client.get("/rooms")

        assert updated.status_code == 202
        assert updated.json()["data"]["id"] == room_id
        assert [item["name"] for item in rooms.json()["data"]] == ["Beta"]

    async def test_update_unknown_room_is_not_found(self, app):
        async with _client(app) as client:
            response = await client.patch("/rooms/" + "a" * 24, json={"data": {"name": "Ghost", "venue_id": VENUE_ID}})
            rooms = await client.get("/rooms")

        assert response.status_code == 404
        assert _error_id(response) == "not_found"
        assert rooms.json()["data"] == []

    async def test_delete_venue(self, app):
        async with _client(app) as client:
            venue_id = (await client.post("/venues", json={"data": {"name": "HQ"}})).json()["data"]["id"]
            deleted = await client.delete(f"/venues/{venue_id}")
            missing = await client.get(f"/venues/{venue_id}")

        assert deleted.status_code == 202
        assert deleted.json() == {"data": {"message": "Venue has been deleted successfully"}}
        assert missing.status_code == 404


class TestEvents:
    async def test_create_event_returns_decomposed_shape(self, app):
        async with _client(app) as client:
            response = await client.post("/events", json={"data": STANDUP})

        data = response.json()["data"]
        assert response.status_code == 201
        assert {key: data[key] for key in ("year", "month", "date")} == {"year": 2024, "month": 3, "date": 4}
        assert (data["start_hour"], data["start_minute"], data["end_hour"], data["end_minute"]) == (9, 0, 10, 0)
        assert data["guests"] == ["u2"]
        assert "start_time" not in data

    async def test_create_event_from_decomposed_fields(self, app):
        body = {key: value for key, value in STANDUP.items() if key not in ("start_time", "end_time")}
        body.update(year=2024, month=3, date=5, start_hour=14, start_minute=30, end_hour=15, end_minute=0)
        async with _client(app) as client:
            created = await client.post("/events", json={"data": body})
            fetched = await client.get(f"/events/{created.json()['data']['id']}")

        assert created.status_code == 201
        assert fetched.json()["data"]["date"] == 5
        assert fetched.json()["data"]["start_minute"] == 30

    async def test_list_events_in_window(self, app):
        later = {**STANDUP, "start_time": "2024-04-01T09:00:00+07:00", "end_time": "2024-04-01T10:00:00+07:00"}
        async with _client(app) as client:
            await client.post("/events", json={"data": STANDUP})
            await client.post("/events", json={"data": later})
            response = await client.get("/events", params=MARCH_WEEK)

        assert response.status_code == 200
        assert [(item["month"], item["date"]) for item in response.json()["data"]] == [(3, 4)]

    async def test_search_events_by_participant(self, app):
        other_room = {**STANDUP, "location_id": "R2"}
        async with _client(app) as client:
            await client.post("/events", json={"data": STANDUP})
            await client.post("/events", json={"data": other_room})
            owner = await client.get(
                "/search-events",
                params=[("room_ids[]", "R1"), ("room_ids[]", "R2"), ("owner", "u1"), ("guest_id", "u1"), *MARCH_WEEK.items()],
            )
            guest = await client.get(
                "/search-events",
                params=[("room_ids[]", "R1"), ("owner", "u2"), ("guest_id", "u2"), *MARCH_WEEK.items()],
            )
            stranger = await client.get(
                "/search-events",
                params=[("room_ids[]", "R1"), ("owner", "u3"), ("guest_id", "u3"), *MARCH_WEEK.items()],
            )
            no_rooms = await client.get("/search-events", params=[("owner", "u1"), ("guest_id", "u1"), *MARCH_WEEK.items()])

        assert len(owner.json()["data"]) == 2
        assert [item["location_id"] for item in guest.json()["data"]] == ["R1"]
        assert stranger.json()["data"] == []
        assert no_rooms.json()["data"] == []

    async def test_update_and_delete_event(self, app):
        async with _client(app) as client:
            event_id = (await client.post("/events", json={"data": STANDUP})).json()["data"]["id"]
            updated = await client.patch(f"/events/{event_id}", json={"data": {**STANDUP, "name": "Retro", "guests": []}})
            deleted = await client.delete(f"/events/{event_id}")
            missing = await client.get(f"/events/{event_id}")

        assert updated.status_code == 202
        assert updated.json()["data"]["name"] == "Retro"
        assert updated.json()["data"]["guests"] == []
        assert deleted.json()["data"]["message"] == "Event has been deleted successfully"
        assert missing.status_code == 404


class TestErrors:
    async def test_malformed_identifier_rejected_before_store_access(self, settings):
        store = MagicMock()
        app = create_app(settings, store=store)
        async with _client(app) as client:
            responses = [
                await client.get("/rooms/not-an-id"),
                await client.patch("/events/123", json={"data": STANDUP}),
                await client.delete("/venues/" + "z" * 24),
            ]

        assert [response.status_code for response in responses] == [400, 400, 400]
        assert {_error_id(response) for response in responses} == {"bad_request"}
        assert store.method_calls == []

    async def test_malformed_json_body(self, app):
        async with _client(app) as client:
            response = await client.post(
                "/venues", content=b"{not json", headers={"content-type": "application/json"}
            )
        assert response.status_code == 400
        assert _error_id(response) == "bad_request"

    async def test_body_without_data_envelope(self, app):
        async with _client(app) as client:
            response = await client.post("/venues", json={"name": "HQ"})
        assert response.status_code == 400

    async def test_malformed_window_bound(self, app):
        async with _client(app) as client:
            response = await client.get("/events", params={"start_time": "next tuesday"})
        assert response.status_code == 400
        assert "start_time" in response.json()["errors"][0]["detail"]

    async def test_store_failure_is_internal_error(self, settings):
        store = MagicMock()
        store.list.side_effect = InfrastructureError("connection refused by db-1:5432")
        app = create_app(settings, store=store)
        async with _client(app) as client:
            response = await client.get("/rooms")

        assert response.status_code == 500
        assert response.json()["errors"][0] == {
            "id": "internal_server_error",
            "status": 500,
            "title": "Internal Server Error",
            "detail": "Something went wrong.",
        }

    async def test_unexpected_failure_is_recovered(self, settings):
        store = MagicMock()
        store.list.side_effect = RuntimeError("boom")
        app = create_app(settings, store=store)
        async with _client(app) as client:
            failed = await client.get("/venues")
            health = await client.get("/health")

        assert failed.status_code == 500
        assert _error_id(failed) == "internal_server_error"
        assert health.status_code == 200

    async def test_unknown_route(self, app):
        async with _client(app) as client:
            response = await client.get("/appointments")
        assert response.status_code == 404
        assert _error_id(response) == "not_found"


class TestMediaTypeEnforcement:
    @pytest.fixture
    def strict_app(self, settings_factory, store):
        return create_app(settings_factory(enforce_media_type=True), store=store)

    async def test_missing_accept_header(self, strict_app):
        async with _client(strict_app) as client:
            response = await client.get("/rooms")
        assert response.status_code == 406
        assert _error_id(response) == "not_acceptable"

    async def test_wrong_content_type(self, strict_app):
        async with _client(strict_app) as client:
            response = await client.post(
                "/venues", json={"data": {"name": "HQ"}}, headers={"accept": MEDIA_TYPE}
            )
        assert response.status_code == 415

    async def test_json_api_headers_accepted(self, strict_app):
        headers = {"accept": MEDIA_TYPE, "content-type": MEDIA_TYPE}
        async with _client(strict_app) as client:
            created = await client.post("/venues", content=b'{"data": {"name": "HQ"}}', headers=headers)
            health = await client.get("/health")
        assert created.status_code == 201
        assert health.status_code == 200
