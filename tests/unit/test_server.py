"""Tests for the FastAPI routes."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from revision_tracker.config import TrackerConfig
from revision_tracker.server.app import create_app
from revision_tracker.storage.memory_store import InMemoryStorage


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def client(tmp_path: Path, storage: InMemoryStorage, frozen_today: datetime) -> TestClient:
    config = TrackerConfig(data_dir=tmp_path, storage_backend="memory")
    return TestClient(create_app(config, storage=storage))


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestAgendaPage:
    def test_no_user_selected(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert "User 1" in response.text
        assert "User 5" in response.text
        assert 'id="agenda-section"' not in response.text
        assert 'id="form-section"' not in response.text

    def test_empty_agenda(self, client: TestClient) -> None:
        response = client.get("/", params={"user_id": "2"})

        assert response.status_code == 200
        assert "No topics to revise yet. Add a topic below to get started!" in response.text
        assert 'value="2026-07-19"' in response.text

    def test_unknown_user(self, client: TestClient) -> None:
        assert client.get("/", params={"user_id": "42"}).status_code == 404

    def test_form_submit_redirects_and_lists(self, client: TestClient) -> None:
        response = client.post(
            "/users/1/topics/form",
            data={"topicName": "Functions in JS", "startDate": "2026-07-19"},
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"].startswith("/?user_id=1")

        page = client.get(response.headers["location"]).text
        positions = [
            page.index(text)
            for text in (
                "26th July 2026",
                "19th August 2026",
                "19th October 2026",
                "19th January 2027",
                "19th July 2027",
            )
        ]
        assert positions == sorted(positions)
        assert "added successfully with 5 revision dates" in page

    def test_form_errors_rerender(self, client: TestClient) -> None:
        response = client.post(
            "/users/1/topics/form",
            data={"topicName": "", "startDate": "2010-01-01"},
        )

        assert response.status_code == 422
        assert "Topic name is required" in response.text
        assert "Start date cannot be more than 10 years in the past" in response.text
        assert 'aria-invalid="true"' in response.text
        assert client.get("/api/users/1/agenda").json()["count"] == 0

    def test_form_date_beyond_calendar(self, client: TestClient) -> None:
        response = client.post(
            "/users/1/topics/form",
            data={"topicName": "Loops", "startDate": "9999-12-31"},
        )

        assert response.status_code == 422
        assert "Invalid date selected" in response.text
        assert client.get("/api/users/1/agenda", params={"all": "true"}).json()["count"] == 0

    def test_added_requires_stored_topic(self, client: TestClient) -> None:
        page = client.get("/", params={"user_id": "1", "added": "Fake"}).text
        assert "added successfully" not in page

        client.post("/api/users/1/topics", json={"topic": "Loops", "startDate": "2026-07-19"})

        assert "added successfully" not in client.get(
            "/", params={"user_id": "1", "added": "Fake"}
        ).text
        assert "added successfully" in client.get(
            "/", params={"user_id": "1", "added": "Loops"}
        ).text

    def test_topic_is_escaped(self, client: TestClient) -> None:
        client.post(
            "/users/1/topics/form",
            data={"topicName": "<script>alert(1)</script>", "startDate": "2026-07-19"},
        )

        page = client.get("/", params={"user_id": "1"}).text

        assert "<script>alert(1)</script>" not in page
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in page

    def test_all_past_message(self, client: TestClient) -> None:
        client.post(
            "/users/3/topics/form",
            data={"topicName": "Old topic", "startDate": "2020-01-01"},
        )

        page = client.get("/", params={"user_id": "3"}).text

        assert "No upcoming revisions. All topics are up to date!" in page


class TestJsonApi:
    def test_list_users(self, client: TestClient) -> None:
        assert client.get("/api/users").json() == {
            "users": ["1", "2", "3", "4", "5"],
            "count": 5,
        }

    def test_preview_schedule(self, client: TestClient) -> None:
        data = client.get("/api/schedule", params={"start": "2026-01-31"}).json()

        assert [d["formatted"] for d in data["dates"]] == [
            "7th February 2026",
            "3rd March 2026",
            "1st May 2026",
            "31st July 2026",
            "31st January 2027",
        ]
        assert data["dates"][1]["date"] == "2026-03-03T00:00:00.000Z"

    def test_preview_schedule_invalid(self, client: TestClient) -> None:
        response = client.get("/api/schedule", params={"start": "2026-02-30"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid date selected"

    def test_add_topic_and_agenda(self, client: TestClient) -> None:
        response = client.post(
            "/api/users/4/topics",
            json={"topic": "Functions in JS", "startDate": "2026-07-19"},
        )

        assert response.status_code == 201
        created = response.json()
        assert created["count"] == 5
        assert created["items"][0] == {
            "topic": "Functions in JS",
            "date": "2026-07-26T00:00:00.000Z",
            "startDate": "2026-07-19",
            "formatted": "26th July 2026",
        }

        agenda = client.get("/api/users/4/agenda").json()
        assert agenda["count"] == 5
        assert [i["formatted"] for i in agenda["items"]][-1] == "19th July 2027"

    def test_agenda_sorted_across_topics(self, client: TestClient) -> None:
        client.post("/api/users/1/topics", json={"topic": "Later", "startDate": "2026-08-01"})
        client.post("/api/users/1/topics", json={"topic": "Sooner", "startDate": "2026-07-19"})

        items = client.get("/api/users/1/agenda").json()["items"]

        dates = [i["date"] for i in items]
        assert dates == sorted(dates)
        assert items[0]["topic"] == "Sooner"

    def test_agenda_all_includes_past(self, client: TestClient) -> None:
        client.post("/api/users/1/topics", json={"topic": "Old", "startDate": "2025-01-01"})

        upcoming = client.get("/api/users/1/agenda").json()
        everything = client.get("/api/users/1/agenda", params={"all": "true"}).json()

        assert upcoming["count"] == 0
        assert everything["count"] == 5

    def test_add_topic_validation(self, client: TestClient) -> None:
        response = client.post("/api/users/1/topics", json={"topic": "x" * 101, "startDate": ""})

        assert response.status_code == 422
        assert response.json() == {
            "errors": [
                {"field": "topic-name", "message": "Topic name must be 100 characters or less"},
                {"field": "start-date", "message": "Start date is required"},
            ]
        }

    def test_add_topic_date_beyond_calendar(self, client: TestClient) -> None:
        response = client.post(
            "/api/users/1/topics", json={"topic": "Loops", "startDate": "9999-06-01"}
        )

        assert response.status_code == 422
        assert response.json() == {
            "errors": [{"field": "start-date", "message": "Invalid date selected"}]
        }

    def test_preview_schedule_beyond_calendar(self, client: TestClient) -> None:
        response = client.get("/api/schedule", params={"start": "9999-12-31"})
        assert response.status_code == 400

    def test_unknown_user(self, client: TestClient) -> None:
        assert client.get("/api/users/9/agenda").status_code == 404
        response = client.post(
            "/api/users/9/topics", json={"topic": "x", "startDate": "2026-07-19"}
        )
        assert response.status_code == 404

    def test_clear_agenda(self, client: TestClient) -> None:
        client.post("/api/users/2/topics", json={"topic": "Loops", "startDate": "2026-07-19"})

        response = client.delete("/api/users/2/agenda")

        assert response.json() == {"user_id": "2", "removed": 5}
        assert client.get("/api/users/2/agenda").json()["count"] == 0


class TestLifespanStorage:
    def test_creates_storage_from_config(self, tmp_path: Path, frozen_today: datetime) -> None:
        config = TrackerConfig(data_dir=tmp_path, storage_backend="sqlite")

        with TestClient(create_app(config)) as client:
            response = client.post(
                "/api/users/1/topics", json={"topic": "Loops", "startDate": "2026-07-19"}
            )
            assert response.status_code == 201

        assert (tmp_path / "agenda.db").exists()
