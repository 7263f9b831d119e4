"""API tests for public content endpoints, admin CRUD and error envelopes."""

import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.core.database import build_session_factory
from app.main import create_app
from app.models import Base
from app.services.database_storage import DatabaseStorage
from app.services.sessions import DatabaseSessionStore

ADMIN_PASSWORD = "bootstrap-pass-1"

SOCIAL_LINK = {
    "platform": "twitch",
    "name": "Twitch",
    "url": "https://twitch.tv/streamer",
    "icon": "twitch",
    "color": "#9146FF",
    "username": "@streamer",
    "description": "Live streams",
    "order": 1,
}

STREAM_CHANNEL = {
    "name": "IRL Adventures",
    "type": "primary",
    "description": "Travel and outdoor streams",
    "platform": "twitch",
    "url": "https://twitch.tv/streamer",
    "color": "#9146FF",
    "order": 1,
}


def _settings() -> Settings:
    return Settings(
        _env_file=None,
        STORAGE_BACKEND="memory",
        SESSION_BACKEND="memory",
        SESSION_SECRET="test-session-secret",
        BOOTSTRAP_ADMIN_PASSWORD=ADMIN_PASSWORD,
    )


def _iso(value: datetime) -> str:
    return value.isoformat()


class ContentApiTestCase(unittest.TestCase):
    """Fresh app per test; admin is signed in unless a test logs out."""

    def build_app(self):
        return create_app(_settings())

    def setUp(self) -> None:
        self.app = self.build_app()
        self.client = TestClient(self.app)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)
        response = self.client.post(
            "/api/admin/login", json={"username": "admin", "password": ADMIN_PASSWORD}
        )
        self.assertEqual(response.status_code, 200)


class TestPublicEndpoints(ContentApiTestCase):
    def test_empty_lists_return_fallback_notice(self) -> None:
        self.assertEqual(
            self.client.get("/api/social-links").json(),
            {"success": True, "message": "Social links served from the frontend"},
        )
        self.assertEqual(
            self.client.get("/api/stream-channels").json(),
            {"success": True, "message": "Stream channels served from the frontend"},
        )

    def test_site_settings_defaults(self) -> None:
        body = self.client.get("/api/site-settings").json()
        self.assertIsNone(body["id"])
        self.assertEqual(body["primaryColor"], "#f97316")
        self.assertEqual(body["secondaryColor"], "#000000")
        self.assertEqual(body["borderRadius"], "0.5rem")
        self.assertEqual(body["fontFamily"], "'Inter', sans-serif")

    def test_announcements_empty(self) -> None:
        self.assertEqual(self.client.get("/api/announcements").json(), [])

    def test_unsaved_page_section_is_null(self) -> None:
        response = self.client.get("/api/page-content/hero")
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json())

    def test_any_section_key_reads_as_null(self) -> None:
        response = self.client.get("/api/page-content/about%20us")
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json())

    def test_health(self) -> None:
        body = self.client.get("/api/health").json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["storage"], "memory")
        self.assertIsNone(body["database"])

    def test_unknown_route_uses_error_envelope(self) -> None:
        response = self.client.get("/api/does-not-exist")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Not Found"})


class TestSocialLinks(ContentApiTestCase):
    def create(self, **overrides: object) -> dict:
        response = self.client.post("/api/admin/social-links", json={**SOCIAL_LINK, **overrides})
        self.assertEqual(response.status_code, 201)
        return response.json()

    def test_create_and_list_in_order(self) -> None:
        for order in (3, 1, 2):
            self.create(name=f"Link {order}", order=order)
        public = self.client.get("/api/social-links").json()
        self.assertEqual([link["order"] for link in public], [1, 2, 3])
        admin = self.client.get("/api/admin/social-links").json()
        self.assertEqual(admin, public)

    def test_partial_update(self) -> None:
        link = self.create()
        response = self.client.put(f"/api/admin/social-links/{link['id']}", json={"name": "Renamed"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["name"], "Renamed")
        self.assertEqual(body["url"], SOCIAL_LINK["url"])

    def test_explicit_null_is_ignored(self) -> None:
        link = self.create()
        body = self.client.put(f"/api/admin/social-links/{link['id']}", json={"name": None}).json()
        self.assertEqual(body["name"], SOCIAL_LINK["name"])

    def test_update_missing_is_404(self) -> None:
        response = self.client.put("/api/admin/social-links/999", json={"name": "Ghost"})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Social link not found"})
        self.assertEqual(self.client.get("/api/admin/social-links").json(), [])

    def test_delete(self) -> None:
        link = self.create()
        response = self.client.delete(f"/api/admin/social-links/{link['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"success": True})
        self.assertEqual(self.client.delete(f"/api/admin/social-links/{link['id']}").status_code, 404)

    def test_missing_field_is_400(self) -> None:
        body = {k: v for k, v in SOCIAL_LINK.items() if k != "url"}
        response = self.client.post("/api/admin/social-links", json=body)
        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.json()["error"].startswith("url"))

    def test_non_integer_id_is_400(self) -> None:
        self.assertEqual(self.client.get("/api/admin/social-links/abc").status_code, 400)


class TestStreamChannels(ContentApiTestCase):
    def test_crud(self) -> None:
        created = self.client.post("/api/admin/stream-channels", json=STREAM_CHANNEL)
        self.assertEqual(created.status_code, 201)
        channel_id = created.json()["id"]

        updated = self.client.put(f"/api/admin/stream-channels/{channel_id}", json={"type": "secondary"})
        self.assertEqual(updated.json()["type"], "secondary")
        self.assertEqual(self.client.get("/api/stream-channels").json()[0]["type"], "secondary")

        deleted = self.client.delete(f"/api/admin/stream-channels/{channel_id}")
        self.assertEqual(deleted.status_code, 200)
        self.assertEqual(deleted.json(), {"success": True})
        missing = self.client.get(f"/api/admin/stream-channels/{channel_id}")
        self.assertEqual(missing.status_code, 404)
        self.assertEqual(missing.json(), {"error": "Stream channel not found"})

    def test_invalid_channel_type(self) -> None:
        response = self.client.post("/api/admin/stream-channels", json={**STREAM_CHANNEL, "type": "tertiary"})
        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.json()["error"].startswith("type"))


class TestAnnouncements(ContentApiTestCase):
    def test_public_list_only_shows_active(self) -> None:
        now = datetime.now(timezone.utc)
        self.client.post(
            "/api/admin/announcements",
            json={"title": "Old", "content": "Gone", "expiresAt": _iso(now - timedelta(hours=1))},
        )
        self.client.post("/api/admin/announcements", json={"title": "Off", "content": "Hidden", "active": False})
        live = self.client.post(
            "/api/admin/announcements",
            json={"title": "Live", "content": "Tonight", "expiresAt": _iso(now + timedelta(days=1))},
        ).json()

        public = self.client.get("/api/announcements").json()
        self.assertEqual([a["id"] for a in public], [live["id"]])
        self.assertEqual(len(self.client.get("/api/admin/announcements").json()), 3)

    def test_created_at_set_by_server(self) -> None:
        response = self.client.post(
            "/api/admin/announcements",
            json={"title": "Hi", "content": "There", "createdAt": "2001-01-01T00:00:00Z"},
        )
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertTrue(body["active"])
        self.assertIsNone(body["expiresAt"])
        self.assertFalse(body["createdAt"].startswith("2001"))

    def test_clearing_expiry(self) -> None:
        past = _iso(datetime.now(timezone.utc) - timedelta(hours=1))
        created = self.client.post(
            "/api/admin/announcements", json={"title": "Old", "content": "Gone", "expiresAt": past}
        ).json()
        self.assertEqual(self.client.get("/api/announcements").json(), [])

        updated = self.client.put(f"/api/admin/announcements/{created['id']}", json={"expiresAt": None})
        self.assertIsNone(updated.json()["expiresAt"])
        self.assertEqual(len(self.client.get("/api/announcements").json()), 1)

    def test_missing_announcement(self) -> None:
        response = self.client.put("/api/admin/announcements/42", json={"title": "Ghost"})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Announcement not found"})
        self.assertEqual(self.client.delete("/api/admin/announcements/42").status_code, 404)


class TestPageContent(ContentApiTestCase):
    def test_upsert_and_read(self) -> None:
        first = self.client.put("/api/admin/page-content/hero", json={"content": {"title": "X"}})
        self.assertEqual(first.status_code, 200)
        self.assertEqual(self.client.get("/api/page-content/hero").json(), {"title": "X"})

        second = self.client.put(
            "/api/admin/page-content/hero", json={"content": {"title": "Y", "subtitle": "Z"}}
        )
        self.assertEqual(second.json()["id"], first.json()["id"])
        self.assertEqual(self.client.get("/api/page-content/hero").json(), {"title": "Y", "subtitle": "Z"})

    def test_sections_are_independent(self) -> None:
        self.client.put("/api/admin/page-content/hero", json={"content": {"title": "X"}})
        self.client.put("/api/admin/page-content/cta", json={"content": {"title": "Follow"}})
        self.assertEqual(self.client.get("/api/page-content/hero").json(), {"title": "X"})
        sections = [page["section"] for page in self.client.get("/api/admin/page-content").json()]
        self.assertEqual(sections, ["hero", "cta"])

    def test_admin_get_missing_section(self) -> None:
        response = self.client.get("/api/admin/page-content/footer")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Page content not found"})

    def test_content_must_be_object(self) -> None:
        response = self.client.put("/api/admin/page-content/hero", json={"content": "plain text"})
        self.assertEqual(response.status_code, 400)

    def test_invalid_section_key(self) -> None:
        response = self.client.put("/api/admin/page-content/bad%20key", json={"content": {}})
        self.assertEqual(response.status_code, 400)


class TestSiteSettings(ContentApiTestCase):
    def test_first_save_merges_defaults(self) -> None:
        response = self.client.put("/api/admin/site-settings", json={"primaryColor": "#123456"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["primaryColor"], "#123456")
        self.assertEqual(body["secondaryColor"], "#000000")
        self.assertIsNotNone(body["id"])
        self.assertEqual(self.client.get("/api/site-settings").json(), body)

    def test_post_is_accepted_as_update(self) -> None:
        self.client.put("/api/admin/site-settings", json={"primaryColor": "#123456"})
        response = self.client.post("/api/admin/site-settings", json={"borderRadius": "1rem"})
        self.assertEqual(response.status_code, 200)
        body = self.client.get("/api/admin/site-settings").json()
        self.assertEqual(body["primaryColor"], "#123456")
        self.assertEqual(body["borderRadius"], "1rem")


class TestErrorEnvelope(ContentApiTestCase):
    def test_unexpected_error_is_500(self) -> None:
        with patch.object(self.app.state.storage, "list_social_links", side_effect=RuntimeError("boom")):
            response = self.client.get("/api/social-links")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Internal server error"})

    def test_database_error_is_500(self) -> None:
        with patch.object(
            self.app.state.storage, "list_announcements", side_effect=SQLAlchemyError("db down")
        ):
            response = self.client.get("/api/admin/announcements")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Internal server error"})


class TestDatabaseBackedFlow(ContentApiTestCase):
    """Same API over DatabaseStorage and DatabaseSessionStore on SQLite."""

    def build_app(self):
        app = create_app(_settings())
        engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(engine)
        factory = build_session_factory(engine)
        app.state.storage = DatabaseStorage(factory)
        app.state.session_store = DatabaseSessionStore(factory, timedelta(days=7))
        return app

    def test_content_round_trip(self) -> None:
        self.client.post("/api/admin/social-links", json=SOCIAL_LINK)
        self.client.put("/api/admin/page-content/hero", json={"content": {"title": "X"}})
        self.client.put("/api/admin/site-settings", json={"fontFamily": "monospace"})

        self.assertEqual(self.client.get("/api/social-links").json()[0]["name"], "Twitch")
        self.assertEqual(self.client.get("/api/page-content/hero").json(), {"title": "X"})
        self.assertEqual(self.client.get("/api/site-settings").json()["fontFamily"], "monospace")

    def test_health_reports_database(self) -> None:
        body = self.client.get("/api/health").json()
        self.assertEqual(body["storage"], "database")
        self.assertEqual(body["database"], "connected")

    def test_logout_removes_session_row(self) -> None:
        self.assertEqual(self.client.get("/api/admin/me").status_code, 200)
        self.client.post("/api/admin/logout")
        self.assertEqual(self.client.get("/api/admin/me").status_code, 401)


if __name__ == "__main__":
    unittest.main()
