import logging

from fastapi.testclient import TestClient
from sqlmodel import Session

from app.seed import DEFAULT_SYSTEM_TEMPLATES, seed_system_templates


def test_seed_system_templates_is_idempotent(session: Session):
    created = seed_system_templates(session)

    assert len(created) == len(DEFAULT_SYSTEM_TEMPLATES)
    assert all(t.is_system and t.user_id is None for t in created)

    assert seed_system_templates(session) == []


def test_seed_skips_existing_names_only(session: Session):
    seed_system_templates(session, DEFAULT_SYSTEM_TEMPLATES[:1])

    created = seed_system_templates(session)

    assert [t.name for t in created] == [t["name"] for t in DEFAULT_SYSTEM_TEMPLATES[1:]]


def test_seeded_templates_visible_and_usable_by_all_users(client: TestClient, session: Session, auth_headers):
    seeded = seed_system_templates(session)
    seeded_ids = {t.id for t in seeded}

    for user_id in ("alice", "bob"):
        listed = client.get("/api/caption-templates", headers=auth_headers(user_id)).json()["data"]
        assert listed["total"] == len(seeded)
        assert {t["id"] for t in listed["items"]} == seeded_ids
        assert all(t["is_system"] for t in listed["items"])

    session_id = client.post(
        "/api/caption-sessions", json={"name": "Launch"}, headers=auth_headers("bob")
    ).json()["data"]["session"]["id"]
    response = client.post(
        f"/api/caption-sessions/{session_id}/captions",
        json={"caption_text": "Meet the Rocket!", "template_id": seeded[0].id},
        headers=auth_headers("bob"),
    )
    assert response.status_code == 201


def test_seed_log_counts_only_requested_templates(session: Session, caplog):
    seed_system_templates(session)
    caplog.set_level(logging.INFO, logger="app.seed")

    seed_system_templates(session, DEFAULT_SYSTEM_TEMPLATES[:1])

    assert "Seeded 0 system templates (1 already present)" in caplog.text
