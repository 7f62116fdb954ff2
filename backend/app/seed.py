"""
System template seeding.

Global templates (user_id=None, is_system=True) are visible to every user and
can only be created here, never through the API.

Usage (from backend/):
    python -m app.seed
"""

import logging
from typing import Dict, Iterable, List, Optional

from sqlmodel import Session, col, select

from app.models.caption_template import CaptionTemplate

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_TEMPLATES: List[Dict[str, Optional[str]]] = [
    {
        "name": "Product launch",
        "platform": "instagram",
        "tone": "fun",
        "body": "Meet {product}! {core_message} Tap the link in bio to get yours.",
    },
    {
        "name": "Event announcement",
        "platform": "linkedin",
        "tone": "formal",
        "body": "We are excited to announce {event} on {date}. {core_message}",
    },
    {
        "name": "Quick tip",
        "platform": "twitter",
        "tone": "casual",
        "body": "Quick tip for {audience}: {tip}",
    },
]


def seed_system_templates(
    session: Session, templates: Iterable[Dict[str, Optional[str]]] = DEFAULT_SYSTEM_TEMPLATES
) -> List[CaptionTemplate]:
    """
    Insert global system templates, skipping names that already exist.

    Returns:
        The templates created by this call (empty when everything was seeded already)
    """
    existing = set(
        session.exec(
            select(CaptionTemplate.name).where(
                col(CaptionTemplate.user_id).is_(None), CaptionTemplate.is_system == True  # noqa: E712
            )
        ).all()
    )

    created: List[CaptionTemplate] = []
    skipped = 0
    for entry in templates:
        if entry["name"] in existing:
            skipped += 1
            continue
        template = CaptionTemplate(
            user_id=None,
            name=entry["name"],
            platform=entry.get("platform"),
            tone=entry.get("tone"),
            body=entry["body"],
            is_system=True,
        )
        session.add(template)
        created.append(template)
        existing.add(entry["name"])

    session.commit()
    for template in created:
        session.refresh(template)

    logger.info("Seeded %d system templates (%d already present)", len(created), skipped)
    return created


def main() -> None:
    from app.database import engine, init_db

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")
    init_db()
    with Session(engine) as session:
        seed_system_templates(session)


if __name__ == "__main__":
    main()
