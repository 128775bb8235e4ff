"""
Default portfolio content and the document builder.

DEFAULT_CONTENT is the placeholder portfolio the site ships with. Real
deployments point CONCIERGE_CONTENT_PATH at their own JSON file instead.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from portfolio_concierge.content.schemas import (
    About,
    PortfolioContent,
    WorkItem,
    Works,
)
from portfolio_concierge.core.errors import ContentError
from portfolio_concierge.retrieval.document import ABOUT_DOCUMENT_ID, Document

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# DEFAULT CONTENT
# ---------------------------------------------------------------------------

DEFAULT_CONTENT = PortfolioContent(
    name="Arijit",
    roles=("Creative Director", "Designer", "Animator"),
    about=About(
        image="/profile.jpg",
        text=(
            "I am a multidisciplinary creative director with a passion for design, "
            "motion, and storytelling. This space is a curated selection of my work "
            "across different mediums. Replace this placeholder with your own bio to "
            "give visitors insight into your background and approach."
        ),
    ),
    works=Works(
        graphics=(
            WorkItem(
                id="g1",
                title="Series One",
                description="A series of abstract graphics exploring light and form.",
                tags=("abstract", "light"),
                thumbnail="/work1.jpg",
                images=("/work1.jpg",),
            ),
        ),
        video=(
            WorkItem(
                id="v1",
                title="Motion Study",
                description="A short video exploring motion and rhythm.",
                tags=("motion", "study"),
                thumbnail="/video1.jpg",
                url="https://example.com",
            ),
        ),
    ),
    email="replace@example.com",
    whatsapp="911234567890",
    resume_url="#",
    socials={"instagram": "#", "linkedin": "#"},
)


# ---------------------------------------------------------------------------
# DOCUMENT BUILDER
# ---------------------------------------------------------------------------


def _work_text(item: WorkItem) -> str:
    return " ".join([item.title, item.description, " ".join(item.tags)])


def build_documents(content: PortfolioContent) -> list[Document]:
    """
    Turn portfolio content into the ordered document set.

    Order is fixed: the bio first, then every graphics item, then every
    video item, each in listed order.
    """
    docs = [
        Document(
            id=ABOUT_DOCUMENT_ID,
            text=" ".join([content.name, " ".join(content.roles), content.about.text]),
        )
    ]
    docs.extend(Document(id=g.id, text=_work_text(g)) for g in content.works.graphics)
    docs.extend(Document(id=v.id, text=_work_text(v)) for v in content.works.video)

    ids = [d.id for d in docs]
    if len(set(ids)) != len(ids):
        raise ContentError(f"Document ids must be unique, got {ids}")
    return docs


# ---------------------------------------------------------------------------
# LOADER
# ---------------------------------------------------------------------------


def load_content(path: str | Path | None = None) -> PortfolioContent:
    """
    Load portfolio content from a JSON file.

    Args:
        path: JSON file to read. Falls back to CONCIERGE_CONTENT_PATH, then
            to DEFAULT_CONTENT when neither is set.

    Raises:
        ContentError: file missing, not JSON, or not a valid portfolio
    """
    path = path or os.environ.get("CONCIERGE_CONTENT_PATH") or None
    if path is None:
        logger.debug("No content path configured, using default portfolio")
        return DEFAULT_CONTENT

    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Content file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Content file is not valid JSON: {path}: {e}") from e

    try:
        content = PortfolioContent.model_validate(raw)
    except ValidationError as e:
        raise ContentError(f"Invalid portfolio content in {path}:\n{e}") from e

    logger.info(f"Loaded portfolio content for {content.name} from {path}")
    return content
