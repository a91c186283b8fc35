"""Related guide links for question groups."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from .config import GUIDE_URL_PREFIX
from .models import Guide

logger = logging.getLogger(__name__)


def guide_url(guide_id: str) -> str:
    return f"{GUIDE_URL_PREFIX}{guide_id}"


def resolve_related_guides(
    related_guides_id: Optional[str],
    all_guides: Iterable[Guide],
) -> Optional[Dict[str, str]]:
    """Map the titles of matching guides to their URLs.

    Args:
        related_guides_id: Guide id declared by the group, if any
        all_guides: Every known guide

    Returns:
        ``{title: "/guides/<id>"}`` for each guide whose id matches (possibly
        empty), or None when no id is declared. A later guide with an
        already-seen title replaces the earlier entry.
    """
    if not related_guides_id:
        return None

    related: Dict[str, str] = {}
    for guide in all_guides:
        if guide.id != related_guides_id:
            continue

        title = guide.frontmatter.title
        if title in related:
            logger.warning(
                f"Duplicate related guide title '{title}' for id '{related_guides_id}', "
                f"keeping {guide.file}"
            )
        related[title] = guide_url(guide.id)

    return related
