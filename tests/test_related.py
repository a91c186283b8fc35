"""
Unit tests for related guide resolution.
"""

from __future__ import annotations

import logging

from question_groups.models import Guide, GuideFrontmatter
from question_groups.related import resolve_related_guides


def _guide(guide_id: str, title: str, file: str = "") -> Guide:
    return Guide(
        id=guide_id,
        file=file or f"/guides/{guide_id}.md",
        frontmatter=GuideFrontmatter(title=title),
    )


GUIDES = [
    _guide("nodejs-guide", "Node.js Guide"),
    _guide("react-guide", "React Guide"),
]


def test_no_declared_id_returns_none():
    assert resolve_related_guides(None, GUIDES) is None
    assert resolve_related_guides("", GUIDES) is None


def test_matching_guide_is_mapped_to_url():
    assert resolve_related_guides("nodejs-guide", GUIDES) == {"Node.js Guide": "/guides/nodejs-guide"}


def test_unmatched_id_returns_empty_mapping():
    assert resolve_related_guides("python-guide", GUIDES) == {}


def test_duplicate_titles_keep_last_match_and_warn(caplog):
    guides = [
        _guide("dup", "Shared Title", "/guides/a/dup.md"),
        _guide("dup", "Shared Title", "/guides/b/dup.md"),
        _guide("dup", "Other Title", "/guides/c/dup.md"),
    ]

    with caplog.at_level(logging.WARNING, logger="question_groups.related"):
        related = resolve_related_guides("dup", guides)

    assert related == {"Shared Title": "/guides/dup", "Other Title": "/guides/dup"}
    assert "Duplicate related guide title 'Shared Title'" in caplog.text
