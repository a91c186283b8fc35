"""
Read-only queries over question groups.

Every call re-assembles from the content source; nothing is cached
between calls, so content edits are always picked up.

Usage:
    from question_groups import get_question_group_by_id

    group = await get_question_group_by_id("nodejs")
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from .assembler import QuestionGroupAssembler
from .config import AUTHORS_PATTERN, CONTENT_ROOT, GUIDES_PATTERN, QUESTION_GROUPS_DIR
from .content_source import FileContentSource
from .models import GroupSummary, QuestionGroup
from .registries import MarkdownAuthorRegistry, MarkdownGuideRegistry


class QuestionGroupRepository:
    """Query facade over a QuestionGroupAssembler."""

    def __init__(self, assembler: QuestionGroupAssembler):
        self.assembler = assembler

    @classmethod
    def from_content_root(
        cls,
        content_root: Optional[Path] = None,
        groups_dir: str = QUESTION_GROUPS_DIR,
        authors_pattern: str = AUTHORS_PATTERN,
        guides_pattern: str = GUIDES_PATTERN,
    ) -> "QuestionGroupRepository":
        """Build a repository reading markdown files from ``content_root``."""
        source = FileContentSource(content_root or CONTENT_ROOT)
        assembler = QuestionGroupAssembler(
            source,
            MarkdownAuthorRegistry(source, authors_pattern),
            MarkdownGuideRegistry(source, guides_pattern),
            groups_dir=groups_dir,
        )
        return cls(assembler)

    async def get_all(self) -> List[QuestionGroup]:
        return await self.assembler.assemble_all()

    async def get_by_id(self, group_id: str) -> Optional[QuestionGroup]:
        """Return the group with this id, or None."""
        for group in await self.get_all():
            if group.id == group_id:
                return group
        return None

    async def get_by_ids(self, ids: Optional[Iterable[str]]) -> List[GroupSummary]:
        """Return summaries of the groups whose id is in ``ids``."""
        ids = list(ids or [])
        if not ids:
            return []
        return self.assembler.load_summaries(ids)


def default_repository() -> QuestionGroupRepository:
    return QuestionGroupRepository.from_content_root(CONTENT_ROOT)


async def get_all_question_groups() -> List[QuestionGroup]:
    return await default_repository().get_all()


async def get_question_group_by_id(group_id: str) -> Optional[QuestionGroup]:
    return await default_repository().get_by_id(group_id)


async def get_question_groups_by_ids(ids: Optional[Iterable[str]]) -> List[GroupSummary]:
    return await default_repository().get_by_ids(ids)
