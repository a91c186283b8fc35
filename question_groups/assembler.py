"""
Question group assembler.

Builds fully resolved question groups from a content snapshot:
- Long-form answers and endings merged in from ``content/*.md`` files
- Topics deduplicated across each group's questions
- Related guides and authors resolved from their registries
- Groups sorted by declared ``order``

Content layout:
    question-groups/
        <groupDir>/
            <groupId>.md        - Group document (frontmatter + body)
            content/
                <answer>.md     - Long-form answers and endings
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from .answers import resolve_answer, resolve_ending
from .config import QUESTION_GROUPS_DIR, question_groups_base_dir
from .content_source import ContentSource, MarkdownFile, document_id, split_document_path
from .models import (
    Author,
    Guide,
    GroupSummary,
    QuestionGroup,
    QuestionGroupFrontmatter,
    RawQuestionEntry,
    ResolvedQuestion,
    parse_model,
)
from .registries import AuthorRegistry, GuideRegistry
from .related import resolve_related_guides
from .slug import slugify
from .topics import aggregate_topics

logger = logging.getLogger(__name__)


class QuestionGroupAssembler:
    """Assembles question groups from a content source and registries."""

    def __init__(
        self,
        source: ContentSource,
        author_registry: AuthorRegistry,
        guide_registry: GuideRegistry,
        groups_dir: str = QUESTION_GROUPS_DIR,
    ):
        """Initialize assembler.

        Args:
            source: Content source holding group documents and content files
            author_registry: Registry used to resolve ``authorId``
            guide_registry: Registry used to resolve ``relatedGuidesId``
            groups_dir: Directory of the question groups under the content root
        """
        self.source = source
        self.author_registry = author_registry
        self.guide_registry = guide_registry
        self.groups_dir = groups_dir.strip("/")
        self.base_dir = question_groups_base_dir(self.groups_dir)
        self.documents_pattern = f"{self.groups_dir}/*/*.md"
        self.content_pattern = f"{self.groups_dir}/*/content/*.md"

    def load_documents(self) -> Dict[str, MarkdownFile]:
        return self.source.load_documents(self.documents_pattern)

    def load_content_files(self) -> Dict[str, str]:
        return self.source.load_raw(self.content_pattern)

    async def assemble_all(self) -> List[QuestionGroup]:
        """Assemble every question group, sorted by ``frontmatter.order``.

        Returns:
            List of QuestionGroup objects

        Raises:
            FrontmatterError: If any group document has invalid frontmatter
        """
        documents = self.load_documents()
        content_files = self.load_content_files()

        all_authors = await self.author_registry.get_all()
        all_guides = await self.guide_registry.get_all()

        groups = [
            self.assemble_group(document, content_files, all_authors, all_guides)
            for document in documents.values()
        ]
        # list.sort is stable: equal orders keep load order
        groups.sort(key=lambda group: group.frontmatter.order)

        logger.debug(
            f"Assembled {len(groups)} question group(s) "
            f"from {len(content_files)} content file(s)"
        )
        return groups

    def assemble_group(
        self,
        document: MarkdownFile,
        content_files: Dict[str, str],
        all_authors: Sequence[Author],
        all_guides: Sequence[Guide],
    ) -> QuestionGroup:
        """Resolve a single group document.

        Args:
            document: Group document
            content_files: Pre-loaded content files keyed by path
            all_authors: Every known author
            all_guides: Every known guide

        Returns:
            Resolved QuestionGroup
        """
        group_dir, _ = split_document_path(document.file)
        group_id = document_id(document.file)
        frontmatter = parse_model(QuestionGroupFrontmatter, document.frontmatter, document.file)

        questions = [
            self._resolve_question(group_dir, entry, content_files)
            for entry in frontmatter.questions
        ]

        return QuestionGroup(
            id=group_id,
            file=document.file,
            frontmatter=frontmatter,
            body=document.body,
            questions=questions,
            all_topics=aggregate_topics(questions),
            author=self._find_author(frontmatter.author_id, all_authors, group_id),
            related_guides=resolve_related_guides(frontmatter.related_guides_id, all_guides),
            ending=resolve_ending(group_dir, frontmatter.ending, content_files, self.base_dir),
        )

    def _resolve_question(
        self,
        group_dir: str,
        entry: RawQuestionEntry,
        content_files: Dict[str, str],
    ) -> ResolvedQuestion:
        answer, is_long_answer = resolve_answer(group_dir, entry.answer, content_files, self.base_dir)
        return ResolvedQuestion(
            id=slugify(entry.question, lower=True),
            question=entry.question,
            answer=answer,
            is_long_answer=is_long_answer,
            topics=entry.topics,
        )

    def _find_author(
        self,
        author_id: Optional[str],
        all_authors: Iterable[Author],
        group_id: str,
    ) -> Optional[Author]:
        if not author_id:
            return None

        for author in all_authors:
            if author.id == author_id:
                return author

        logger.warning(f"Question group '{group_id}' references unknown author '{author_id}'")
        return None

    def load_summaries(self, ids: Iterable[str]) -> List[GroupSummary]:
        """Summarize the groups whose id is in ``ids``.

        Only group documents are loaded; content files and registries are
        not touched.

        Args:
            ids: Group identifiers to include

        Returns:
            List of GroupSummary objects in load order
        """
        wanted = set(ids)
        summaries = []

        for path, document in self.load_documents().items():
            group_id = document_id(path)
            if group_id not in wanted:
                continue

            frontmatter = parse_model(QuestionGroupFrontmatter, document.frontmatter, path)
            summaries.append(
                GroupSummary(
                    id=group_id,
                    title=frontmatter.brief_title,
                    description=f"{len(frontmatter.questions)} Questions",
                )
            )

        return summaries
