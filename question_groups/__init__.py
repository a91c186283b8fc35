"""
Question group aggregation.

This module provides functionality for:
- Loading question group documents with YAML frontmatter
- Merging long-form answers and endings from content files
- Deduplicating topics and resolving related guides and authors
- Querying the assembled groups by id

Content structure:
    <content root>/
        question-groups/
            <groupDir>/<groupId>.md      - Group document
            <groupDir>/content/*.md      - Long-form answers and endings
        authors/*.md                     - Author records
        guides/*.md                      - Guide records (frontmatter title)

Usage:
    import asyncio
    from question_groups import QuestionGroupRepository

    repository = QuestionGroupRepository.from_content_root(Path("src/data"))
    groups = asyncio.run(repository.get_all())
    summaries = asyncio.run(repository.get_by_ids(["nodejs"]))
"""

from .answers import resolve_answer, resolve_ending
from .assembler import QuestionGroupAssembler
from .content_source import FileContentSource, MarkdownFile, extract_frontmatter
from .errors import FrontmatterError, QuestionGroupError
from .lookup import (
    QuestionGroupRepository,
    get_all_question_groups,
    get_question_group_by_id,
    get_question_groups_by_ids,
)
from .models import (
    Author,
    GroupSummary,
    Guide,
    QuestionGroup,
    QuestionGroupFrontmatter,
    RawQuestionEntry,
    ResolvedQuestion,
)
from .registries import MarkdownAuthorRegistry, MarkdownGuideRegistry
from .related import resolve_related_guides
from .slug import slugify
from .topics import aggregate_topics

__all__ = [
    "resolve_answer",
    "resolve_ending",
    "QuestionGroupAssembler",
    "FileContentSource",
    "MarkdownFile",
    "extract_frontmatter",
    "FrontmatterError",
    "QuestionGroupError",
    "QuestionGroupRepository",
    "get_all_question_groups",
    "get_question_group_by_id",
    "get_question_groups_by_ids",
    "Author",
    "GroupSummary",
    "Guide",
    "QuestionGroup",
    "QuestionGroupFrontmatter",
    "RawQuestionEntry",
    "ResolvedQuestion",
    "MarkdownAuthorRegistry",
    "MarkdownGuideRegistry",
    "resolve_related_guides",
    "slugify",
    "aggregate_topics",
]

__version__ = "1.0.0"
