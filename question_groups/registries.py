"""
Author and guide registries.

Both registries are backed by markdown documents; a record's id is its
file name without the extension.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from .config import AUTHORS_PATTERN, GUIDES_PATTERN
from .content_source import ContentSource, document_id
from .errors import FrontmatterError
from .models import Author, Guide, GuideFrontmatter, parse_model

logger = logging.getLogger(__name__)


class AuthorRegistry(Protocol):
    async def get_all(self) -> List[Author]:
        ...


class GuideRegistry(Protocol):
    async def get_all(self) -> List[Guide]:
        ...


class MarkdownAuthorRegistry:
    """Authors loaded from ``authors/*.md``."""

    def __init__(self, source: ContentSource, pattern: str = AUTHORS_PATTERN):
        self.source = source
        self.pattern = pattern

    async def get_all(self) -> List[Author]:
        documents = self.source.load_documents(self.pattern)
        authors = [
            Author(
                id=document_id(path),
                file=path,
                frontmatter=document.frontmatter,
                body=document.body,
            )
            for path, document in documents.items()
        ]
        logger.debug(f"Loaded {len(authors)} author(s)")
        return authors

    async def get_by_id(self, author_id: str) -> Optional[Author]:
        for author in await self.get_all():
            if author.id == author_id:
                return author
        return None


class MarkdownGuideRegistry:
    """Guides loaded from ``guides/*.md``. Guides without a ``title`` are skipped."""

    def __init__(self, source: ContentSource, pattern: str = GUIDES_PATTERN):
        self.source = source
        self.pattern = pattern

    async def get_all(self) -> List[Guide]:
        documents = self.source.load_documents(self.pattern)
        guides = []
        for path, document in documents.items():
            try:
                frontmatter = parse_model(GuideFrontmatter, document.frontmatter, path)
            except FrontmatterError as exc:
                logger.warning(f"Skipping guide: {exc}")
                continue
            guides.append(
                Guide(id=document_id(path), file=path, frontmatter=frontmatter, body=document.body)
            )
        logger.debug(f"Loaded {len(guides)} guide(s)")
        return guides

    async def get_by_id(self, guide_id: str) -> Optional[Guide]:
        for guide in await self.get_all():
            if guide.id == guide_id:
                return guide
        return None
