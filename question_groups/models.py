"""
Data models for question groups.

Python attributes are snake_case; frontmatter and serialized output use
the camelCase keys of the content files (``briefTitle``, ``isLongAnswer``).
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .errors import FrontmatterError

ModelT = TypeVar("ModelT", bound=BaseModel)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SeoMeta(CamelModel):
    model_config = ConfigDict(extra="allow")

    title: str
    description: str
    og_image_url: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)


class SitemapMeta(CamelModel):
    priority: float
    changefreq: str


class RawQuestionEntry(CamelModel):
    """A question as declared in frontmatter."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    question: str
    answer: str  # inline text, or a content file name ending in .md
    topics: Optional[List[str]] = None


class QuestionGroupFrontmatter(CamelModel):
    """Declared metadata of a question group document."""
    model_config = ConfigDict(extra="allow")

    order: int
    brief_title: str
    brief_description: str
    title: str
    description: str
    is_new: bool = False
    author_id: Optional[str] = None
    date: Optional[str] = None
    seo: SeoMeta
    related_title: Optional[str] = None
    related_guides_id: Optional[str] = None
    sitemap: SitemapMeta
    questions: List[RawQuestionEntry]
    ending: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def format_date(cls, value: Any) -> Any:
        # YAML turns unquoted dates into date objects
        if isinstance(value, (date, datetime)):
            return value.isoformat()
        return value


class ResolvedQuestion(CamelModel):
    id: str
    question: str
    answer: str
    is_long_answer: bool
    topics: Optional[List[str]] = None


class Author(CamelModel):
    id: str
    file: str
    frontmatter: Dict[str, Any] = Field(default_factory=dict)
    body: str = ""


class GuideFrontmatter(CamelModel):
    model_config = ConfigDict(extra="allow")

    title: str


class Guide(CamelModel):
    id: str
    file: str
    frontmatter: GuideFrontmatter
    body: str = ""


class QuestionGroup(CamelModel):
    """A fully resolved question group."""
    id: str
    file: str
    frontmatter: QuestionGroupFrontmatter
    body: str = ""
    questions: List[ResolvedQuestion]
    all_topics: List[str]
    author: Optional[Author] = None
    related_guides: Optional[Dict[str, str]] = None
    ending: str = ""


class GroupSummary(CamelModel):
    id: str
    title: str
    description: str


def parse_model(model: Type[ModelT], data: Dict, path: str) -> ModelT:
    """Validate frontmatter data against a model.

    Raises:
        FrontmatterError: If required fields are missing or have the wrong type
    """
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise FrontmatterError(path, f"invalid frontmatter: {exc}") from exc
