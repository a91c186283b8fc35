"""
Content source for question group documents.

Loads markdown documents with YAML frontmatter and raw content files
from a content tree.

Format:
---
order: 1
briefTitle: Node.js
questions:
  - question: What is Node.js?
    answer: what-is-node.md
    topics:
      - Basics
---
Optional markdown body
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Protocol, Tuple

import yaml

from .errors import FrontmatterError

logger = logging.getLogger(__name__)

FRONTMATTER_PATTERN = re.compile(r'\A---[ \t]*\n(.*?)^---[ \t]*$\n?', re.DOTALL | re.MULTILINE)

BOOL_TAG = "tag:yaml.org,2002:bool"


class FrontmatterLoader(yaml.SafeLoader):
    """SafeLoader that only reads true/false as booleans.

    Plain YAML 1.1 also turns yes/no/on/off into booleans, which breaks
    inline answers such as ``answer: Yes``.
    """


FrontmatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
FrontmatterLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


@dataclass
class MarkdownFile:
    """A markdown document split into frontmatter and body."""
    file: str
    frontmatter: Dict = field(default_factory=dict)
    body: str = ""


class ContentSource(Protocol):
    """Pattern-addressed, eagerly loaded content."""

    def load_documents(self, pattern: str) -> Dict[str, MarkdownFile]:
        ...

    def load_raw(self, pattern: str) -> Dict[str, str]:
        ...


def extract_frontmatter(content: str, path: str = "unknown") -> Tuple[Dict, str]:
    """Split markdown content into frontmatter and body.

    Args:
        content: Markdown content, optionally starting with a ``---`` block
        path: Document path (for error reporting)

    Returns:
        Tuple of (frontmatter dict, body without the frontmatter block)

    Raises:
        FrontmatterError: If the block is not valid YAML or not a mapping

    Example:
        >>> meta, body = extract_frontmatter('---\\norder: 1\\n---\\n# Title\\n')
        >>> meta['order']
        1
        >>> body
        '# Title\\n'
    """
    content = content.lstrip('\ufeff')
    match = FRONTMATTER_PATTERN.match(content)

    if not match:
        return {}, content

    try:
        frontmatter = yaml.load(match.group(1), Loader=FrontmatterLoader)
    except yaml.YAMLError as exc:
        raise FrontmatterError(path, f"invalid YAML frontmatter: {exc}") from exc

    if frontmatter is None:
        frontmatter = {}
    elif not isinstance(frontmatter, dict):
        raise FrontmatterError(
            path, f"frontmatter must be a mapping, got: {type(frontmatter).__name__}"
        )

    return frontmatter, content[match.end():]


def split_document_path(path: str) -> Tuple[str, str]:
    """Return the (parent directory name, file name) of a document path."""
    parts = path.split('/')
    if len(parts) < 2:
        return "", parts[-1]
    return parts[-2], parts[-1]


def strip_suffix(name: str, suffix: str = ".md") -> str:
    if name.endswith(suffix):
        return name[:-len(suffix)]
    return name


def document_id(path: str) -> str:
    """Identifier of a document: its file name without the ``.md`` extension."""
    return strip_suffix(split_document_path(path)[1])


class FileContentSource:
    """Loads content from a directory tree on disk.

    Keys are absolute-style posix paths relative to the root, e.g.
    ``/question-groups/nodejs/nodejs.md``.
    """

    def __init__(self, root: Path):
        """Initialize content source.

        Args:
            root: Root directory of the content tree (e.g., src/data)
        """
        self.root = Path(root)

    def _key(self, path: Path) -> str:
        return "/" + path.relative_to(self.root).as_posix()

    def _matching_files(self, pattern: str):
        if not self.root.exists():
            logger.warning(f"Content root not found: {self.root}")
            return []
        return [p for p in sorted(self.root.glob(pattern)) if p.is_file()]

    def load_documents(self, pattern: str) -> Dict[str, MarkdownFile]:
        documents = {}
        for path in self._matching_files(pattern):
            key = self._key(path)
            frontmatter, body = extract_frontmatter(path.read_text(encoding='utf-8'), key)
            documents[key] = MarkdownFile(file=key, frontmatter=frontmatter, body=body)

        logger.debug(f"Loaded {len(documents)} document(s) for '{pattern}'")
        return documents

    def load_raw(self, pattern: str) -> Dict[str, str]:
        files = {
            self._key(path): path.read_text(encoding='utf-8')
            for path in self._matching_files(pattern)
        }
        logger.debug(f"Loaded {len(files)} raw file(s) for '{pattern}'")
        return files
