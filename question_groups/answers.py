"""
Answer resolution for question groups.

An answer is either inline text or the name of a markdown file stored in
the group's ``content/`` directory. Unresolvable references never raise;
they resolve to a visible ``File missing: <path>`` placeholder.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from .config import LONG_ANSWER_SUFFIX, MISSING_FILE_PREFIX, question_groups_base_dir

logger = logging.getLogger(__name__)

DEFAULT_BASE_DIR = question_groups_base_dir()


def content_file_path(question_group_dir: str, file_name: str, base_dir: str = DEFAULT_BASE_DIR) -> str:
    """Build the path of a file in a group's content directory.

    Example:
        >>> content_file_path("nodejs", "event-loop.md", "/question-groups")
        '/question-groups/nodejs/content/event-loop.md'
    """
    return f"{base_dir}/{question_group_dir}/content/{file_name}"


def is_long_answer(answer: str) -> bool:
    return answer.endswith(LONG_ANSWER_SUFFIX)


def missing_file_text(path: str) -> str:
    return f"{MISSING_FILE_PREFIX}{path}"


def read_content_file(path: str, answer_files: Dict[str, str]) -> str:
    """Return the text stored at ``path``, or the missing-file placeholder."""
    text = answer_files.get(path)
    if not text:
        logger.warning(f"Content file missing: {path}")
        return missing_file_text(path)
    return text


def resolve_answer(
    question_group_dir: str,
    answer: str,
    answer_files: Dict[str, str],
    base_dir: str = DEFAULT_BASE_DIR,
) -> Tuple[str, bool]:
    """Resolve a question's answer field.

    Args:
        question_group_dir: Directory name of the question group
        answer: Inline answer text or a content file name
        answer_files: Pre-loaded content files keyed by path
        base_dir: Key prefix of the question group tree

    Returns:
        Tuple of (answer text, True if the answer came from a content file)

    Example:
        >>> resolve_answer("nodejs", "Yes", {})
        ('Yes', False)
        >>> resolve_answer("nodejs", "gone.md", {}, "/question-groups")
        ('File missing: /question-groups/nodejs/content/gone.md', True)
    """
    if not is_long_answer(answer):
        return answer, False

    path = content_file_path(question_group_dir, answer, base_dir)
    return read_content_file(path, answer_files), True


def resolve_ending(
    question_group_dir: str,
    ending: Optional[str],
    answer_files: Dict[str, str],
    base_dir: str = DEFAULT_BASE_DIR,
) -> str:
    """Resolve the closing text of a group; empty when none is declared."""
    if not ending:
        return ""

    path = content_file_path(question_group_dir, ending, base_dir)
    return read_content_file(path, answer_files)
