"""Exceptions raised by the question group pipeline."""

from __future__ import annotations


class QuestionGroupError(Exception):
    """Base exception for question group loading errors."""
    pass


class FrontmatterError(QuestionGroupError, ValueError):
    """Exception raised when a document's frontmatter is invalid."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")
