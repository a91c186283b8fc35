"""
Unit tests for answer and ending resolution.
"""

from __future__ import annotations

from question_groups.answers import content_file_path, resolve_answer, resolve_ending

BASE_DIR = "/question-groups"
ANSWER_FILES = {
    "/question-groups/nodejs/content/event-loop.md": "The event loop polls for I/O.",
    "/question-groups/nodejs/content/ending.md": "Good luck!",
    "/question-groups/nodejs/content/empty.md": "",
}


def test_inline_answer_is_returned_unchanged():
    assert resolve_answer("nodejs", "A JavaScript runtime.", ANSWER_FILES, BASE_DIR) == (
        "A JavaScript runtime.",
        False,
    )


def test_long_answer_is_read_from_content_file():
    assert resolve_answer("nodejs", "event-loop.md", ANSWER_FILES, BASE_DIR) == (
        "The event loop polls for I/O.",
        True,
    )


def test_missing_long_answer_yields_placeholder():
    text, is_long_answer = resolve_answer("nodejs", "streams.md", ANSWER_FILES, BASE_DIR)

    assert text == "File missing: /question-groups/nodejs/content/streams.md"
    assert is_long_answer is True


def test_empty_content_file_counts_as_missing():
    text, is_long_answer = resolve_answer("nodejs", "empty.md", ANSWER_FILES, BASE_DIR)

    assert text == "File missing: /question-groups/nodejs/content/empty.md"
    assert is_long_answer is True


def test_answer_lookup_is_scoped_to_group_directory():
    text, _ = resolve_answer("react", "event-loop.md", ANSWER_FILES, BASE_DIR)

    assert text == "File missing: /question-groups/react/content/event-loop.md"


def test_content_file_path_layout():
    assert content_file_path("nodejs", "a.md", "/src/data/question-groups") == (
        "/src/data/question-groups/nodejs/content/a.md"
    )


def test_resolve_ending():
    assert resolve_ending("nodejs", "ending.md", ANSWER_FILES, BASE_DIR) == "Good luck!"
    assert resolve_ending("nodejs", None, ANSWER_FILES, BASE_DIR) == ""
    assert resolve_ending("nodejs", "", ANSWER_FILES, BASE_DIR) == ""
    assert resolve_ending("nodejs", "bye.md", ANSWER_FILES, BASE_DIR) == (
        "File missing: /question-groups/nodejs/content/bye.md"
    )
