"""
Tests for the JSON export command line.
"""

from __future__ import annotations

import json
from pathlib import Path

from question_groups.cli import main

from conftest import write_markdown


def test_list_prints_all_groups(content_root: Path, capsys):
    assert main(["--content-root", str(content_root), "list"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert [group["id"] for group in data] == ["react", "nodejs"]
    assert data[1]["allTopics"] == ["Basics", "Runtime", "Async"]


def test_show_prints_one_group(content_root: Path, capsys):
    assert main(["--content-root", str(content_root), "show", "nodejs"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["id"] == "nodejs"
    assert data["ending"] == "Good luck!\n"


def test_show_unknown_group_fails(content_root: Path, capsys):
    assert main(["--content-root", str(content_root), "show", "missing-id"]) == 1

    assert "missing-id" in capsys.readouterr().err


def test_summary(content_root: Path, capsys):
    assert main(["--content-root", str(content_root), "summary", "react"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data == [{"id": "react", "title": "React", "description": "2 Questions"}]


def test_invalid_frontmatter_exits_with_error(tmp_path: Path, capsys):
    write_markdown(tmp_path / "question-groups" / "bad" / "bad.md", {"order": "first"})

    assert main(["--content-root", str(tmp_path), "list"]) == 1

    assert "bad.md" in capsys.readouterr().err
