import sys
from pathlib import Path
from typing import Dict, Optional

import pytest
import yaml

# Make the package importable without installing it
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())


def write_markdown(path: Path, frontmatter: Optional[Dict] = None, body: str = "") -> Path:
    """Write a markdown file with an optional YAML frontmatter block."""
    path.parent.mkdir(parents=True, exist_ok=True)
    text = body
    if frontmatter is not None:
        text = "---\n" + yaml.safe_dump(frontmatter, sort_keys=False) + "---\n" + body
    path.write_text(text, encoding="utf-8")
    return path


def group_frontmatter(order: int, brief_title: str, questions, **extra) -> Dict:
    frontmatter = {
        "order": order,
        "briefTitle": brief_title,
        "briefDescription": f"{brief_title} questions",
        "title": f"Top {brief_title} Interview Questions",
        "description": f"Prepare for your {brief_title} interview",
        "isNew": False,
        "seo": {
            "title": f"{brief_title} Questions",
            "description": f"{brief_title} interview questions",
            "keywords": [brief_title.lower()],
        },
        "sitemap": {"priority": 1, "changefreq": "monthly"},
        "questions": questions,
    }
    frontmatter.update(extra)
    return frontmatter


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """A small content tree with two question groups, an author and a guide."""
    groups = tmp_path / "question-groups"

    write_markdown(
        groups / "nodejs" / "nodejs.md",
        group_frontmatter(
            2,
            "Node.js",
            [
                {
                    "question": "What is Node.js?",
                    "answer": "A JavaScript runtime.",
                    "topics": ["Basics", "Runtime"],
                },
                {
                    "question": "How does the Event Loop work?",
                    "answer": "event-loop.md",
                    "topics": ["Runtime", "Async"],
                },
                {
                    "question": "What are Streams?",
                    "answer": "streams.md",
                    "topics": [],
                },
            ],
            authorId="kamran",
            relatedTitle="Other Guides",
            relatedGuidesId="nodejs-guide",
            ending="ending.md",
        ),
        body="Node.js question bank.\n",
    )
    write_markdown(groups / "nodejs" / "content" / "event-loop.md", body="The event loop polls for I/O.\n")
    write_markdown(groups / "nodejs" / "content" / "ending.md", body="Good luck!\n")

    write_markdown(
        groups / "react" / "react.md",
        group_frontmatter(
            1,
            "React",
            [
                {"question": "What is JSX?", "answer": "A syntax extension.", "topics": ["Basics"]},
                {"question": "What are Hooks?", "answer": "Functions for state.", "topics": ["Hooks"]},
            ],
        ),
    )

    write_markdown(
        tmp_path / "authors" / "kamran.md",
        {"name": "Kamran Ahmed", "imageUrl": "/authors/kamran.jpeg"},
        body="Founder.\n",
    )
    write_markdown(tmp_path / "guides" / "nodejs-guide.md", {"title": "Node.js Guide"})
    write_markdown(tmp_path / "guides" / "react-guide.md", {"title": "React Guide"})

    return tmp_path
