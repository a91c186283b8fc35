"""
Configuration for the question group pipeline.

Values come from environment variables; a ``.env`` file next to the
project root is loaded first when present.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent

env_path = BASE_DIR / ".env"
if env_path.exists():
    load_dotenv(env_path)
    logger.debug(f"Loaded environment from {env_path}")

# ============================================================================
# Content layout
# ============================================================================

CONTENT_ROOT = Path(os.environ.get("CONTENT_ROOT", str(BASE_DIR / "src" / "data")))
QUESTION_GROUPS_DIR = os.environ.get("QUESTION_GROUPS_DIR", "question-groups")
AUTHORS_PATTERN = os.environ.get("AUTHORS_PATTERN", "authors/*.md")
GUIDES_PATTERN = os.environ.get("GUIDES_PATTERN", "guides/*.md")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ============================================================================
# Content conventions
# ============================================================================

LONG_ANSWER_SUFFIX = ".md"
MISSING_FILE_PREFIX = "File missing: "
GUIDE_URL_PREFIX = "/guides/"


def question_groups_base_dir(groups_dir: str = QUESTION_GROUPS_DIR) -> str:
    """Return the absolute-style key prefix of the question group tree."""
    return "/" + groups_dir.strip("/")
