#!/usr/bin/env python3
"""
Export assembled question groups as JSON.

Usage:
    question-groups list
    question-groups show nodejs
    question-groups summary nodejs react
    question-groups --content-root path/to/data list --verbose
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import CONTENT_ROOT, LOG_FORMAT, LOG_LEVEL, QUESTION_GROUPS_DIR
from .errors import QuestionGroupError
from .lookup import QuestionGroupRepository

logger = logging.getLogger(__name__)


def _dump(data) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


async def _run(args: argparse.Namespace) -> int:
    repository = QuestionGroupRepository.from_content_root(
        args.content_root, groups_dir=args.groups_dir
    )

    if args.command == "list":
        groups = await repository.get_all()
        print(_dump([group.model_dump(by_alias=True, mode="json") for group in groups]))
        return 0

    if args.command == "show":
        group = await repository.get_by_id(args.id)
        if group is None:
            print(f"✗ Question group not found: {args.id}", file=sys.stderr)
            return 1
        print(_dump(group.model_dump(by_alias=True, mode="json")))
        return 0

    summaries = await repository.get_by_ids(args.ids)
    print(_dump([summary.model_dump(by_alias=True, mode="json") for summary in summaries]))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="question-groups",
        description="Assemble question groups from markdown content and print them as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # All groups, fully resolved
    question-groups list

    # One group by id
    question-groups show nodejs

    # Brief summaries of several groups
    question-groups summary nodejs react
        """
    )

    parser.add_argument(
        "--content-root",
        type=Path,
        default=CONTENT_ROOT,
        help=f"Root of the content tree (default: {CONTENT_ROOT})"
    )

    parser.add_argument(
        "--groups-dir",
        default=QUESTION_GROUPS_DIR,
        help=f"Question group directory under the content root (default: {QUESTION_GROUPS_DIR})"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="Print every question group")

    show = subparsers.add_parser("show", help="Print one question group")
    show.add_argument("id", help="Question group id (file name without .md)")

    summary = subparsers.add_parser("summary", help="Print summaries of selected groups")
    summary.add_argument("ids", nargs="*", help="Question group ids")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format=LOG_FORMAT,
    )

    try:
        return asyncio.run(_run(args))
    except QuestionGroupError as exc:
        logger.error(f"Failed to assemble question groups: {exc}")
        print(f"✗ Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
