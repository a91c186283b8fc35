"""Topic aggregation across the questions of a group."""

from __future__ import annotations

from typing import Iterable, Iterator, List


def iter_topic_lists(questions: Iterable) -> Iterator[Iterable[str]]:
    """Yield the topic list of each item.

    Items may be question records with a ``topics`` attribute or plain
    iterables of topics. Missing lists yield nothing.
    """
    for item in questions:
        topics = getattr(item, "topics", item)
        if topics is None:
            continue
        yield topics


def aggregate_topics(questions: Iterable) -> List[str]:
    """Flatten and deduplicate topics, keeping first-seen order.

    Example:
        >>> aggregate_topics([["a", "b"], ["b", "c"]])
        ['a', 'b', 'c']
        >>> aggregate_topics([["a", ""], None, ["a"]])
        ['a']
    """
    seen = set()
    unique_topics: List[str] = []

    for topics in iter_topic_lists(questions):
        for topic in topics:
            if not topic or topic in seen:
                continue
            seen.add(topic)
            unique_topics.append(topic)

    return unique_topics
