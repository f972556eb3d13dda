"""Deduplication and capping of usage examples."""

import re
from typing import List

from gemreadme.config import MAX_USAGE_EXAMPLES
from gemreadme.schemas import UsageExample

WHITESPACE_PATTERN = re.compile(r'\s+')


def dedupe_key(code: str) -> str:
    """Code with every whitespace run collapsed to one space."""
    return WHITESPACE_PATTERN.sub(' ', code).strip()


def deduplicate_examples(examples: List[UsageExample], limit: int = MAX_USAGE_EXAMPLES) -> List[UsageExample]:
    """
    Keep the first example per normalized code body, then cap the list.

    Args:
        examples: Examples in document order
        limit: Maximum number of examples to keep

    Returns:
        Unique examples in original order, at most `limit` of them
    """
    seen = set()
    unique = []

    for example in examples:
        key = dedupe_key(example.code)
        if key not in seen:
            seen.add(key)
            unique.append(example)

    return unique[:limit]
