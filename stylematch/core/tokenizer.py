"""Free-text tokenization for catalog queries."""

import re
from typing import Iterable

# Runs of letters/digits; underscore counts as a separator.
_TOKEN_PATTERN = re.compile(r"[^\W_]+")


def tokenize(text: str) -> frozenset[str]:
    """Split text into a set of lower-cased alphanumeric tokens.

    No stemming or stop-word removal is applied.

    Args:
        text: Arbitrary query text

    Returns:
        Set of tokens, empty for empty or whitespace-only input
    """
    if not text:
        return frozenset()
    return frozenset(_TOKEN_PATTERN.findall(text.lower()))


def reference_tags(query: str, selected_tags: Iterable[str] = ()) -> frozenset[str]:
    """Combine query tokens with quick-tag selections into reference tags.

    Args:
        query: Free-text query
        selected_tags: Tags picked from the quick-tag list

    Returns:
        Union of the query tokens and the lower-cased selected tags
    """
    selected = {tag.strip().lower() for tag in selected_tags if tag.strip()}
    return tokenize(query) | selected
