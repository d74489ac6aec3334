from typing import List, Optional

TOKEN_SEPARATOR = "|"
KIND_SEPARATOR = "-"


def expand_tags(categories: Optional[str]) -> List[str]:
    """
    Expand a serpapi categories string into tag values.

    Each `|`-separated token is split on its first `-` into a kind and a value.
    Only the trimmed value is kept; tokens with an empty kind or value are dropped
    and values repeat only once, in order of first appearance.
    """
    if not categories or not categories.strip():
        return []

    tags = []
    seen = set()
    for token in categories.split(TOKEN_SEPARATOR):
        parts = token.split(KIND_SEPARATOR, 1)
        if len(parts) != 2:
            continue
        kind, value = parts[0].strip(), parts[1].strip()
        if not kind or not value:
            continue
        if value in seen:
            continue
        seen.add(value)
        tags.append(value)
    return tags
