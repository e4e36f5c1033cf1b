"""Case conversion for tag names and generated identifiers."""

import re
from typing import List

# Words split on case changes, digit runs and any non-alphanumeric separator
_WORD_RE = re.compile(r"[A-Z]?[a-z]+|[A-Z]+(?![a-z])|\d+")


def split_words(text: str) -> List[str]:
    return _WORD_RE.findall(text)


def dash_case(text: str) -> str:
    """Convert a tag or property name to dash-case.

    Example:
        MyButton -> my-button
        backgroundColor -> background-color
        h1 -> h1
    """
    # Keep letters and trailing digits together so h1 stays h1
    words = re.findall(r"[A-Z]?[a-z]+\d*|[A-Z]+(?![a-z])\d*|\d+", text)
    return "-".join(word.lower() for word in words)


def camel_case(text: str) -> str:
    """Convert text to lowerCamelCase (on-div-1-click -> onDiv1Click)."""
    words = split_words(text)
    if not words:
        return ""
    head, *rest = words
    return head.lower() + "".join(word[:1].upper() + word[1:].lower() for word in rest)
