"""Text helpers for page labels."""

import re

_COUNTED_LABEL = re.compile(r"\d+\s(\w+)")


def extract_word(text: str) -> str:
    """
    Return the lower-cased word that follows a number in ``text``.

    Tab labels render as "<count> <Kind>", e.g. "3 Upgrades" -> "upgrades".
    Returns an empty string when the text has no such word.
    """
    match = _COUNTED_LABEL.search(text)
    return match.group(1).lower() if match else ""
