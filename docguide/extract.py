from __future__ import annotations


def extract_between(text: str, start: str, end: str) -> str:
    """Return the text between the first ``start`` and the last ``end``.

    Missing delimiters, or an ``end`` that does not come after ``start``,
    yield an empty string.
    """

    first = text.find(start)
    if first < 0:
        return ""

    last = text.rfind(end)
    if last < 0:
        return ""

    begin = first + len(start)
    if last <= begin:
        return ""
    return text[begin:last]
