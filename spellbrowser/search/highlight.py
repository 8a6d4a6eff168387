"""Case-insensitive emphasis of query matches inside labels.

Matching compares code point windows after lowercasing, so the original
casing of the label survives and multi-byte characters are never split.
"""

from __future__ import annotations

MATCH_START = "\033[1;31m"
MATCH_END = "\033[22;39m"


def match_spans(text: str, query: str) -> list[tuple[int, int]]:
    """Return non-overlapping ``(start, end)`` spans of ``query`` in ``text``.

    Spans are scanned left to right and measured in code points of ``text``.
    """
    if not text or not query:
        return []
    folded_query = query.lower()
    width = len(query)
    spans: list[tuple[int, int]] = []
    idx = 0
    limit = len(text) - width
    while idx <= limit:
        if text[idx : idx + width].lower() == folded_query:
            spans.append((idx, idx + width))
            idx += width
            continue
        idx += 1
    return spans


def highlight(text: str, query: str, *, start: str = MATCH_START, end: str = MATCH_END) -> str:
    """Wrap every occurrence of ``query`` in ``text`` with emphasis markers.

    Returns ``text`` unchanged for an empty query or when nothing matches.
    """
    spans = match_spans(text, query)
    if not spans:
        return text

    out: list[str] = []
    cursor = 0
    for span_start, span_end in spans:
        out.append(text[cursor:span_start])
        out.append(start)
        out.append(text[span_start:span_end])
        out.append(end)
        cursor = span_end
    out.append(text[cursor:])
    return "".join(out)
