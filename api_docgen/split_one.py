"""Logic for splitting a string on a single pair of delimiters."""

from api_docgen.segment import TEXT, Segment


def split_one(text: str, kind: str, start_tag: str, end_tag: str) -> list[Segment]:
    """Split ``text`` into ``text`` segments and ``kind`` segments.

    Each ``kind`` segment spans one ``start_tag ... end_tag`` match, tags
    included. Matches are non-overlapping and non-nested. A start tag without a
    terminating end tag ends the scan.

    Trailing text after the last match is kept only when
    ``last_end + 1 < len(text)``, so a single trailing character is dropped.
    Downstream output relies on this, so it stays.
    """
    if not start_tag or not end_tag:
        msg = f"Delimiters for {kind!r} must be non-empty"
        raise ValueError(msg)

    segments: list[Segment] = []
    cursor = 0
    last_end = 0
    matched = False

    while True:
        start = text.find(start_tag, cursor)
        if start < 0:
            break
        end = text.find(end_tag, start + len(start_tag))
        if end < 0:
            break
        end += len(end_tag)

        if start > cursor:
            segments.append(Segment(TEXT, text[cursor:start]))
        segments.append(Segment(kind, text[start:end]))

        cursor = last_end = end
        matched = True

    if not matched:
        return [Segment(TEXT, text)]

    if (last_end + 1) < len(text):
        segments.append(Segment(TEXT, text[last_end:]))

    return segments
