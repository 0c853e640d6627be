"""Logic for splitting a string with an ordered list of delimiter rules."""

from api_docgen.segment import CODE, GRAPHVIZ, TEXT, UML, Segment
from api_docgen.split_one import split_one

# (kind, start tag, end tag), applied in order. Fenced code comes first so its
# contents are never scanned for bare diagrams.
DEFAULT_RULES: tuple[tuple[str, str, str], ...] = (
    (CODE, "```", "```"),
    (GRAPHVIZ, "digraph G {", "}\n"),
    (UML, "@startuml", "@enduml"),
)


def split_all(
    text: str,
    rules: tuple[tuple[str, str, str], ...] = DEFAULT_RULES,
) -> list[Segment]:
    """Split ``text`` into typed segments.

    Each rule only re-splits the segments that are still plain text; segments
    typed by an earlier rule pass through untouched.
    """
    segments = [Segment(TEXT, text)]
    for kind, start_tag, end_tag in rules:
        pending: list[Segment] = []
        for seg in segments:
            if seg.kind == TEXT:
                pending.extend(split_one(seg.content, kind, start_tag, end_tag))
            else:
                pending.append(seg)
        segments = pending
    return segments
