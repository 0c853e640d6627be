"""Logic for turning embedded diagram blocks into image references."""

from api_docgen.escape_underscores import escape_underscores
from api_docgen.image_context import ImageContext
from api_docgen.segment import CODE, GRAPHVIZ, TEXT, UML, Segment
from api_docgen.split_all import split_all

GRAPHVIZ_FENCE = "```graphviz"
UML_FENCE = "```uml"
FENCE = "```"


def classify_code(seg: Segment) -> Segment:
    """Reclassify a fenced block tagged ``graphviz`` or ``uml`` as a diagram.

    The fences are swapped for the diagram language's own opening and closing
    tokens. Detection is a plain substring search, not anchored to the fence.
    """
    data = seg.content
    if GRAPHVIZ_FENCE in data:
        data = data.replace(GRAPHVIZ_FENCE, "digraph G {", 1)
        return Segment(GRAPHVIZ, data.replace(FENCE, "}", 1))
    if UML_FENCE in data:
        data = data.replace(UML_FENCE, "@startuml", 1)
        return Segment(UML, data.replace(FENCE, "@enduml", 1))
    return seg


def preprocess(text: str, entity_name: str, context: ImageContext) -> str:
    """Extract diagrams from ``text`` and escape its narrative parts.

    Every graphviz or UML block is written to a side file through ``context``
    and replaced by a Markdown image reference. Plain fenced code is kept
    verbatim and underscores are escaped in the remaining text.
    """
    out = []
    for seg in split_all(text):
        if seg.kind == CODE:
            seg = classify_code(seg)

        if seg.kind == GRAPHVIZ:
            out.append(context.write_graphviz(entity_name, seg.content))
        elif seg.kind == UML:
            out.append(context.write_uml(entity_name, seg.content))
        elif seg.kind == TEXT:
            out.append(escape_underscores(seg.content))
        else:
            out.append(seg.content)
    return "".join(out)
