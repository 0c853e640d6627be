"""Typed pieces of a description string produced by the segmenter."""

from dataclasses import dataclass

TEXT = "text"
CODE = "code"
GRAPHVIZ = "graphviz"
UML = "uml"

DIAGRAM_KINDS = frozenset({GRAPHVIZ, UML})


@dataclass(frozen=True)
class Segment:
    """A contiguous substring of the input tagged with the kind of content it holds."""

    kind: str  # text/code/graphviz/uml
    content: str
