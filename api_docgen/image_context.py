"""Per-entity state for diagram extraction."""

import logging
from dataclasses import dataclass
from pathlib import Path

from api_docgen.md_table import unescape_cell

logger = logging.getLogger(__name__)

GRAPHVIZ_DEFAULT_STYLE = """
    rankdir  = BT
    fontname = "Courier New"
    fontsize = 12

    node [
        fontname = "Courier New"
        fontsize = 12
        shape    = "record"
        width = 0.4
    ]
"""


@dataclass
class ImageContext:
    """Counter and output locations for the diagrams of one entity.

    Create a fresh context for every entity so image numbering restarts at 0.
    Graphviz and UML diagrams share the same counter.
    """

    dots_dir: Path
    umls_dir: Path
    images_ref: str = "images"  # relative path used in Markdown image links
    default_style: str = GRAPHVIZ_DEFAULT_STYLE
    next_index: int = 0

    def claim_name(self, entity_name: str) -> str:
        """Return the next ``<entity>_<n>`` base name and advance the counter."""
        name = f"{entity_name}_{self.next_index}"
        self.next_index += 1
        return name

    def image_ref(self, name: str) -> str:
        """Markdown image reference for the rendered diagram ``name``."""
        return f"![image]({self.images_ref}/{name}.png)\n"

    def write_graphviz(self, entity_name: str, source: str) -> str:
        """Write a graph description file and return its image reference.

        Line breaks and pipes escaped for a table cell are restored first.
        """
        name = self.claim_name(entity_name)
        dot = unescape_cell(source).replace("[default_style]", self.default_style)
        path = self.dots_dir / name
        path.write_text(dot, encoding="utf-8")
        logger.debug("Wrote graphviz source %s", path)
        return self.image_ref(name)

    def write_uml(self, entity_name: str, source: str) -> str:
        """Write a UML source file and return its image reference.

        Line breaks and pipes escaped for a table cell are restored first.
        """
        name = self.claim_name(entity_name)
        path = self.umls_dir / f"{name}.uml"
        path.write_text(unescape_cell(source), encoding="utf-8")
        logger.debug("Wrote UML source %s", path)
        return self.image_ref(name)
