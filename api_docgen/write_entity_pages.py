"""Logic for writing entity pages and their diagram sources to disk."""

from pathlib import Path
from typing import Any

from api_docgen.image_context import ImageContext
from api_docgen.labels import resolve_labels
from api_docgen.models import Entity
from api_docgen.preprocess import preprocess
from api_docgen.render_entity_page import render_entity_page


def write_entity_pages(
    entities: list[Entity],
    config: dict[str, Any],
    out_root: Path,
) -> int:
    """Write ``docs/<name>.md`` for every class and enum in ``entities``.

    Diagram sources go to ``dots/`` and ``umls/``. Returns the number of pages
    written.
    """
    labels = resolve_labels(config)
    docs_dir = out_root / "docs"
    dots_dir = out_root / "dots"
    umls_dir = out_root / "umls"
    for d in (docs_dir, dots_dir, umls_dir):
        d.mkdir(parents=True, exist_ok=True)

    written = 0
    total = len(entities)
    print(f"Writing pages for {total} entities...")
    for entity in entities:
        md = render_entity_page(entity, labels)
        if md is None:
            continue
        context = ImageContext(
            dots_dir=dots_dir,
            umls_dir=umls_dir,
            default_style=config["graphviz_default_style"],
        )
        text = preprocess(md, entity.name, context)
        (docs_dir / f"{entity.name}.md").write_text(text, encoding="utf-8")
        written += 1
        if written % 50 == 0:
            print(f"  ... wrote {written}/{total} pages")
    return written
