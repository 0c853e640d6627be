"""Orchestration logic for generating Markdown pages from the IDL JSON."""

import logging
from pathlib import Path
from typing import Any

from api_docgen.load_entities import load_entities
from api_docgen.write_entity_pages import write_entity_pages

logger = logging.getLogger(__name__)

DEFAULT_INPUT = Path("../idl_gen/idl.json")


def run_generation(
    config: dict[str, Any],
    out_root: Path = Path(),
    input_path: Path | None = None,
) -> int:
    """Execute the full generation pipeline."""
    source = input_path if input_path is not None else out_root / DEFAULT_INPUT
    logger.info("Reading entities from %s", source)
    entities = load_entities(source)

    written = write_entity_pages(entities, config, out_root)
    skipped = len(entities) - written
    if skipped:
        logger.info("Skipped %d entities of unsupported type", skipped)

    print(f"Generated {written} Markdown pages into: {(out_root / 'docs').resolve()}")
    return 0
