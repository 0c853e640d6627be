"""Utility for generating Markdown tables."""

CELL_BREAK = "<br>"
CELL_PIPE = "\\|"


def md_cell(value: str) -> str:
    """Make ``value`` safe for a single table cell."""
    return value.strip().replace("|", CELL_PIPE).replace("\n", CELL_BREAK)


def unescape_cell(value: str) -> str:
    """Undo :func:`md_cell` for diagram sources lifted out of a table cell."""
    return value.replace(CELL_BREAK, "\n").replace(CELL_PIPE, "|")


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table.

    The header is emitted even without rows so an index section always shows
    its column layout.
    """
    out = [
        "| " + " | ".join(md_cell(h) for h in headers) + " |",
        "| " + " | ".join(["--------"] * len(headers)) + " |",
    ]
    out.extend("| " + " | ".join(md_cell(c) for c in r) + " |" for r in rows)
    return "\n".join(out)
