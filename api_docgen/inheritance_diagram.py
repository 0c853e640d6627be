"""Logic for the inheritance diagram shown in a class overview."""


def inheritance_diagram(name: str, parent: str) -> str:
    """Fenced graphviz block drawing an edge from ``name`` to ``parent``.

    The block is later extracted to a side file like any other diagram in a
    description.
    """
    return f"""```graphviz
[default_style]
{name} -> {parent} [arrowhead = "empty"]
```"""
