"""Logic for rendering the member index tables of an entity page."""

from api_docgen.md_table import md_table
from api_docgen.member_anchor import member_anchor, member_link
from api_docgen.models import Entity, Member


def sorted_members(members: list[Member] | None) -> list[Member] | None:
    """Sort by name (case-sensitive, ascending), keeping ``None`` as absent."""
    if members is None:
        return None
    return sorted(members, key=lambda m: m.name)


def public_members(members: list[Member] | None) -> list[Member]:
    return [m for m in members or [] if not m.is_private]


def _section(
    entity: Entity,
    key: str,
    labels: dict[str, str],
    headers: list[str],
    rows: list[list[str]],
) -> list[str]:
    return [
        f"### {labels[key]}",
        member_anchor(entity.name, key),
        "",
        md_table(headers, rows),
        "",
    ]


def render_methods_index(
    entity: Entity,
    methods: list[Member] | None,
    labels: dict[str, str],
) -> list[str]:
    """Render the method index table."""
    if methods is None:
        return []
    rows = [
        [member_link(entity.name, m.name), m.summary] for m in public_members(methods)
    ]
    headers = [labels["method_name"], labels["description"]]
    return _section(entity, "methods", labels, headers, rows)


def render_properties_index(
    entity: Entity,
    properties: list[Member] | None,
    labels: dict[str, str],
) -> list[str]:
    """Render the property index table."""
    if properties is None:
        return []
    rows = [
        [member_link(entity.name, p.name), p.type, p.summary]
        for p in public_members(properties)
    ]
    headers = [labels["property_name"], labels["type"], labels["description"]]
    return _section(entity, "properties", labels, headers, rows)


def render_consts_table(entity: Entity, labels: dict[str, str]) -> list[str]:
    """Render the constants table."""
    if entity.consts is None:
        return []
    rows = [[c.name, c.description.strip()] for c in public_members(entity.consts)]
    headers = [labels["const_name"], labels["description"]]
    return _section(entity, "consts", labels, headers, rows)


def render_events_table(entity: Entity, labels: dict[str, str]) -> list[str]:
    """Render the events table."""
    if entity.events is None:
        return []
    rows = [
        [e.name, e.type, e.description.strip()] for e in public_members(entity.events)
    ]
    headers = [labels["event_name"], labels["type"], labels["description"]]
    return _section(entity, "events", labels, headers, rows)
