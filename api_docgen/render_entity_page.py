"""Logic for rendering the documentation page of one entity."""

import logging

from api_docgen.inheritance_diagram import inheritance_diagram
from api_docgen.models import Entity
from api_docgen.render_indexes import (
    public_members,
    render_consts_table,
    render_events_table,
    render_methods_index,
    render_properties_index,
    sorted_members,
)
from api_docgen.render_members import render_method_detail, render_property_detail

logger = logging.getLogger(__name__)


def _render_overview(entity: Entity, labels: dict[str, str]) -> list[str]:
    parts = [f"## {entity.name}", f"### {labels['overview']}", ""]
    if entity.description:
        parts += [entity.description, ""]
    return parts


def render_class_page(entity: Entity, labels: dict[str, str]) -> str:
    """Render a class page: overview, index tables, then member details."""
    parts = _render_overview(entity, labels)
    if entity.parent:
        parts += [inheritance_diagram(entity.name, entity.parent), ""]

    methods = sorted_members(entity.methods)
    properties = sorted_members(entity.properties)

    parts.extend(render_methods_index(entity, methods, labels))
    parts.extend(render_properties_index(entity, properties, labels))
    parts.extend(render_consts_table(entity, labels))
    parts.extend(render_events_table(entity, labels))

    for m in public_members(methods):
        parts.extend(render_method_detail(entity, m, labels))
    for p in public_members(properties):
        parts.extend(render_property_detail(entity, p, labels))

    return "\n".join(parts).rstrip() + "\n"


def render_enum_page(entity: Entity, labels: dict[str, str]) -> str:
    """Render an enum page: overview and constants only."""
    parts = _render_overview(entity, labels)
    if entity.annotation.string:
        parts += [labels["string_enum"], ""]
    parts.extend(render_consts_table(entity, labels))
    return "\n".join(parts).rstrip() + "\n"


def render_entity_page(entity: Entity, labels: dict[str, str]) -> str | None:
    """Render ``entity`` or return ``None`` for types that have no page."""
    if entity.type == "class":
        return render_class_page(entity, labels)
    if entity.type == "enum":
        return render_enum_page(entity, labels)
    logger.debug("Skipping %s of unsupported type %r", entity.name, entity.type)
    return None
