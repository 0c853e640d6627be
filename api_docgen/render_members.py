"""Logic for rendering method and property detail sections."""

from api_docgen.annotation import Scriptable
from api_docgen.labels import yes_no
from api_docgen.md_table import md_table
from api_docgen.member_anchor import member_anchor
from api_docgen.models import Entity, Member

RULE = "-----------------------"


def _method_flags(m: Member, labels: dict[str, str]) -> list[str]:
    ann = m.annotation
    flags = []
    if ann.static:
        flags.append(labels["static"])
    if ann.constructor:
        flags.append(labels["constructor"])
    if ann.cast:
        flags.append(labels["cast"])
    if ann.scriptable is Scriptable.CUSTOM:
        flags.append(labels["custom"])
    if not flags:
        return []
    return [f"* {labels['flags']}{', '.join(flags)}", ""]


def render_method_detail(
    entity: Entity, m: Member, labels: dict[str, str]
) -> list[str]:
    """Render a single method section."""
    parts = [f"#### {m.name} {labels['method_suffix']}", RULE, ""]

    rows = []
    if m.returns is not None:
        rows.append([labels["return_value"], m.returns.type, m.returns.description])
    rows.extend([p.name, p.type, p.description] for p in m.parameters)
    parts.append(
        md_table([labels["parameter"], labels["type"], labels["description"]], rows)
    )
    parts.append("")

    parts.extend(_method_flags(m, labels))
    parts += [member_anchor(entity.name, m.name), "", m.description, ""]
    return parts


def render_property_detail(
    entity: Entity, p: Member, labels: dict[str, str]
) -> list[str]:
    """Render a single property section with its attribute table."""
    ann = p.annotation
    parts = [
        f"#### {p.name} {labels['property_suffix']}",
        RULE,
        member_anchor(entity.name, p.name),
        "",
        p.description,
        "",
        f"* {labels['type_line']}{p.type}",
        "",
    ]
    # XML settability follows get_prop; the IDL has no separate flag for it.
    rows = [
        [labels["readable"], yes_no(ann.readable, labels)],
        [labels["writable"], yes_no(ann.writable, labels)],
        [labels["persistent"], yes_no(ann.persistent, labels)],
        [labels["scriptable"], yes_no(ann.is_scriptable, labels)],
        [labels["design"], yes_no(ann.design, labels)],
        [labels["xml"], yes_no(ann.get_prop, labels)],
        [labels["get_prop"], yes_no(ann.get_prop, labels)],
        [labels["set_prop"], yes_no(ann.set_prop, labels)],
    ]
    parts.append(md_table([labels["feature"], labels["supported"]], rows))
    parts.append("")
    return parts
