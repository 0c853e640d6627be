"""Logic for loading entities from the IDL JSON document."""

import json
from pathlib import Path
from typing import Any

from api_docgen.annotation import parse_annotation
from api_docgen.models import Entity, Member, Parameter, ReturnInfo


def _text(raw: dict[str, Any], *keys: str) -> str:
    """Return the first present string value among ``keys``."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return str(value)
    return ""


def _require_name(raw: dict[str, Any], what: str) -> str:
    name = raw.get("name")
    if not name:
        msg = f"{what} without a name: {raw!r}"
        raise ValueError(msg)
    return str(name)


def parse_member(raw: dict[str, Any]) -> Member:
    """Build a :class:`Member` from its raw JSON mapping."""
    ret = raw.get("return")
    returns = None
    if isinstance(ret, dict):
        returns = ReturnInfo(
            type=_text(ret, "type"),
            description=_text(ret, "desc", "description"),
        )

    params = raw.get("params")
    if params is None:
        params = raw.get("parameters") or []

    return Member(
        name=_require_name(raw, "Member"),
        description=_text(raw, "desc", "description"),
        type=_text(raw, "type"),
        annotation=parse_annotation(raw.get("annotation")),
        returns=returns,
        parameters=[
            Parameter(
                name=_text(p, "name"),
                type=_text(p, "type"),
                description=_text(p, "desc", "description"),
            )
            for p in params
        ],
    )


def _members(raw: dict[str, Any], key: str) -> list[Member] | None:
    items = raw.get(key)
    if items is None:
        return None
    return [parse_member(it) for it in items]


def parse_entity(raw: dict[str, Any]) -> Entity:
    """Build an :class:`Entity` from its raw JSON mapping."""
    parent = raw.get("parent")
    return Entity(
        name=_require_name(raw, "Entity"),
        type=_text(raw, "type"),
        description=_text(raw, "desc", "description"),
        parent=str(parent) if parent else None,
        annotation=parse_annotation(raw.get("annotation")),
        methods=_members(raw, "methods"),
        properties=_members(raw, "properties"),
        consts=_members(raw, "consts"),
        events=_members(raw, "events"),
    )


def load_entities(path: Path) -> list[Entity]:
    """Load and parse the IDL JSON document at ``path``."""
    doc = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(doc, list):
        msg = f"Expected a JSON array of entities in {path}"
        raise ValueError(msg)
    return [parse_entity(it) for it in doc]
