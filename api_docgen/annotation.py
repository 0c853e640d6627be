"""Annotation flags attached to entities and members."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class Scriptable(Enum):
    """Whether a member is exposed to scripting, and how."""

    OFF = "off"
    ON = "on"
    CUSTOM = "custom"


# JSON key -> Annotation field. "persitent" is how the IDL compiler spells it.
FLAG_KEYS = {
    "static": "static",
    "persistent": "persistent",
    "persitent": "persistent",
    "design": "design",
    "readable": "readable",
    "writable": "writable",
    "get_prop": "get_prop",
    "set_prop": "set_prop",
    "private": "private",
    "constructor": "constructor",
    "cast": "cast",
    "string": "string",
    "fake": "fake",
}

# Set only by a literal JSON true; any other value leaves the flag off.
STRICT_KEYS = frozenset({"constructor", "string"})


@dataclass(frozen=True)
class Annotation:
    """Fixed set of capability flags for an entity or member."""

    scriptable: Scriptable = Scriptable.OFF
    static: bool = False
    persistent: bool = False
    design: bool = False
    readable: bool = False
    writable: bool = False
    get_prop: bool = False
    set_prop: bool = False
    private: bool = False
    constructor: bool = False
    cast: bool = False
    string: bool = False  # enum values are strings
    fake: bool = False

    @property
    def is_scriptable(self) -> bool:
        """True for both plain and custom scripting support."""
        return self.scriptable is not Scriptable.OFF


def parse_scriptable(value: Any) -> Scriptable:
    """Map the raw ``scriptable`` value onto :class:`Scriptable`."""
    if isinstance(value, str):
        if value == Scriptable.CUSTOM.value:
            return Scriptable.CUSTOM
        msg = f"Invalid scriptable value: {value!r}"
        raise ValueError(msg)
    return Scriptable.ON if value else Scriptable.OFF


def parse_annotation(raw: dict[str, Any] | None) -> Annotation:
    """Build an :class:`Annotation` from the raw JSON mapping."""
    if not raw:
        return Annotation()
    if not isinstance(raw, dict):
        msg = f"Annotation must be an object, got {type(raw).__name__}"
        raise ValueError(msg)

    flags: dict[str, Any] = {}
    for key, value in raw.items():
        if key == "scriptable":
            flags["scriptable"] = parse_scriptable(value)
        elif key in FLAG_KEYS:
            field_name = FLAG_KEYS[key]
            is_set = value is True if key in STRICT_KEYS else bool(value)
            flags[field_name] = flags.get(field_name, False) or is_set
        else:
            logger.debug("Ignoring unknown annotation key: %s", key)
    return Annotation(**flags)
