"""Data models for entities read from the IDL JSON document."""

from dataclasses import dataclass, field

from api_docgen.annotation import Annotation


@dataclass
class Parameter:
    """A single method parameter."""

    name: str
    type: str
    description: str


@dataclass
class ReturnInfo:
    """Return value of a method."""

    type: str
    description: str


@dataclass
class Member:
    """A method, property, constant or event of an entity."""

    name: str
    description: str = ""
    type: str = ""
    annotation: Annotation = field(default_factory=Annotation)
    returns: ReturnInfo | None = None  # methods only
    parameters: list[Parameter] = field(default_factory=list)  # methods only

    @property
    def is_private(self) -> bool:
        return self.annotation.private

    @property
    def summary(self) -> str:
        """First line of the description, as shown in index tables."""
        return self.description.split("\n")[0]


@dataclass
class Entity:
    """A documentable class or enum.

    Member collections are ``None`` when the input omits them.
    """

    name: str
    type: str  # class/enum; anything else is skipped at render time
    description: str = ""
    parent: str | None = None
    annotation: Annotation = field(default_factory=Annotation)
    methods: list[Member] | None = None
    properties: list[Member] | None = None
    consts: list[Member] | None = None
    events: list[Member] | None = None
