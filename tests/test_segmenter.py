"""Tests for splitting descriptions into typed segments."""

import pytest

from api_docgen.segment import CODE, GRAPHVIZ, TEXT, UML, Segment
from api_docgen.split_all import split_all
from api_docgen.split_one import split_one


def _pairs(segments: list[Segment]) -> list[tuple[str, str]]:
    return [(s.kind, s.content) for s in segments]


def test_split_one_no_match() -> None:
    """Verify that input without delimiters comes back as one text segment."""
    assert _pairs(split_one("plain", CODE, "```", "```")) == [(TEXT, "plain")]
    assert _pairs(split_one("a", CODE, "```", "```")) == [(TEXT, "a")]


def test_split_one_unterminated_start() -> None:
    """Verify that a start tag without an end tag is not a match."""
    assert _pairs(split_one("abc```def", CODE, "```", "```")) == [
        (TEXT, "abc```def")
    ]


def test_split_one_stops_at_unterminated_tag() -> None:
    """Verify that scanning stops at an unterminated tag and keeps the tail."""
    result = split_one("```a```xx```b", CODE, "```", "```")
    assert _pairs(result) == [(CODE, "```a```"), (TEXT, "xx```b")]


def test_split_one_drops_single_trailing_char() -> None:
    """Verify that one character after the last match is not emitted."""
    assert _pairs(split_one("```a```b", CODE, "```", "```")) == [(CODE, "```a```")]
    assert _pairs(split_one("```a```bc", CODE, "```", "```")) == [
        (CODE, "```a```"),
        (TEXT, "bc"),
    ]


def test_split_one_adjacent_matches() -> None:
    """Verify that back-to-back matches produce no empty text segments."""
    result = split_one("```a``````b```", CODE, "```", "```")
    assert _pairs(result) == [(CODE, "```a```"), (CODE, "```b```")]


def test_split_one_rejects_empty_tags() -> None:
    """Verify that empty delimiters are refused."""
    with pytest.raises(ValueError, match="non-empty"):
        split_one("abc", CODE, "", "```")


def test_split_all_code() -> None:
    """Verify fenced code between text."""
    assert _pairs(split_all("123```code```abc")) == [
        (TEXT, "123"),
        (CODE, "```code```"),
        (TEXT, "abc"),
    ]
    assert _pairs(split_all("```code```abc")) == [(CODE, "```code```"), (TEXT, "abc")]
    assert _pairs(split_all("```code```")) == [(CODE, "```code```")]


def test_split_all_bare_graphviz() -> None:
    """Verify detection of an unfenced graph description."""
    assert _pairs(split_all("123\ndigraph G {\na\n}\nabc")) == [
        (TEXT, "123\n"),
        (GRAPHVIZ, "digraph G {\na\n}\n"),
        (TEXT, "abc"),
    ]


def test_split_all_mixed() -> None:
    """Verify ordering when code, graphviz and UML all appear."""
    text = "123\ndigraph G {\na\n}\nabc```code```abc@startumluml@enduml"
    assert _pairs(split_all(text)) == [
        (TEXT, "123\n"),
        (GRAPHVIZ, "digraph G {\na\n}\n"),
        (TEXT, "abc"),
        (CODE, "```code```"),
        (TEXT, "abc"),
        (UML, "@startumluml@enduml"),
    ]


def test_split_all_code_takes_priority() -> None:
    """Verify that diagram markers inside fenced code stay opaque."""
    text = "x```\ndigraph G {\na\n}\n@startuml@enduml```yz"
    result = split_all(text)
    assert [s.kind for s in result] == [TEXT, CODE, TEXT]
    assert result[1].content == "```\ndigraph G {\na\n}\n@startuml@enduml```"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "no markup at all",
        "a```b```cd",
        "intro\ndigraph G {\nx -> y\n}\nmore text```c```"
        "\n@startuml\nA->B\n@enduml\nend",
        "```graphviz\n[default_style]\na -> b\n```\ntrailing",
    ],
)
def test_split_all_round_trip(text: str) -> None:
    """Verify that segment contents concatenate back to the input."""
    assert "".join(s.content for s in split_all(text)) == text
