"""Utilities for in-page anchors and cross-references."""


def anchor_id(entity_name: str, member_name: str) -> str:
    return f"{entity_name}_{member_name}"


def member_anchor(entity_name: str, member_name: str) -> str:
    """HTML anchor placed before a member's detail section."""
    return f'<a id="{anchor_id(entity_name, member_name)}"></a>'


def member_link(entity_name: str, member_name: str) -> str:
    """Link from an index table row to the member's detail section."""
    return f'<a href="#{anchor_id(entity_name, member_name)}">{member_name}</a>'
