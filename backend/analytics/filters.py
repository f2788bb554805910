"""
Visibility filtering — pure functions only.
"""
from __future__ import annotations

from dataclasses import dataclass

from models import Link, Person


@dataclass(frozen=True)
class FilterCriteria:
    """Empty / False fields match everything; set fields are AND-combined."""
    status:  str  = ""
    starred: bool = False
    team:    str  = ""


def node_matches(node: Person, criteria: FilterCriteria) -> bool:
    if criteria.status and node.status != criteria.status:
        return False
    if criteria.starred and not node.starred:
        return False
    if criteria.team and node.team != criteria.team:
        return False
    return True


def filter_graph(
    nodes: list[Person],
    links: list[Link],
    criteria: FilterCriteria | None = None,
) -> tuple[list[Person], list[Link]]:
    """
    Return (visible nodes, visible links), both in their original order.

    A link survives only when both endpoints are visible, so links pointing
    at deleted or filtered-out people drop out here.
    """
    criteria = criteria or FilterCriteria()
    visible = [n for n in nodes if node_matches(n, criteria)]
    visible_ids = {n.id for n in visible}
    visible_links = [
        l for l in links
        if l.source in visible_ids and l.target in visible_ids
    ]
    return visible, visible_links
