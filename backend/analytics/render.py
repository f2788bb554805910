"""
Graph widget payload — pure functions only.

Flattens a team layout plus the visible person links into the node / edge
descriptors the browser graph widget consumes. No layout decisions here.
"""
from __future__ import annotations

from analytics.team_layout import PlacedNode, TeamLayout
from models import Link, Person


def _node_descriptor(node: PlacedNode) -> dict:
    return {
        "id":        node.id,
        "label":     node.label,
        "color":     node.color,
        "opacity":   node.opacity,
        "x":         node.x,
        "y":         node.y,
        "draggable": node.draggable,
    }


def to_flow_graph(
    layout: TeamLayout,
    visible_links: list[Link],
    all_nodes: list[Person],
) -> dict:
    """
    Person nodes come first, then team nodes; person links first, then team
    membership links. An edge is animated when it points at a starred person,
    looked up among all people so a filtered view keeps the same animation.
    """
    starred = {n.id for n in all_nodes if n.starred}
    nodes = [_node_descriptor(n) for n in layout.person_nodes + layout.team_nodes]
    edges = [
        {
            "id":       f"e-{l.source}-{l.target}-{i}",
            "source":   l.source,
            "target":   l.target,
            "animated": l.target in starred,
        }
        for i, l in enumerate(visible_links + layout.team_links)
    ]
    return {"nodes": nodes, "edges": edges}
