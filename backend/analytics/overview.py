"""
Pipeline overview — pure functions only.
"""
from __future__ import annotations

import networkx as nx

from analytics.team_layout import distinct_teams
from models import STATUSES, Document


def build_people_graph(doc: Document) -> nx.Graph:
    """Undirected person graph; links with a missing endpoint are skipped."""
    G = nx.Graph()
    for p in doc.nodes:
        G.add_node(p.id, name=p.name, status=p.status, team=p.team)
    for l in doc.links:
        if G.has_node(l.source) and G.has_node(l.target):
            G.add_edge(l.source, l.target)
    return G


def summarize(doc: Document) -> dict:
    """
    Status counts, team options and connectivity for the whole document.

    status_counts lists every known status, including those with no people.
    """
    status_counts = {s: 0 for s in STATUSES}
    for p in doc.nodes:
        if p.status in status_counts:
            status_counts[p.status] += 1

    G = build_people_graph(doc)
    isolated = sorted(nx.isolates(G))

    return {
        "status_counts": status_counts,
        "teams":         distinct_teams(doc.nodes),
        "person_count":  len(doc.nodes),
        "link_count":    len(doc.links),
        "components":    nx.number_connected_components(G),
        "isolated":      isolated,
    }
