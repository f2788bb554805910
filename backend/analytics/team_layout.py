"""
Team layout — pure functions only.

Derives one synthetic node per distinct team among the visible people, pins
each team on a fixed grid, and places members around their team unless the
person has been positioned by hand.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Literal, Optional

from models import Link, Person, team_id

STATUS_COLORS: dict[str, str] = {
    "To do":     "#3498db",
    "Interview": "#e67e22",
    "CEO":       "#2ecc71",
    "Rejected":  "#e74c3c",
}

REJECTED_OPACITY = 0.4
STAR = "⭐"

MemberPlacement = Literal["circle", "below"]


@dataclass(frozen=True)
class LayoutConfig:
    # None keeps every team on one row
    teams_per_row:    Optional[int]      = 3
    column_spacing:   float              = 800
    # rows past the end of this table sit at y = 0
    row_offsets:      tuple[float, ...]  = (50, 450, 850)
    member_placement: MemberPlacement    = "circle"
    radius:           float              = 200
    below_offset:     float              = 150
    team_color:       str                = "#9b59b6"
    team_size:        int                = 600


@dataclass(frozen=True)
class PlacedNode:
    id:        str
    label:     str
    color:     Optional[str]
    opacity:   float
    x:         float
    y:         float
    draggable: bool = True
    size:      Optional[int] = None


@dataclass
class TeamLayout:
    person_nodes: list[PlacedNode] = field(default_factory=list)
    team_nodes:   list[PlacedNode] = field(default_factory=list)
    team_links:   list[Link]       = field(default_factory=list)
    team_positions: dict[str, tuple[float, float]] = field(default_factory=dict)


def distinct_teams(nodes: list[Person]) -> list[str]:
    """Non-empty team names in first-seen order."""
    seen: dict[str, None] = {}
    for n in nodes:
        if n.team and n.team not in seen:
            seen[n.team] = None
    return list(seen)


def row_offset(row: int, offsets: tuple[float, ...]) -> float:
    if 0 <= row < len(offsets):
        return offsets[row]
    return 0


def grid_position(index: int, config: LayoutConfig) -> tuple[float, float]:
    if config.teams_per_row:
        row, col = divmod(index, config.teams_per_row)
    else:
        row, col = 0, index
    return (col + 1) * config.column_spacing, row_offset(row, config.row_offsets)


def member_position(
    team_pos: tuple[float, float],
    i: int,
    n: int,
    config: LayoutConfig,
) -> tuple[float, float]:
    tx, ty = team_pos
    if config.member_placement == "below":
        return tx, ty + config.below_offset
    angle = 2 * math.pi * i / n
    return tx + config.radius * math.cos(angle), ty + config.radius * math.sin(angle)


def person_label(person: Person) -> str:
    return f"{person.name} {STAR}" if person.starred else person.name


def person_style(person: Person) -> tuple[Optional[str], float]:
    opacity = REJECTED_OPACITY if person.status == "Rejected" else 1
    return STATUS_COLORS.get(person.status), opacity


def layout_teams(nodes: list[Person], config: LayoutConfig | None = None) -> TeamLayout:
    """
    Lay out the visible people and their teams.

    Members are indexed within their team in iteration order, so the i-th of
    n members sits at angle 2*pi*i/n. A stored (x, y) always wins over the
    computed slot; people without a team default to (0, 0).
    """
    config = config or LayoutConfig()
    result = TeamLayout()

    for index, team in enumerate(distinct_teams(nodes)):
        x, y = grid_position(index, config)
        result.team_positions[team] = (x, y)
        result.team_nodes.append(PlacedNode(
            id=team_id(team),
            label=team,
            color=config.team_color,
            opacity=1,
            x=x,
            y=y,
            draggable=False,
            size=config.team_size,
        ))

    members: dict[str, list[Person]] = {}
    for n in nodes:
        if n.team:
            members.setdefault(n.team, []).append(n)
            result.team_links.append(Link(source=team_id(n.team), target=n.id))

    slot = {n.id: i for team_members in members.values() for i, n in enumerate(team_members)}

    for n in nodes:
        if n.has_position:
            x, y = n.x, n.y
        elif n.team in result.team_positions:
            x, y = member_position(
                result.team_positions[n.team], slot[n.id], len(members[n.team]), config,
            )
        else:
            x, y = 0, 0
        color, opacity = person_style(n)
        result.person_nodes.append(PlacedNode(
            id=n.id,
            label=person_label(n),
            color=color,
            opacity=opacity,
            x=x,
            y=y,
        ))

    return result
