"""
Person / link / document records and the typed inputs that change them.

Records are frozen; every edit produces a new record.
"""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Status = Literal["To do", "Interview", "CEO", "Rejected"]

STATUSES: tuple[str, ...] = ("To do", "Interview", "CEO", "Rejected")

TEAM_PREFIX = "team_"


class Person(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow", coerce_numbers_to_str=True)

    id:      str
    name:    str
    status:  str            = "To do"
    starred: bool           = False
    team:    str            = ""
    notes:   str            = ""
    x:       Optional[float] = None
    y:       Optional[float] = None

    @property
    def has_position(self) -> bool:
        return self.x is not None and self.y is not None


class Link(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow", coerce_numbers_to_str=True)

    source: str
    target: str


class Document(BaseModel):
    """The full persisted graph, replaced wholesale on every save."""
    model_config = ConfigDict(frozen=True)

    nodes: list[Person] = Field(default_factory=list)
    links: list[Link]   = Field(default_factory=list)

    def to_json(self) -> dict:
        # x/y are only written once a person has been placed by hand
        return {
            "nodes": [p.model_dump(exclude_none=True) for p in self.nodes],
            "links": [l.model_dump() for l in self.links],
        }


# ── Inputs ──────────────────────────────────────────────────────────────────

class PersonInput(BaseModel):
    name:    str    = ""
    status:  Status = "To do"
    starred: bool   = False
    team:    str    = ""


class ChildInput(BaseModel):
    name:    str    = ""
    status:  Status = "To do"
    starred: bool   = False


class PersonEdit(BaseModel):
    """Every field the quick-edit form can change."""
    name:    str
    status:  Status
    starred: bool
    team:    str = ""
    notes:   str = ""


class Position(BaseModel):
    x: float
    y: float


def is_team_id(node_id: str) -> bool:
    return node_id.startswith(TEAM_PREFIX)


def team_id(team: str) -> str:
    return f"{TEAM_PREFIX}{team}"
