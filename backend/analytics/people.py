"""
Person mutations — pure functions only.

Each function takes a Document and returns (new document, affected person).
When the operation is skipped the input document is returned unchanged and
the person is None.
"""
from __future__ import annotations

from typing import Optional

from models import (
    ChildInput,
    Document,
    Link,
    Person,
    PersonEdit,
    PersonInput,
    Position,
    is_team_id,
)

Outcome = tuple[Document, Optional[Person]]


def next_person_id(nodes: list[Person]) -> str:
    """
    Allocate a person id.

    Counts up from the larger of the collection size and the highest numeric
    id, so a fresh document gets "1", "2", ... and a delete never causes an
    id still present in the document to be reissued.
    """
    used = {n.id for n in nodes}
    numeric = [int(i) for i in used if i.isascii() and i.isdigit()]
    candidate = max([len(nodes), *numeric]) + 1
    while str(candidate) in used:
        candidate += 1
    return str(candidate)


def add_person(doc: Document, data: PersonInput, connect_to: Optional[str] = None) -> Outcome:
    if not data.name:
        return doc, None
    person = Person(
        id=next_person_id(doc.nodes),
        name=data.name,
        status=data.status,
        starred=data.starred,
        team=data.team,
        notes="",
    )
    links = list(doc.links)
    if connect_to:
        links.append(Link(source=connect_to, target=person.id))
    return Document(nodes=[*doc.nodes, person], links=links), person


def apply_edit(person: Person, edit: PersonEdit) -> Person:
    """New record with every editable field taken from *edit*."""
    return person.model_copy(update={
        "name":    edit.name,
        "status":  edit.status,
        "starred": edit.starred,
        "team":    edit.team,
        "notes":   edit.notes,
    })


def update_person(doc: Document, person_id: Optional[str], edit: PersonEdit) -> Outcome:
    if not person_id:
        return doc, None
    updated = None
    nodes = []
    for n in doc.nodes:
        if n.id == person_id:
            n = updated = apply_edit(n, edit)
        nodes.append(n)
    if updated is None:
        return doc, None
    return Document(nodes=nodes, links=list(doc.links)), updated


def add_child_person(doc: Document, parent_id: Optional[str], child: ChildInput) -> Outcome:
    if not parent_id or not child.name:
        return doc, None
    person = Person(
        id=next_person_id(doc.nodes),
        name=child.name,
        status=child.status,
        starred=child.starred,
        team="",
        notes="",
    )
    return Document(
        nodes=[*doc.nodes, person],
        links=[*doc.links, Link(source=parent_id, target=person.id)],
    ), person


def delete_person(doc: Document, person_id: Optional[str]) -> Outcome:
    """Drop the person and every link touching it."""
    if not person_id:
        return doc, None
    removed = next((n for n in doc.nodes if n.id == person_id), None)
    if removed is None:
        return doc, None
    nodes = [n for n in doc.nodes if n.id != person_id]
    links = [l for l in doc.links if l.source != person_id and l.target != person_id]
    return Document(nodes=nodes, links=links), removed


def move_person(doc: Document, person_id: Optional[str], position: Position) -> Outcome:
    """Record a manual drag position. Team nodes are pinned and never move."""
    if not person_id or is_team_id(person_id):
        return doc, None
    moved = None
    nodes = []
    for n in doc.nodes:
        if n.id == person_id:
            n = moved = n.model_copy(update={"x": position.x, "y": position.y})
        nodes.append(n)
    if moved is None:
        return doc, None
    return Document(nodes=nodes, links=list(doc.links)), moved
