"""
Graph repository — load, mutate, save.

Every operation reads the whole document, applies one pure mutation from
analytics.people and, if it changed anything, writes the whole document
back. There is no merge with concurrent writers.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from analytics import people
from db import DocumentStore
from models import ChildInput, Document, Person, PersonEdit, PersonInput, Position

logger = logging.getLogger(__name__)


@dataclass
class MutationResult:
    applied:  bool
    person:   Optional[Person]
    document: Document

    def to_response(self) -> dict:
        return {
            "ok":     self.applied,
            "person": self.person.model_dump(exclude_none=True) if self.person else None,
        }


class GraphRepository:
    def __init__(self, store: DocumentStore):
        self.store = store

    def document(self) -> Document:
        return Document.model_validate(self.store.load())

    def _run(self, operation: str, person_id: Optional[str], fn: Callable[[Document], people.Outcome]) -> MutationResult:
        doc = self.document()
        new_doc, person = fn(doc)
        if person is None:
            logger.info("Mutation skipped", extra={"operation": operation, "person_id": person_id})
            return MutationResult(False, None, doc)
        self.store.save(new_doc.to_json())
        logger.info("Mutation applied", extra={"operation": operation, "person_id": person.id})
        return MutationResult(True, person, new_doc)

    def add_person(self, data: PersonInput, connect_to: Optional[str] = None) -> MutationResult:
        return self._run("add_person", None, lambda d: people.add_person(d, data, connect_to))

    def update_person(self, person_id: Optional[str], edit: PersonEdit) -> MutationResult:
        return self._run("update_person", person_id, lambda d: people.update_person(d, person_id, edit))

    def add_child_person(self, parent_id: Optional[str], child: ChildInput) -> MutationResult:
        return self._run("add_child_person", parent_id, lambda d: people.add_child_person(d, parent_id, child))

    def delete_person(self, person_id: Optional[str]) -> MutationResult:
        return self._run("delete_person", person_id, lambda d: people.delete_person(d, person_id))

    def move_person(self, person_id: Optional[str], position: Position) -> MutationResult:
        return self._run("move_person", person_id, lambda d: people.move_person(d, person_id, position))
