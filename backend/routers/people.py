from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from db import DocumentStore, get_store
from models import ChildInput, PersonEdit, PersonInput, Position
from repository import GraphRepository

router = APIRouter()


def get_repository(store: DocumentStore = Depends(get_store)) -> GraphRepository:
    return GraphRepository(store)


class AddPersonRequest(BaseModel):
    person:     PersonInput
    connect_to: Optional[str] = None


@router.post("/api/people")
def add_person(req: AddPersonRequest, repo: GraphRepository = Depends(get_repository)):
    return repo.add_person(req.person, req.connect_to).to_response()


@router.put("/api/people/{person_id}")
def update_person(person_id: str, edit: PersonEdit, repo: GraphRepository = Depends(get_repository)):
    return repo.update_person(person_id, edit).to_response()


@router.post("/api/people/{person_id}/children")
def add_child_person(person_id: str, child: ChildInput, repo: GraphRepository = Depends(get_repository)):
    return repo.add_child_person(person_id, child).to_response()


@router.delete("/api/people/{person_id}")
def delete_person(person_id: str, repo: GraphRepository = Depends(get_repository)):
    return repo.delete_person(person_id).to_response()


@router.put("/api/people/{person_id}/position")
def move_person(person_id: str, position: Position, repo: GraphRepository = Depends(get_repository)):
    """Drag-stop handler: persist a manual position for one person."""
    return repo.move_person(person_id, position).to_response()
