from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from db import DocumentStore, get_store

router = APIRouter()


@router.get("/api/data")
def load_data(store: DocumentStore = Depends(get_store)):
    return store.load()


@router.post("/api/data")
def save_data(data: Any = Body(...), store: DocumentStore = Depends(get_store)):
    """Replace the stored document with the request body, unvalidated."""
    store.save(data)
    return {"message": "Data saved"}


_OTHER_METHODS = ["PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


@router.api_route("/api/data", methods=_OTHER_METHODS, include_in_schema=False)
def data_method_not_allowed():
    return Response(status_code=405, headers={"Allow": "GET, POST"})
