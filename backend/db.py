"""
Document store shared across the repository and routers.
No graph logic lives here — only I/O primitives.
"""
import json
import logging
from pathlib import Path

from core.config import get_settings

logger = logging.getLogger(__name__)


def empty_document() -> dict:
    return {"nodes": [], "links": []}


class DocumentStore:
    """
    The whole graph as one JSON file.

    load() and save() always move the entire document; there is no partial
    update and no locking, so concurrent writers resolve as last-writer-wins.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> dict:
        if not self.path.exists():
            logger.info("No stored document, serving empty graph", extra={"path": str(self.path)})
            return empty_document()
        return json.loads(self.path.read_text(encoding="utf-8"))

    def save(self, document) -> None:
        self.path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        logger.info("Document saved", extra={"path": str(self.path)})


def get_store() -> DocumentStore:
    return DocumentStore(get_settings().DATA_FILE)
