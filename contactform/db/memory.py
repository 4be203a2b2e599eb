import logging
import uuid
from typing import Any, Dict, List, Tuple

from contactform.core.errors import StorageError
from contactform.db.store import SubmissionStore

logger = logging.getLogger(__name__)


class MemorySubmissionStore(SubmissionStore):
    """
    Process-local store, used when no MongoDB URI is configured.

    Records live in a dict keyed by (namespace, database, collection). Ids take
    the form "<collection>:<random hex>". Each create runs without awaiting,
    so concurrent requests on the event loop cannot interleave inside it.
    """

    def __init__(self, namespace: str, database: str):
        self.namespace = namespace
        self.database = database
        self._closed = False
        self._collections: Dict[Tuple[str, str, str], Dict[str, Dict[str, Any]]] = {}

    async def create(self, collection_name: str, content: Dict[str, Any]) -> List[Dict[str, Any]]:
        if self._closed:
            raise StorageError("store is closed")

        collection = self._collections.setdefault(
            (self.namespace, self.database, collection_name), {}
        )
        record_id = f"{collection_name}:{uuid.uuid4().hex}"
        while record_id in collection:
            record_id = f"{collection_name}:{uuid.uuid4().hex}"

        record = {**content, "id": record_id}
        collection[record_id] = record
        logger.debug(f"Stored record {record_id} in {self.namespace}/{self.database}")
        return [dict(record)]

    def count(self, collection_name: str) -> int:
        """Inspection helper: number of records held for a collection"""
        return len(self._collections.get((self.namespace, self.database, collection_name), {}))

    async def close(self) -> None:
        self._closed = True
