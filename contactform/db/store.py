"""
Persistence collaborator used by the submission service.

A store is opened once at startup for a fixed namespace/database pair and then
shared by every request. Implementations are responsible for their own
concurrency safety.
"""

import logging
from typing import Any, Dict, List

from contactform.core.config import Settings

logger = logging.getLogger(__name__)


class SubmissionStore:
    """Interface every persistence backend implements"""

    async def initialize(self) -> None:
        """Prepare the selected namespace/database for writes"""

    async def create(self, collection_name: str, content: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        Insert one document into a collection.

        Args:
            collection_name: Target collection (e.g. "submissions")
            content: Document body

        Returns:
            list: The created records, each carrying a generated "id"

        Raises:
            StorageError: if the backend fails to write
        """
        raise NotImplementedError

    async def close(self) -> None:
        """Release backend resources"""


def open_store(settings: Settings) -> SubmissionStore:
    """Build the store selected by the settings (MongoDB when a URI is configured)"""
    if settings.effective_mongo_uri:
        from contactform.db.mongo import MongoSubmissionStore

        return MongoSubmissionStore(
            settings.effective_mongo_uri,
            settings.namespace,
            settings.database,
            server_selection_timeout_ms=settings.mongo_server_selection_timeout_ms,
        )

    from contactform.db.memory import MemorySubmissionStore

    logger.info("No MongoDB URI configured, using in-memory store")
    return MemorySubmissionStore(settings.namespace, settings.database)
