import motor.motor_asyncio
import logging
from typing import Any, Dict, List

from pymongo.errors import PyMongoError

from contactform.core.errors import StorageError
from contactform.db.init_db import initialize_database, verify_database_setup
from contactform.db.store import SubmissionStore

# Set up logger
logger = logging.getLogger(__name__)


def mask_uri(uri: str) -> str:
    """Mask the password in a connection string for logging"""
    masked_uri = uri
    if '@' in uri and ':' in uri:
        credentials_part = uri.split('@')[0]
        user_pass = credentials_part.split('://')[-1]
        if ':' in user_pass:
            user, password = user_pass.split(':', 1)
            masked_uri = uri.replace(user_pass, f"{user}:{'*' * len(password)}")
    return masked_uri


def database_name(namespace: str, database: str) -> str:
    """MongoDB has a single level of databases, so the pair is joined"""
    return f"{namespace}_{database}"


class MongoSubmissionStore(SubmissionStore):
    """Stores submissions in MongoDB through a shared motor client"""

    def __init__(self, uri: str, namespace: str, database: str, server_selection_timeout_ms: int = 5000):
        logger.info(f"MongoDB URI configured: {mask_uri(uri)}")
        try:
            self.client = motor.motor_asyncio.AsyncIOMotorClient(
                uri,
                maxPoolSize=10,
                minPoolSize=2,
                maxIdleTimeMS=30000,
                serverSelectionTimeoutMS=server_selection_timeout_ms,
                connectTimeoutMS=10000
            )
        except PyMongoError as e:
            logger.error(f"Failed to connect to MongoDB: {str(e)}")
            raise StorageError(str(e)) from e
        self.db = self.client[database_name(namespace, database)]

    async def initialize(self) -> None:
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"Failed to connect to MongoDB: {str(e)}")
            raise StorageError(str(e)) from e

        if not await initialize_database(self.db):
            raise StorageError(f"failed to initialize database '{self.db.name}'")

        verification = await verify_database_setup(self.db)
        if verification.get("overall_status") != "PASS":
            logger.warning(f"⚠️ Database verification status: {verification.get('overall_status')}")

    async def create(self, collection_name: str, content: Dict[str, Any]) -> List[Dict[str, Any]]:
        document = dict(content)
        try:
            result = await self.db[collection_name].insert_one(document)
        except PyMongoError as e:
            raise StorageError(str(e)) from e

        if result.inserted_id is None:
            return []

        record = dict(content)
        record["id"] = str(result.inserted_id)
        return [record]

    async def close(self) -> None:
        self.client.close()
        logger.info("MongoDB connections closed successfully")
