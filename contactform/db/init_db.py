"""
Database initialization for the contact form backend.

Ensures the collections the service writes to exist before the first request
is served. Safe to run on every startup; it only creates what is missing.
"""

import logging
from datetime import datetime, timezone
from pymongo.errors import CollectionInvalid, PyMongoError

# Set up logger
logger = logging.getLogger(__name__)

REQUIRED_COLLECTIONS = [
    {
        "name": "submissions",
        "description": "Stores contact form submissions",
    },
]


async def collection_exists(db, collection_name):
    """
    Check if a collection exists in the database.

    Args:
        db: MongoDB database connection
        collection_name (str): Name of the collection to check

    Returns:
        bool: True if collection exists, False otherwise
    """
    collections = await db.list_collection_names()
    return collection_name in collections


async def create_collection(db, collection_config):
    """
    Create a collection if it doesn't exist.

    Returns:
        bool: True if successful, False otherwise
    """
    collection_name = collection_config["name"]
    description = collection_config.get("description", "")

    try:
        if await collection_exists(db, collection_name):
            logger.info(f"✅ Collection '{collection_name}' already exists")
            return True

        logger.info(f"🔄 Creating collection '{collection_name}': {description}")
        await db.create_collection(collection_name)
        logger.info(f"✅ Collection '{collection_name}' created successfully")
        return True

    except CollectionInvalid:
        # Created concurrently by another worker
        return True

    except PyMongoError as e:
        logger.error(f"❌ Failed to create collection '{collection_name}': {str(e)}")
        return False


async def initialize_database(db):
    """
    Create all required collections.

    Returns:
        bool: True if initialization completed successfully, False otherwise
    """
    start_time = datetime.now(timezone.utc)
    logger.info(f"📊 Initializing database: {db.name}")

    error_count = 0
    for collection_config in REQUIRED_COLLECTIONS:
        if not await create_collection(db, collection_config):
            error_count += 1

    duration = (datetime.now(timezone.utc) - start_time).total_seconds()
    if error_count:
        logger.warning(f"⚠️ Database initialization finished with {error_count} errors in {duration:.2f}s")
        return False

    logger.info(f"🎉 Database initialized: {len(REQUIRED_COLLECTIONS)} collections in {duration:.2f}s")
    return True


async def verify_database_setup(db):
    """
    Verify that all required collections exist.

    Returns:
        dict: Verification results with details about each collection
    """
    verification_results = {
        "database_name": db.name,
        "collections": {},
        "overall_status": "unknown"
    }

    all_good = True
    for collection_config in REQUIRED_COLLECTIONS:
        collection_name = collection_config["name"]
        try:
            if await collection_exists(db, collection_name):
                doc_count = await db[collection_name].count_documents({})
                verification_results["collections"][collection_name] = {
                    "exists": True,
                    "document_count": doc_count,
                    "status": "OK"
                }
                logger.info(f"✅ {collection_name}: {doc_count} documents")
            else:
                verification_results["collections"][collection_name] = {
                    "exists": False,
                    "status": "MISSING"
                }
                logger.error(f"❌ {collection_name}: Collection does not exist")
                all_good = False
        except PyMongoError as e:
            verification_results["collections"][collection_name] = {
                "exists": "unknown",
                "error": str(e),
                "status": "ERROR"
            }
            logger.error(f"⚠️ {collection_name}: Error during verification - {str(e)}")
            all_good = False

    verification_results["overall_status"] = "PASS" if all_good else "FAIL"
    return verification_results
