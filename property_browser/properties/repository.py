import logging

from pymongo.errors import PyMongoError

from property_browser.errors import QueryError

logger = logging.getLogger(__name__)

MAX_LIMIT = 500
DEFAULT_LIMIT = MAX_LIMIT


async def fetch_property_documents(collection, limit: int = DEFAULT_LIMIT) -> list[dict]:
    limit = min(limit, MAX_LIMIT)
    try:
        docs = await collection.find({}).limit(limit).to_list(None)
    except PyMongoError as e:
        raise QueryError(f"Failed to query properties: {e}") from e

    logger.info(f"Fetched {len(docs)} property documents")
    return docs[:limit]
