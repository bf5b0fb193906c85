import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from property_browser.config import Settings, get_settings
from property_browser.database.mongo import MongoConnection, get_mongo
from property_browser.properties.repository import fetch_property_documents
from property_browser.properties.reshape import to_response_document

logger = logging.getLogger(__name__)

router = APIRouter()


async def load_properties(mongo: MongoConnection, limit: int) -> list[dict]:
    await mongo.connect()
    docs = await fetch_property_documents(mongo.collection, limit=limit)
    return [to_response_document(doc) for doc in docs]


@router.get("/properties")
async def list_properties(
    mongo: MongoConnection = Depends(get_mongo),
    settings: Settings = Depends(get_settings),
):
    try:
        documents = await load_properties(mongo, settings.PROPERTIES_LIMIT)
    except Exception as e:
        logger.error(f"Error fetching properties: {e}", exc_info=True)
        return JSONResponse({"error": str(e) or "Failed to fetch properties"}, status_code=500)

    return {"documents": documents}
