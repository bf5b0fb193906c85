import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from property_browser.api.router import api_router
from property_browser.config import settings
from property_browser.database.mongo import MongoConnection

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.mongo = MongoConnection.from_settings(settings)
    yield
    await app.state.mongo.close()


app = FastAPI(title="Property Listings Browser", lifespan=lifespan)

app.include_router(api_router)


@app.get("/api")
def root():
    return {"status": "running", "message": "Property Listings Browser"}
