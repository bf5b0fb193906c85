from fastapi import APIRouter
from property_browser.api.routes import browse, health, properties

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["Health"])
api_router.include_router(properties.router, prefix="/api", tags=["Properties"])
api_router.include_router(browse.router, tags=["Browse"])
