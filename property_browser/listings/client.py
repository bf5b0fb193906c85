import logging

import aiohttp

from property_browser.config import settings
from property_browser.errors import FetchError

logger = logging.getLogger(__name__)


class PropertiesClient:
    def __init__(self, url: str | None = None):
        self.url = url or settings.PROPERTIES_API_URL

    async def fetch_documents(self) -> list[dict]:
        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(self.url) as resp:
                    if resp.status >= 400:
                        text = await resp.text()
                        raise FetchError(f"Failed to fetch data: {resp.status} - {text}")
                    data = await resp.json()
        except (aiohttp.ClientError, ValueError) as e:
            raise FetchError(f"Failed to fetch data: {e}") from e

        if not isinstance(data, dict) or data.get("documents") is None:
            raise FetchError("No documents found in response")

        return data["documents"]

    async def __call__(self) -> list[dict]:
        return await self.fetch_documents()
