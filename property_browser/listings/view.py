import logging
from enum import Enum
from typing import Awaitable, Callable, List, Optional

from property_browser.listings.filters import PropertyFilter, filter_properties
from property_browser.listings.models import Property
from property_browser.listings.normalize import to_properties

logger = logging.getLogger(__name__)

Fetcher = Callable[[], Awaitable[list]]


class ViewState(str, Enum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class ListingView:
    """
    In-memory listing browser.

    load() pulls documents through `fetch`, maps them to Property records and
    keeps them for the lifetime of the view. Every setter re-runs the filter
    synchronously over the stored records. A failed load moves the view to
    ERROR; retry() starts over from LOADING.
    """

    def __init__(self, fetch: Fetcher):
        self.fetch = fetch

        self.state = ViewState.LOADING
        self.error: Optional[str] = None
        self.properties: List[Property] = []
        self.filtered: List[Property] = []
        self.filter = PropertyFilter()
        self.show_filters = False

        self._generation = 0

    @property
    def count(self) -> int:
        return len(self.filtered)

    async def load(self) -> None:
        self._generation += 1
        generation = self._generation

        self.state = ViewState.LOADING
        self.error = None

        try:
            documents = await self.fetch()
            properties = to_properties(documents)
        except Exception as e:
            if generation != self._generation:
                return
            logger.error(f"Error fetching properties: {e}")
            self.error = str(e) or "Unknown error occurred"
            self.state = ViewState.ERROR
            return

        # a newer load() started while this one was awaiting
        if generation != self._generation:
            return

        self.properties = properties
        self.state = ViewState.SUCCESS
        self._refilter()

    async def retry(self) -> None:
        await self.load()

    def set_search(self, term: str) -> None:
        self._update(search=term)

    def set_category(self, category: str) -> None:
        self._update(category=category)

    def set_tag(self, tag: str) -> None:
        self._update(tag=tag)

    def set_status(self, status: str) -> None:
        self._update(status=status)

    def set_price_range(self, low: int, high: int) -> None:
        self._update(price_range=(low, high))

    def toggle_filters(self) -> None:
        self.show_filters = not self.show_filters

    def _update(self, **changes) -> None:
        self.filter = self.filter.model_copy(update=changes)
        self._refilter()

    def _refilter(self) -> None:
        self.filtered = filter_properties(self.properties, self.filter)
