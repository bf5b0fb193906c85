from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from property_browser.api.routes.properties import load_properties
from property_browser.config import Settings, get_settings
from property_browser.database.mongo import MongoConnection, get_mongo
from property_browser.listings.filters import ALL, DEFAULT_PRICE_RANGE
from property_browser.listings.normalize import unbox_int
from property_browser.listings.render import render_page
from property_browser.listings.view import ListingView

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def browse(
    search: str = "",
    category: str = ALL,
    tag: str = ALL,
    status: str = ALL,
    min_price: str | None = None,
    max_price: str | None = None,
    filters: bool | None = None,
    mongo: MongoConnection = Depends(get_mongo),
    settings: Settings = Depends(get_settings),
):
    # blank or non-numeric price boxes fall back to the open-ended bound
    low = unbox_int(min_price, DEFAULT_PRICE_RANGE[0])
    high = unbox_int(max_price, DEFAULT_PRICE_RANGE[1])

    view = ListingView(lambda: load_properties(mongo, settings.PROPERTIES_LIMIT))
    await view.load()

    view.set_search(search)
    view.set_category(category)
    view.set_tag(tag)
    view.set_status(status)
    view.set_price_range(low, high)

    # the Filters button decides; otherwise keep the panel open while a selector is in use
    if filters is None:
        filters = (category, tag, status) != (ALL, ALL, ALL) or (low, high) != DEFAULT_PRICE_RANGE
    if filters:
        view.toggle_filters()

    return HTMLResponse(render_page(view))
