from typing import Tuple

from pydantic import BaseModel

from property_browser.listings.models import Property

ALL = "all"

STATUS_OPTIONS = ["Ready to Move", "Under Construction", "New Launch"]

DEFAULT_PRICE_RANGE: Tuple[int, int] = (0, 100_000_000)


class PropertyFilter(BaseModel):
    search: str = ""
    category: str = ALL
    tag: str = ALL
    status: str = ALL
    price_range: Tuple[int, int] = DEFAULT_PRICE_RANGE


def matches(prop: Property, f: PropertyFilter) -> bool:
    term = f.search.lower()
    matches_search = (
        term in prop.name.lower()
        or term in prop.location.lower()
        or term in prop.address.lower()
    )

    matches_category = f.category == ALL or prop.category == f.category
    matches_status = f.status == ALL or prop.status == f.status
    matches_tag = f.tag == ALL or f.tag in prop.tags

    low, high = f.price_range
    matches_price = low <= prop.min_price <= high

    return matches_search and matches_category and matches_status and matches_tag and matches_price


def filter_properties(properties: list[Property], f: PropertyFilter) -> list[Property]:
    return [p for p in properties if matches(p, f)]


def category_options(properties: list[Property]) -> list[str]:
    return sorted({p.category for p in properties})


def tag_options(properties: list[Property]) -> list[str]:
    return sorted({t for p in properties for t in p.tags})
