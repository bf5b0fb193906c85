import logging
import math
from typing import Any, Iterable

from property_browser.listings.models import Property
from property_browser.properties.reshape import is_envelope, to_response_document

logger = logging.getLogger(__name__)

INT_BOXES = ("$numberInt", "$numberLong")
FLOAT_BOXES = ("$numberDouble", "$numberDecimal")


def _unbox(value: Any, keys: Iterable[str]) -> Any:
    if isinstance(value, dict):
        for key in keys:
            if value.get(key) is not None:
                return value[key]
        return None
    return value


def _to_float(value: Any) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def unbox_int(value: Any, default: int = 0) -> int:
    """Read an int from a bare number, a numeric string or a boxed wrapper."""
    number = _to_float(_unbox(value, INT_BOXES + FLOAT_BOXES))
    return default if number is None else int(number)


def unbox_float(value: Any, default: float = 0.0) -> float:
    """Read a float from a bare number, a numeric string or a boxed wrapper."""
    number = _to_float(_unbox(value, FLOAT_BOXES + INT_BOXES))
    return default if number is None else number


def unbox_id(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, dict):
        return str(value.get("$oid", ""))
    return str(value)


def _text(value: Any, default: str) -> str:
    if value is None or value == "":
        return default
    if isinstance(value, (dict, list)):
        return default
    return str(value)


def _string_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, list):
        return [str(v) for v in value if v is not None and v != ""]
    return []


def to_property(doc: dict) -> Property:
    if is_envelope(doc):
        doc = to_response_document(doc)

    return Property(
        id=unbox_id(doc.get("_id")),
        name=_text(doc.get("Apartment Name"), "Unknown"),
        location=_text(doc.get("Location"), "Unknown"),
        address=_text(doc.get("Address"), ""),
        category=_text(doc.get("Category"), "Uncategorized"),
        tags=_string_list(doc.get("Tags")),
        min_price=unbox_int(doc.get("Minimum Price")),
        max_price=unbox_int(doc.get("Maximum Price")),
        price_per_sqft=unbox_float(doc.get("Per Sqft Cost")),
        units=unbox_int(doc.get("Number of Units")),
        total_area=_text(doc.get("Total Area"), "N/A"),
        status=_text(doc.get("Project Status"), "Unknown"),
        photo_url=_text(doc.get("Photo URL"), ""),
        listing_url=_text(doc.get("Listing URL"), "#"),
        amenities=_string_list(doc.get("Amenities")),
        latitude=unbox_float(doc.get("Latitude")),
        longitude=unbox_float(doc.get("Longitude")),
    )


def to_properties(documents: list[dict]) -> list[Property]:
    properties = [to_property(doc) for doc in documents if isinstance(doc, dict)]
    skipped = len(documents) - len(properties)
    if skipped:
        logger.warning(f"Skipped {skipped} non-object documents")
    return properties
