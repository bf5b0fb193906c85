"""
Reshape raw listing documents into the flat schema served by /api/properties.

Two document shapes live in the collection:

    envelope:  {"_id", "fields": {"title", "address", ...},
                "taxonomies": {"category": [...], "location": [...], "tags": [...]}}
    flat:      {"_id", "Apartment Name", "Location", "Minimum Price", ...}

Envelope documents are remapped onto the flat names. Flat documents pass
through. Boxed numbers ({"$numberInt": "42"}) are left as they are.
"""
import math
from datetime import datetime
from typing import Any

from bson import ObjectId
from bson.decimal128 import Decimal128

# envelope "fields" key -> flat response key
FIELD_MAP: dict[str, str] = {
    "title": "Apartment Name",
    "address": "Address",
    "min_price": "Minimum Price",
    "max_price": "Maximum Price",
    "price_per_sqft": "Per Sqft Cost",
    "units": "Number of Units",
    "total_area": "Total Area",
    "status": "Project Status",
    "photo_url": "Photo URL",
    "listing_url": "Listing URL",
    "amenities": "Amenities",
    "latitude": "Latitude",
    "longitude": "Longitude",
}


def is_envelope(doc: dict) -> bool:
    return isinstance(doc.get("fields"), dict) or isinstance(doc.get("taxonomies"), dict)


def _first(values) -> Any:
    if isinstance(values, list):
        return values[0] if values else None
    return values


def _as_list(values) -> list:
    if values is None:
        return []
    if isinstance(values, list):
        return values
    return [values]


def _stringify_id(value) -> str | None:
    if value is None:
        return None
    if isinstance(value, dict) and "$oid" in value:
        return str(value["$oid"])
    return str(value)


def _json_safe(value):
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, Decimal128):
        return str(value.to_decimal())
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return value


def _flatten_envelope(doc: dict) -> dict:
    fields = doc.get("fields") or {}
    taxonomies = doc.get("taxonomies") or {}

    out: dict[str, Any] = {}
    for src, dest in FIELD_MAP.items():
        if src in fields:
            out[dest] = fields[src]

    # a single "price" stands in for the minimum when no range is given
    if "Minimum Price" not in out and "price" in fields:
        out["Minimum Price"] = fields["price"]

    location = _first(taxonomies.get("location")) or fields.get("address")
    if location is not None:
        out["Location"] = location

    category = _first(taxonomies.get("category"))
    if category is not None:
        out["Category"] = category

    out["Tags"] = _as_list(taxonomies.get("tags"))
    return out


def to_response_document(doc: dict) -> dict:
    if is_envelope(doc):
        out = _flatten_envelope(doc)
    else:
        out = {k: v for k, v in doc.items() if k != "_id"}

    doc_id = _stringify_id(doc.get("_id"))
    if doc_id is not None:
        out = {"_id": doc_id, **out}

    return _json_safe(out)
