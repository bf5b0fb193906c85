"""Shared pytest fixtures and configuration."""

import os
import pytest
from unittest.mock import AsyncMock, MagicMock

from bson import ObjectId

# Set test environment variables
os.environ.setdefault("MONGODB_DB", "ccube_research")
os.environ.setdefault("MONGODB_COLLECTION", "apartment")
os.environ.setdefault("LOG_LEVEL", "WARNING")


class FakeCursor:
    """Minimal stand-in for a motor cursor: find().limit().to_list()."""

    def __init__(self, docs):
        self.docs = docs
        self.limit_value = None

    def limit(self, n):
        self.limit_value = n
        return self

    async def to_list(self, length=None):
        if self.limit_value:
            return list(self.docs[: self.limit_value])
        return list(self.docs)


def make_collection(docs):
    collection = MagicMock()
    collection.find.return_value = FakeCursor(docs)
    return collection


def make_mongo(docs):
    mongo = MagicMock()
    mongo.connect = AsyncMock()
    mongo.collection = make_collection(docs)
    return mongo


@pytest.fixture
def flat_document():
    """Flat-shape document with boxed numbers, as exported from Atlas."""
    return {
        "_id": {"$oid": "64f1c2a9e4b0a1b2c3d4e5f6"},
        "Apartment Name": "Prestige Lakeside Habitat",
        "Location": "Whitefield, Bangalore",
        "Minimum Price": {"$numberInt": "8500000"},
        "Maximum Price": {"$numberInt": "21000000"},
        "Per Sqft Cost": {"$numberDouble": "7450.5"},
        "Number of Units": {"$numberInt": "3426"},
        "Total Area": "102 Acres",
        "Project Status": "Ready to Move",
        "Photo URL": "https://img.example.com/prestige.jpg",
        "Listing URL": "https://listings.example.com/prestige",
        "Amenities": ["Swimming Pool", "Gym", "Clubhouse"],
        "Latitude": {"$numberDouble": "12.9784"},
        "Longitude": {"$numberDouble": "77.7507"},
    }


@pytest.fixture
def envelope_document():
    """Envelope-shape document with fields and taxonomies."""
    return {
        "_id": ObjectId("64f1c2a9e4b0a1b2c3d4e5f7"),
        "fields": {
            "title": "Sobha Dream Acres",
            "address": "Panathur Road, Bangalore",
            "latitude": 12.9389,
            "longitude": 77.7006,
            "price": 6200000,
            "max_price": 9800000,
            "status": "Under Construction",
            "amenities": ["Jogging Track"],
            "photo_url": "https://img.example.com/sobha.jpg",
            "listing_url": "https://listings.example.com/sobha",
        },
        "taxonomies": {
            "category": ["Apartment"],
            "location": ["Marathahalli"],
            "tags": ["gated", "metro"],
        },
    }


@pytest.fixture
def sample_documents(flat_document, envelope_document):
    return [flat_document, envelope_document]


@pytest.fixture
def collection_factory():
    return make_collection


@pytest.fixture
def mongo_factory():
    return make_mongo
