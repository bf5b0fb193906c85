from pydantic import BaseModel
from typing import List


class Property(BaseModel):
    id: str = ""
    name: str = "Unknown"
    location: str = "Unknown"
    address: str = ""
    category: str = "Uncategorized"
    tags: List[str] = []
    min_price: int = 0
    max_price: int = 0
    price_per_sqft: float = 0.0
    units: int = 0
    total_area: str = "N/A"
    status: str = "Unknown"
    photo_url: str = ""
    listing_url: str = "#"
    amenities: List[str] = []
    latitude: float = 0.0
    longitude: float = 0.0
