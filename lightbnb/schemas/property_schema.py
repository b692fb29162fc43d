from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import date


class PropertyBase(BaseModel):
    owner_id: Optional[int] = None
    title: str
    description: Optional[str] = None
    thumbnail_photo_url: str
    cover_photo_url: Optional[str] = None
    cost_per_night: int = Field(0, ge=0, description="Nightly cost in cents")
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    country: Optional[str] = None
    street: Optional[str] = None
    city: str
    province: Optional[str] = None
    post_code: Optional[str] = None
    active: bool = True


class PropertyCreate(PropertyBase):
    # listing forms may carry fields beyond the table columns
    model_config = ConfigDict(extra="allow")


class Property(PropertyBase):
    id: int

    model_config = ConfigDict(from_attributes=True, extra="allow")


class PropertyListing(Property):
    """A property row joined with its reviews."""

    average_rating: float


class ReservationListing(PropertyListing):
    """A guest's reservation together with the reserved property."""

    reservation_id: int
    start_date: date
    end_date: date


class PropertySearch(BaseModel):
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[float] = None
    maximum_price_per_night: Optional[float] = None
    city: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator(
        "owner_id", "minimum_price_per_night", "maximum_price_per_night", "city", mode="before"
    )
    @classmethod
    def blank_as_none(cls, value):
        # search forms send unset fields as empty strings
        if isinstance(value, str) and not value.strip():
            return None
        return value
