"""
Pydantic models for postal-code geocoding.
"""

from pydantic import BaseModel, Field


class PostalQuery(BaseModel):
    """A postal code and the ISO country code it belongs to."""

    postal_code: str = Field(
        ...,
        min_length=1,
        description="Postal / PIN / ZIP code",
        examples=["400001"],
    )
    country_code: str = Field(
        ...,
        min_length=1,
        description="ISO 3166-1 alpha-2 country code",
        examples=["IN"],
    )


class Coordinates(BaseModel):
    """Resolved location. Both fields are finite and within geographic range."""

    latitude: float = Field(..., ge=-90.0, le=90.0, allow_inf_nan=False)
    longitude: float = Field(..., ge=-180.0, le=180.0, allow_inf_nan=False)
