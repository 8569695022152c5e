"""Saved location DTOs"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from ...domain.entities.location import Location


class CreateLocationDto(BaseModel):
    label: str = Field(min_length=1, max_length=50)
    address: str = Field(min_length=1, max_length=500)
    apartment: Optional[str] = Field(default=None, max_length=20)
    floor: Optional[str] = Field(default=None, max_length=20)
    building: Optional[str] = Field(default=None, max_length=100)
    landmark: Optional[str] = Field(default=None, max_length=200)
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    is_default: bool = False


class UpdateLocationDto(BaseModel):
    label: Optional[str] = Field(default=None, min_length=1, max_length=50)
    address: Optional[str] = Field(default=None, min_length=1, max_length=500)
    apartment: Optional[str] = Field(default=None, max_length=20)
    floor: Optional[str] = Field(default=None, max_length=20)
    building: Optional[str] = Field(default=None, max_length=100)
    landmark: Optional[str] = Field(default=None, max_length=200)
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    is_default: Optional[bool] = None


class LocationDto(BaseModel):
    id: UUID
    label: str
    address: str
    apartment: Optional[str] = None
    floor: Optional[str] = None
    building: Optional[str] = None
    landmark: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    is_default: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, location: Location) -> 'LocationDto':
        return cls(
            id=location.id,
            label=location.label,
            address=location.address,
            apartment=location.apartment,
            floor=location.floor,
            building=location.building,
            landmark=location.landmark,
            latitude=location.latitude,
            longitude=location.longitude,
            is_default=location.is_default,
            created_at=location.created_at,
        )
