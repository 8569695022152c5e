"""Saved delivery location entity"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from .order import DeliveryLocation
from ..value_objects.entity_ids import UserId


@dataclass
class Location:
    user_id: UserId
    label: str
    address: str
    apartment: Optional[str] = None
    floor: Optional[str] = None
    building: Optional[str] = None
    landmark: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    is_default: bool = False
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def to_delivery_location(self) -> DeliveryLocation:
        return DeliveryLocation(
            id=self.id,
            label=self.label,
            address=self.address,
            apartment=self.apartment,
            floor=self.floor,
            building=self.building,
            landmark=self.landmark,
            latitude=self.latitude,
            longitude=self.longitude,
        )
