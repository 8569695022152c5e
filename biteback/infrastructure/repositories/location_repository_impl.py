"""Saved location repository implementation"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import desc
from sqlalchemy.orm import Session

from ...domain.entities.location import Location
from ...domain.repositories.location_repository import ILocationRepository
from ...domain.value_objects.entity_ids import UserId
from ..orm.location_model import LocationModel


class LocationRepositoryImpl(ILocationRepository):

    def __init__(self, session: Session):
        self.session = session

    async def list_for_user(self, user_id: UserId) -> List[Location]:
        models = self.session.query(LocationModel).filter(
            LocationModel.user_id == user_id.value
        ).order_by(desc(LocationModel.is_default), desc(LocationModel.created_at)).all()
        return [self._map_to_entity(model) for model in models]

    async def get_for_user(self, location_id: UUID, user_id: UserId) -> Optional[Location]:
        model = self._get_model(location_id, user_id)
        return self._map_to_entity(model) if model else None

    async def count_for_user(self, user_id: UserId) -> int:
        return self.session.query(LocationModel).filter(LocationModel.user_id == user_id.value).count()

    async def add(self, location: Location) -> Location:
        model = LocationModel(id=location.id, user_id=location.user_id.value)
        self._update_model_from_entity(model, location)
        model.created_at = location.created_at
        self.session.add(model)
        self.session.flush()
        return location

    async def update(self, location: Location) -> Location:
        model = self._get_model(location.id, location.user_id)
        if model:
            self._update_model_from_entity(model, location)
            self.session.flush()
        return location

    async def delete(self, location_id: UUID) -> None:
        model = self.session.query(LocationModel).filter(LocationModel.id == location_id).first()
        if model:
            self.session.delete(model)
            self.session.flush()

    async def clear_default(self, user_id: UserId) -> None:
        self.session.query(LocationModel).filter(
            LocationModel.user_id == user_id.value,
            LocationModel.is_default.is_(True),
        ).update({LocationModel.is_default: False}, synchronize_session='fetch')
        self.session.flush()

    async def get_most_recent(self, user_id: UserId) -> Optional[Location]:
        model = self.session.query(LocationModel).filter(
            LocationModel.user_id == user_id.value
        ).order_by(desc(LocationModel.created_at)).first()
        return self._map_to_entity(model) if model else None

    def _get_model(self, location_id: UUID, user_id: UserId) -> Optional[LocationModel]:
        return self.session.query(LocationModel).filter(
            LocationModel.id == location_id,
            LocationModel.user_id == user_id.value,
        ).first()

    def _update_model_from_entity(self, model: LocationModel, location: Location) -> None:
        model.label = location.label
        model.address = location.address
        model.apartment = location.apartment
        model.floor = location.floor
        model.building = location.building
        model.landmark = location.landmark
        model.latitude = location.latitude
        model.longitude = location.longitude
        model.is_default = location.is_default
        model.updated_at = datetime.utcnow()

    def _map_to_entity(self, model: LocationModel) -> Location:
        return Location(
            id=model.id,
            user_id=UserId(model.user_id),
            label=model.label,
            address=model.address,
            apartment=model.apartment,
            floor=model.floor,
            building=model.building,
            landmark=model.landmark,
            latitude=model.latitude,
            longitude=model.longitude,
            is_default=model.is_default,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
