"""Saved delivery location use cases"""

from typing import List
from uuid import UUID

from ...core.exceptions import NotFoundError
from ...domain.entities.location import Location
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import UserId
from ..dtos.common import MessageResponse
from ..dtos.location_dtos import CreateLocationDto, LocationDto, UpdateLocationDto

LOCATION_NOT_FOUND = "Location not found"


class ListLocationsUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID) -> List[LocationDto]:
        async with self.unit_of_work:
            locations = await self.unit_of_work.locations.list_for_user(UserId(user_id))
        return [LocationDto.from_entity(location) for location in locations]


class GetLocationUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID, location_id: UUID) -> LocationDto:
        async with self.unit_of_work:
            location = await self.unit_of_work.locations.get_for_user(location_id, UserId(user_id))
        if not location:
            raise NotFoundError(LOCATION_NOT_FOUND)
        return LocationDto.from_entity(location)


class CreateLocationUseCase:
    """The first saved location always becomes the default"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID, request: CreateLocationDto) -> LocationDto:
        owner = UserId(user_id)
        async with self.unit_of_work:
            locations = self.unit_of_work.locations
            make_default = request.is_default or await locations.count_for_user(owner) == 0
            if make_default:
                await locations.clear_default(owner)

            location = Location(
                user_id=owner,
                label=request.label,
                address=request.address,
                apartment=request.apartment,
                floor=request.floor,
                building=request.building,
                landmark=request.landmark,
                latitude=request.latitude,
                longitude=request.longitude,
                is_default=make_default,
            )
            await locations.add(location)
            await self.unit_of_work.commit()

        return LocationDto.from_entity(location)


class UpdateLocationUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID, location_id: UUID, request: UpdateLocationDto) -> LocationDto:
        owner = UserId(user_id)
        async with self.unit_of_work:
            locations = self.unit_of_work.locations
            location = await locations.get_for_user(location_id, owner)
            if not location:
                raise NotFoundError(LOCATION_NOT_FOUND)

            changes = request.model_dump(exclude_unset=True)
            # label, address and is_default cannot be cleared
            changes = {
                key: value for key, value in changes.items()
                if value is not None or key not in ("label", "address", "is_default")
            }
            if changes.get("is_default"):
                await locations.clear_default(owner)
            for field_name, value in changes.items():
                setattr(location, field_name, value)

            await locations.update(location)
            await self.unit_of_work.commit()

        return LocationDto.from_entity(location)


class DeleteLocationUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID, location_id: UUID) -> MessageResponse:
        owner = UserId(user_id)
        async with self.unit_of_work:
            locations = self.unit_of_work.locations
            location = await locations.get_for_user(location_id, owner)
            if not location:
                raise NotFoundError(LOCATION_NOT_FOUND)

            await locations.delete(location.id)

            # Promote the newest remaining location
            if location.is_default:
                successor = await locations.get_most_recent(owner)
                if successor:
                    successor.is_default = True
                    await locations.update(successor)

            await self.unit_of_work.commit()

        return MessageResponse(message="Location deleted successfully")


class SetDefaultLocationUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UUID, location_id: UUID) -> LocationDto:
        owner = UserId(user_id)
        async with self.unit_of_work:
            locations = self.unit_of_work.locations
            location = await locations.get_for_user(location_id, owner)
            if not location:
                raise NotFoundError(LOCATION_NOT_FOUND)

            await locations.clear_default(owner)
            location.is_default = True
            await locations.update(location)
            await self.unit_of_work.commit()

        return LocationDto.from_entity(location)
