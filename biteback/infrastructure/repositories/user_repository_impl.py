"""User repository implementation using SQLAlchemy ORM"""

from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from ...domain.repositories.user_repository import IUserRepository
from ...domain.entities.user import User, normalize_email
from ...domain.value_objects.entity_ids import UserId
from ...domain.enums import UserRole
from ..orm.user_model import UserModel


class UserRepositoryImpl(IUserRepository):
    """Repository implementation for User aggregate"""

    def __init__(self, session: Session):
        self.session = session

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        model = self.session.query(UserModel).filter(UserModel.id == user_id.value).first()
        return self._map_to_entity(model) if model else None

    async def get_by_email(self, email: str) -> Optional[User]:
        model = self.session.query(UserModel).filter(UserModel.email == normalize_email(email)).first()
        return self._map_to_entity(model) if model else None

    async def get_by_phone(self, phone: str) -> Optional[User]:
        model = self.session.query(UserModel).filter(UserModel.phone == phone.strip()).first()
        return self._map_to_entity(model) if model else None

    async def get_by_email_or_phone(self, identifier: str) -> Optional[User]:
        model = self.session.query(UserModel).filter(
            or_(
                UserModel.email == normalize_email(identifier),
                UserModel.phone == identifier.strip(),
            )
        ).first()
        return self._map_to_entity(model) if model else None

    async def exists_by_email(self, email: str, exclude_id: Optional[UserId] = None) -> bool:
        query = self.session.query(UserModel.id).filter(UserModel.email == normalize_email(email))
        if exclude_id is not None:
            query = query.filter(UserModel.id != exclude_id.value)
        return query.first() is not None

    async def exists_by_phone(self, phone: str, exclude_id: Optional[UserId] = None) -> bool:
        query = self.session.query(UserModel.id).filter(UserModel.phone == phone.strip())
        if exclude_id is not None:
            query = query.filter(UserModel.id != exclude_id.value)
        return query.first() is not None

    async def add(self, user: User) -> User:
        model = UserModel(
            id=user.id.value,
            email=user.email,
            phone=user.phone,
            hashed_password=user.hashed_password,
            full_name=user.full_name,
            avatar_url=user.avatar_url,
            role=user.role,
            is_phone_verified=user.is_phone_verified,
            is_email_verified=user.is_email_verified,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self.session.add(model)
        self.session.flush()
        return user

    async def update(self, user: User) -> User:
        existing = self.session.query(UserModel).filter(UserModel.id == user.id.value).first()
        if existing:
            self._update_model_from_entity(existing, user)
            self.session.flush()
        return user

    def _update_model_from_entity(self, model: UserModel, user: User) -> None:
        model.email = user.email
        model.phone = user.phone
        model.hashed_password = user.hashed_password
        model.full_name = user.full_name
        model.avatar_url = user.avatar_url
        model.role = user.role
        model.is_phone_verified = user.is_phone_verified
        model.is_email_verified = user.is_email_verified
        model.updated_at = user.updated_at

    def _map_to_entity(self, model: UserModel) -> User:
        return User(
            id=UserId(model.id),
            email=model.email,
            phone=model.phone,
            hashed_password=model.hashed_password,
            full_name=model.full_name,
            role=UserRole(model.role),
            avatar_url=model.avatar_url,
            is_phone_verified=model.is_phone_verified,
            is_email_verified=model.is_email_verified,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
