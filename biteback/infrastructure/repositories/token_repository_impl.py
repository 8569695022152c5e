"""Refresh and password reset token repositories"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from ...domain.repositories.token_repository import (
    IRefreshTokenRepository,
    IPasswordResetTokenRepository,
    StoredRefreshToken,
    StoredResetToken,
)
from ...domain.value_objects.entity_ids import UserId
from ..orm.token_models import RefreshTokenModel, PasswordResetTokenModel


class RefreshTokenRepositoryImpl(IRefreshTokenRepository):

    def __init__(self, session: Session):
        self.session = session

    async def add(self, user_id: UserId, token: str, expires_at: datetime) -> StoredRefreshToken:
        model = RefreshTokenModel(
            user_id=user_id.value,
            token=token,
            expires_at=expires_at,
            created_at=datetime.utcnow(),
        )
        self.session.add(model)
        self.session.flush()
        return self._map(model)

    async def get_active(self, token: str, user_id: UserId) -> Optional[StoredRefreshToken]:
        model = self.session.query(RefreshTokenModel).filter(
            RefreshTokenModel.token == token,
            RefreshTokenModel.user_id == user_id.value,
            RefreshTokenModel.revoked_at.is_(None),
            RefreshTokenModel.expires_at > datetime.utcnow(),
        ).with_for_update().first()
        return self._map(model) if model else None

    async def revoke(self, token_id: UUID, replaced_by: Optional[str] = None) -> None:
        model = self.session.query(RefreshTokenModel).filter(RefreshTokenModel.id == token_id).first()
        if model:
            model.revoked_at = datetime.utcnow()
            model.replaced_by_token = replaced_by
            self.session.flush()

    async def revoke_all_for_user(self, user_id: UserId) -> int:
        count = self.session.query(RefreshTokenModel).filter(
            RefreshTokenModel.user_id == user_id.value,
            RefreshTokenModel.revoked_at.is_(None),
        ).update({RefreshTokenModel.revoked_at: datetime.utcnow()}, synchronize_session=False)
        self.session.flush()
        return count

    @staticmethod
    def _map(model: RefreshTokenModel) -> StoredRefreshToken:
        return StoredRefreshToken(
            id=model.id,
            user_id=UserId(model.user_id),
            token=model.token,
            expires_at=model.expires_at,
            revoked_at=model.revoked_at,
        )


class PasswordResetTokenRepositoryImpl(IPasswordResetTokenRepository):

    def __init__(self, session: Session):
        self.session = session

    async def add(self, user_id: UserId, token: str, expires_at: datetime) -> StoredResetToken:
        model = PasswordResetTokenModel(
            user_id=user_id.value,
            token=token,
            expires_at=expires_at,
            created_at=datetime.utcnow(),
        )
        self.session.add(model)
        self.session.flush()
        return self._map(model)

    async def get_valid(self, token: str) -> Optional[StoredResetToken]:
        model = self.session.query(PasswordResetTokenModel).filter(
            PasswordResetTokenModel.token == token,
            PasswordResetTokenModel.used_at.is_(None),
            PasswordResetTokenModel.expires_at > datetime.utcnow(),
        ).first()
        return self._map(model) if model else None

    async def mark_used(self, token_id: UUID) -> None:
        model = self.session.query(PasswordResetTokenModel).filter(PasswordResetTokenModel.id == token_id).first()
        if model:
            model.used_at = datetime.utcnow()
            self.session.flush()

    async def invalidate_unused_for_user(self, user_id: UserId) -> int:
        count = self.session.query(PasswordResetTokenModel).filter(
            PasswordResetTokenModel.user_id == user_id.value,
            PasswordResetTokenModel.used_at.is_(None),
        ).update({PasswordResetTokenModel.used_at: datetime.utcnow()}, synchronize_session=False)
        self.session.flush()
        return count

    @staticmethod
    def _map(model: PasswordResetTokenModel) -> StoredResetToken:
        return StoredResetToken(
            id=model.id,
            user_id=UserId(model.user_id),
            token=model.token,
            expires_at=model.expires_at,
            used_at=model.used_at,
        )
