"""Unit of Work implementation with proper async support"""

from sqlalchemy.orm import Session

from ...domain.repositories.unit_of_work import IUnitOfWork
from .user_repository_impl import UserRepositoryImpl
from .token_repository_impl import RefreshTokenRepositoryImpl, PasswordResetTokenRepositoryImpl
from .cart_repository_impl import CartRepositoryImpl
from .menu_repository_impl import MenuRepositoryImpl
from .order_repository_impl import OrderRepositoryImpl
from .location_repository_impl import LocationRepositoryImpl
from .payment_method_repository_impl import PaymentMethodRepositoryImpl
from .notification_settings_repository_impl import NotificationSettingsRepositoryImpl


class UnitOfWorkImpl(IUnitOfWork):

    def __init__(self, session: Session):
        self.session = session
        self.users = UserRepositoryImpl(session)
        self.refresh_tokens = RefreshTokenRepositoryImpl(session)
        self.reset_tokens = PasswordResetTokenRepositoryImpl(session)
        self.carts = CartRepositoryImpl(session)
        self.menu = MenuRepositoryImpl(session)
        self.orders = OrderRepositoryImpl(session)
        self.locations = LocationRepositoryImpl(session)
        self.payment_methods = PaymentMethodRepositoryImpl(session)
        self.notification_settings = NotificationSettingsRepositoryImpl(session)
        self._committed = False

    async def __aenter__(self):
        self._committed = False
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            await self.rollback()
        elif not self._committed:
            await self.commit()

    async def commit(self) -> None:
        """Commit transaction"""
        try:
            self.session.commit()
            self._committed = True
        except Exception:
            self.rollback_sync()
            raise

    async def rollback(self) -> None:
        """Rollback transaction"""
        self.rollback_sync()

    def rollback_sync(self) -> None:
        """Synchronous rollback helper"""
        self.session.rollback()
