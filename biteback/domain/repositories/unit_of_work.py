"""Unit of Work interface for transaction management"""

from abc import ABC, abstractmethod

from .user_repository import IUserRepository
from .token_repository import IRefreshTokenRepository, IPasswordResetTokenRepository
from .cart_repository import ICartRepository, IMenuRepository
from .order_repository import IOrderRepository
from .location_repository import ILocationRepository
from .payment_method_repository import IPaymentMethodRepository
from .notification_settings_repository import INotificationSettingsRepository


class IUnitOfWork(ABC):
    """Unit of Work interface for managing transactions across repositories"""

    users: IUserRepository
    refresh_tokens: IRefreshTokenRepository
    reset_tokens: IPasswordResetTokenRepository
    carts: ICartRepository
    menu: IMenuRepository
    orders: IOrderRepository
    locations: ILocationRepository
    payment_methods: IPaymentMethodRepository
    notification_settings: INotificationSettingsRepository

    @abstractmethod
    async def __aenter__(self):
        """Enter async context"""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context"""
        pass

    @abstractmethod
    async def commit(self):
        """Commit transaction"""
        pass

    @abstractmethod
    async def rollback(self):
        """Rollback transaction"""
        pass
