"""Infrastructure ORM Models"""

from .user_model import UserModel
from .token_models import RefreshTokenModel, PasswordResetTokenModel
from .restaurant_model import (
    RestaurantModel,
    MenuCategoryModel,
    MenuItemModel,
    AddOnGroupModel,
    AddOnOptionModel,
)
from .cart_model import CartModel, CartItemModel, CartItemAddOnModel
from .order_model import OrderModel, OrderItemModel, OrderItemAddOnModel, PaymentTransactionModel
from .location_model import LocationModel
from .payment_method_model import PaymentMethodModel
from .notification_settings_model import NotificationSettingsModel

__all__ = [
    'UserModel',
    'RefreshTokenModel',
    'PasswordResetTokenModel',
    'RestaurantModel',
    'MenuCategoryModel',
    'MenuItemModel',
    'AddOnGroupModel',
    'AddOnOptionModel',
    'CartModel',
    'CartItemModel',
    'CartItemAddOnModel',
    'OrderModel',
    'OrderItemModel',
    'OrderItemAddOnModel',
    'PaymentTransactionModel',
    'LocationModel',
    'PaymentMethodModel',
    'NotificationSettingsModel',
]
