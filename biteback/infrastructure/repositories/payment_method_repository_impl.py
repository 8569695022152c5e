"""Saved payment method repository implementation"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import desc
from sqlalchemy.orm import Session

from ...domain.entities.payment_method import PaymentMethod
from ...domain.enums import PaymentMethodType, PaymentStatus
from ...domain.repositories.payment_method_repository import IPaymentMethodRepository
from ...domain.value_objects.entity_ids import UserId
from ..orm.order_model import PaymentTransactionModel
from ..orm.payment_method_model import PaymentMethodModel


class PaymentMethodRepositoryImpl(IPaymentMethodRepository):

    def __init__(self, session: Session):
        self.session = session

    async def list_for_user(self, user_id: UserId) -> List[PaymentMethod]:
        models = self.session.query(PaymentMethodModel).filter(
            PaymentMethodModel.user_id == user_id.value
        ).order_by(desc(PaymentMethodModel.is_default), desc(PaymentMethodModel.created_at)).all()
        return [self._map_to_entity(model) for model in models]

    async def get_for_user(self, payment_method_id: UUID, user_id: UserId) -> Optional[PaymentMethod]:
        model = self.session.query(PaymentMethodModel).filter(
            PaymentMethodModel.id == payment_method_id,
            PaymentMethodModel.user_id == user_id.value,
        ).first()
        return self._map_to_entity(model) if model else None

    async def count_for_user(self, user_id: UserId) -> int:
        return self.session.query(PaymentMethodModel).filter(
            PaymentMethodModel.user_id == user_id.value
        ).count()

    async def add(self, payment_method: PaymentMethod) -> PaymentMethod:
        model = PaymentMethodModel(
            id=payment_method.id,
            user_id=payment_method.user_id.value,
            type=payment_method.type,
            card_token=payment_method.card_token,
            last_four_digits=payment_method.last_four_digits,
            card_brand=payment_method.card_brand,
            expiry_month=payment_method.expiry_month,
            expiry_year=payment_method.expiry_year,
            is_default=payment_method.is_default,
            created_at=payment_method.created_at,
        )
        self.session.add(model)
        self.session.flush()
        return payment_method

    async def delete(self, payment_method_id: UUID) -> None:
        model = self.session.query(PaymentMethodModel).filter(PaymentMethodModel.id == payment_method_id).first()
        if model:
            self.session.delete(model)
            self.session.flush()

    async def clear_default(self, user_id: UserId) -> None:
        self.session.query(PaymentMethodModel).filter(
            PaymentMethodModel.user_id == user_id.value,
            PaymentMethodModel.is_default.is_(True),
        ).update({PaymentMethodModel.is_default: False}, synchronize_session='fetch')
        self.session.flush()

    async def set_default(self, payment_method_id: UUID) -> None:
        model = self.session.query(PaymentMethodModel).filter(PaymentMethodModel.id == payment_method_id).first()
        if model:
            model.is_default = True
            self.session.flush()

    async def get_most_recent(self, user_id: UserId) -> Optional[PaymentMethod]:
        model = self.session.query(PaymentMethodModel).filter(
            PaymentMethodModel.user_id == user_id.value
        ).order_by(desc(PaymentMethodModel.created_at)).first()
        return self._map_to_entity(model) if model else None

    async def has_pending_transactions(self, payment_method_id: UUID) -> bool:
        return self.session.query(PaymentTransactionModel.id).filter(
            PaymentTransactionModel.payment_method_id == payment_method_id,
            PaymentTransactionModel.status == PaymentStatus.PENDING,
        ).first() is not None

    def _map_to_entity(self, model: PaymentMethodModel) -> PaymentMethod:
        return PaymentMethod(
            id=model.id,
            user_id=UserId(model.user_id),
            type=PaymentMethodType(model.type),
            card_token=model.card_token,
            last_four_digits=model.last_four_digits,
            card_brand=model.card_brand,
            expiry_month=model.expiry_month,
            expiry_year=model.expiry_year,
            is_default=model.is_default,
            created_at=model.created_at,
        )
