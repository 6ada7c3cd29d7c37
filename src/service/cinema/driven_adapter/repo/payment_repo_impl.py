from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_payment_repo import IPaymentRepo
from src.service.cinema.domain.entity.payment_entity import Payment
from src.service.cinema.driven_adapter.model.booking_model import PaymentModel


class PaymentRepoImpl(IPaymentRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, payment: Payment) -> Payment:
        db_payment = PaymentModel(booking_id=payment.booking_id, amount=payment.amount)
        if payment.paid_at is not None:
            db_payment.paid_at = payment.paid_at
        self.session.add(db_payment)
        await self.session.flush()
        return Payment(
            booking_id=db_payment.booking_id,
            amount=db_payment.amount,
            paid_at=db_payment.paid_at,
        )

    @Logger.io
    async def get_by_booking_id(self, *, booking_id: int) -> Payment | None:
        result = await self.session.execute(
            select(PaymentModel)
            .where(PaymentModel.booking_id == booking_id)
            .execution_options(populate_existing=True)
        )
        db_payment = result.scalar_one_or_none()
        if not db_payment:
            return None
        return Payment(
            booking_id=db_payment.booking_id,
            amount=db_payment.amount,
            paid_at=db_payment.paid_at,
        )

    @Logger.io
    async def delete_by_booking_ids(self, *, booking_ids: Sequence[int]) -> int:
        if not booking_ids:
            return 0
        result = await self.session.execute(
            delete(PaymentModel)
            .where(PaymentModel.booking_id.in_(booking_ids))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount  # type: ignore[attr-defined]
