from abc import ABC, abstractmethod
from typing import Sequence

from src.service.cinema.domain.entity.payment_entity import Payment


class IPaymentRepo(ABC):
    @abstractmethod
    async def create(self, *, payment: Payment) -> Payment:
        pass

    @abstractmethod
    async def get_by_booking_id(self, *, booking_id: int) -> Payment | None:
        pass

    @abstractmethod
    async def delete_by_booking_ids(self, *, booking_ids: Sequence[int]) -> int:
        pass
