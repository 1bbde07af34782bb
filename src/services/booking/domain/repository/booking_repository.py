from abc import abstractmethod

from services.booking.domain.entity import Booking
from services.booking.domain.value_object import Pnr
from services.shared.domain import Email, Repository


class BookingRepository(Repository[Booking]):
    """フライト予約レポジトリ"""

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """新規予約を永続化する（PNR が重複する場合は DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def update(self, booking: Booking) -> None:
        """未キャンセルの予約を更新する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_pnr(self, pnr: Pnr) -> Booking | None:
        """PNRで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_email(self, email: Email) -> list[Booking]:
        """メールアドレスで検索（新しい順）"""
        raise NotImplementedError
