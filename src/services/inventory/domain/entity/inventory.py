from services.inventory.domain.value_object import (
    FlightNumber,
    InventoryId,
    Route,
    SeatSet,
)
from services.shared.domain import AggregateRoot, IsoDateTime, Money
from services.shared.domain.exception import BusinessRuleViolationException


class Inventory(AggregateRoot[InventoryId]):
    """フライト在庫（座席数と空席状況）

    空席の増減は reserve / swap を経由してのみ行う。
    version は読み込み時点の永続化バージョンで、楽観ロックに使う。
    """

    def __init__(
        self,
        id: InventoryId,
        airline: str,
        flight_number: FlightNumber,
        route: Route,
        departure_time: IsoDateTime,
        arrival_time: IsoDateTime,
        total_seats: int,
        price: Money,
        available_seats: SeatSet,
        airline_logo_url: str | None = None,
        version: int = 0,
    ) -> None:
        super().__init__(id)

        self._airline = airline
        self._airline_logo_url = airline_logo_url
        self._flight_number = flight_number
        self._route = route
        self._departure_time = departure_time
        self._arrival_time = arrival_time
        self._total_seats = total_seats
        self._price = price
        self._available_seats = available_seats
        self._version = version

        self._validate()

    def _validate(self) -> None:
        if self._route.is_same_place():
            raise BusinessRuleViolationException(
                "Origin and destination cannot be the same"
            )
        if not self._arrival_time.is_after(self._departure_time):
            raise BusinessRuleViolationException("Arrival must be after departure")
        if self._total_seats <= 0:
            raise BusinessRuleViolationException("Total seats must be > 0")
        if not self._available_seats.issubset(self.seat_map):
            raise BusinessRuleViolationException(
                "Available seats must belong to the seat map"
            )

    @property
    def airline(self) -> str:
        return self._airline

    @property
    def airline_logo_url(self) -> str | None:
        return self._airline_logo_url

    @property
    def flight_number(self) -> FlightNumber:
        return self._flight_number

    @property
    def route(self) -> Route:
        return self._route

    @property
    def departure_time(self) -> IsoDateTime:
        return self._departure_time

    @property
    def arrival_time(self) -> IsoDateTime:
        return self._arrival_time

    @property
    def total_seats(self) -> int:
        return self._total_seats

    @property
    def price(self) -> Money:
        return self._price

    @property
    def available_seats(self) -> SeatSet:
        return self._available_seats

    @property
    def version(self) -> int:
        return self._version

    @property
    def seat_map(self) -> SeatSet:
        """作成時に生成された全座席"""
        return SeatSet.generate(self._total_seats)

    def has_departed(self, now: IsoDateTime) -> bool:
        """出発時刻が現在以前かどうか"""
        return not self._departure_time.is_after(now)

    def is_available(self, seats: SeatSet) -> bool:
        """指定座席がすべて空席かどうか"""
        return seats.issubset(self._available_seats)

    def reserve(self, seats: SeatSet) -> None:
        """座席を確保する（空席から取り除く）"""
        if not self.is_available(seats):
            raise BusinessRuleViolationException("Some selected seats are unavailable")
        self._available_seats = self._available_seats.difference(seats)

    def swap(self, held: SeatSet, requested: SeatSet) -> None:
        """予約済み座席を別の座席に付け替える

        held を空席とみなした一時集合の中に requested が収まる場合のみ成功する。
        付け替えの途中で held が他の予約者に渡ることはない。
        """
        temporary = self._available_seats.union(held.intersection(self.seat_map))
        if not requested.issubset(temporary):
            raise BusinessRuleViolationException(
                "One or more requested seats are not available"
            )
        self._available_seats = temporary.difference(requested)
