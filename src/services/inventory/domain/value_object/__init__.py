from .flight_number import FlightNumber as FlightNumber
from .inventory_id import InventoryId as InventoryId
from .route import Route as Route
from .seat_set import SeatSet as SeatSet
