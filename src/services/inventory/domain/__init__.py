from .entity import Inventory as Inventory
from .factory import InventoryDetails as InventoryDetails
from .factory import InventoryFactory as InventoryFactory
from .repository import InventoryRepository as InventoryRepository
from .value_object import FlightNumber as FlightNumber
from .value_object import InventoryId as InventoryId
from .value_object import Route as Route
from .value_object import SeatSet as SeatSet
