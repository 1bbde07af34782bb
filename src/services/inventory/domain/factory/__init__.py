from .inventory_factory import InventoryDetails as InventoryDetails
from .inventory_factory import InventoryFactory as InventoryFactory
