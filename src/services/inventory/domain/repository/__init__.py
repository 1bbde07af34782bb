from .inventory_repository import InventoryRepository as InventoryRepository
