from .inventory import Inventory as Inventory
