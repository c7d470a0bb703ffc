"""Services for Aimee application."""

from aimee.services.interaction_log import InteractionLog
from aimee.services.inventory import InventoryStore
from aimee.services.query_resolver import QueryResolver

__all__ = ["InteractionLog", "InventoryStore", "QueryResolver"]
