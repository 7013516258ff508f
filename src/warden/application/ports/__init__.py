"""Application layer ports (aka interfaces)."""

from warden.application.ports.transaction_manager import TransactionManager
from warden.application.ports.ttl_cache import TTLCache

__all__ = ["TTLCache", "TransactionManager"]
