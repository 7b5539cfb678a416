from events.stores.interfaces import EventOpsStore
from events.stores.memory_store import InMemoryEventOpsStore

__all__ = ["EventOpsStore", "InMemoryEventOpsStore"]
