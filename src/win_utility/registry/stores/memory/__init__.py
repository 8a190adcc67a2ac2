from win_utility.registry.stores.memory.store import DEFAULT_HIVES, MemoryKeyHandle, MemoryRegistryStore

__all__ = ["DEFAULT_HIVES", "MemoryKeyHandle", "MemoryRegistryStore"]
