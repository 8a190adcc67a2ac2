from win_utility.registry.stores.memory import MemoryKeyHandle, MemoryRegistryStore

__all__ = ["MemoryKeyHandle", "MemoryRegistryStore"]
