from win_utility.registry.stores.windows_registry.store import WindowsRegistryStore

__all__ = ["WindowsRegistryStore"]
