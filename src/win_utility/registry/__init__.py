from win_utility.registry.deleter import SubtreeDeleter, delete_registry_path
from win_utility.registry.path_buffer import PathBuffer
from win_utility.registry.protocol import HierarchicalStore

__all__ = ["HierarchicalStore", "PathBuffer", "SubtreeDeleter", "delete_registry_path"]
