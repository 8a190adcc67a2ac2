from win_utility.registry.wrappers.statistics.wrapper import HierarchicalStoreStatistics, StatisticsWrapper

__all__ = ["HierarchicalStoreStatistics", "StatisticsWrapper"]
