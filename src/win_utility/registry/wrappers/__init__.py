from win_utility.registry.wrappers.base import BaseWrapper
from win_utility.registry.wrappers.logging import LoggingWrapper
from win_utility.registry.wrappers.statistics import HierarchicalStoreStatistics, StatisticsWrapper

__all__ = ["BaseWrapper", "HierarchicalStoreStatistics", "LoggingWrapper", "StatisticsWrapper"]
