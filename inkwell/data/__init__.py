from inkwell.data.statistics import CacheStatistics

__all__ = ["CacheStatistics"]
