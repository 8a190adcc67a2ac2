from win_utility.registry.wrappers.logging.wrapper import LoggingWrapper

__all__ = ["LoggingWrapper"]
