from .logger import get_logger
from .lazy_singleton import LazySingleton
from .time_utils import round_to_start, round_to_end, localize

__all__ = [
    "get_logger",
    "LazySingleton",
    "round_to_start",
    "round_to_end",
    "localize",
]
