"""
API路由模块
"""

from .stats_api import router as stats_router
from .range_api import router as range_router

__all__ = [
    "stats_router",
    "range_router",
]
