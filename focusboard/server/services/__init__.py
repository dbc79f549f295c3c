"""
Business logic services

- Service 类通过单例导出，在 API 层复用（依赖 Provider 的服务）
- 核心逻辑（粒度选择 / 序列提取 / 格式化 / 日期预设）作为纯函数模块导入
"""

from .stats_service import StatsService

from . import granularity_selector
from . import series_builder
from . import summary_formatter
from . import date_presets
from . import range_service

# 创建单例实例
stats_service = StatsService()

__all__ = [
    "stats_service",
    "StatsService",
    "granularity_selector",
    "series_builder",
    "summary_formatter",
    "date_presets",
    "range_service",
]
