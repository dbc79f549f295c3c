"""
主图粒度选择 - 纯函数模块

根据日期范围的跨度（整天数）决定主图按天 / 周 / 月 / 年展示
"""

import math
from datetime import date, datetime
from enum import Enum
from typing import Union

from focusboard.config.settings import (
    DAILY_MAX_DAYS,
    WEEKLY_MAX_DAYS,
    MONTHLY_MAX_DAYS,
    SECONDS_PER_DAY,
)
from focusboard.server.exceptions import InvalidRangeError
from focusboard.utils import localize

Timestamp = Union[date, datetime]


def _kind(value: Timestamp) -> str:
    if not isinstance(value, datetime):
        return "date"
    return "naive" if value.tzinfo is None else "aware"


def _align(start: Timestamp, end: Timestamp):
    """date / naive / aware 混用时统一转为本地时区的 aware datetime"""
    if _kind(start) != _kind(end):
        return localize(start), localize(end)
    return start, end


class Granularity(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


# 按顺序匹配，命中第一个即返回（阈值含边界）
_THRESHOLDS = (
    (DAILY_MAX_DAYS, Granularity.DAILY),
    (WEEKLY_MAX_DAYS, Granularity.WEEKLY),
    (MONTHLY_MAX_DAYS, Granularity.MONTHLY),
)


def span_days(start: Timestamp, end: Timestamp) -> int:
    """
    区间跨度（整天数，向下截断）

    Raises:
        InvalidRangeError: end 早于 start
    """
    start, end = _align(start, end)
    if end < start:
        raise InvalidRangeError(start, end)
    # timedelta.days 对非负区间即为截断后的天数
    return (end - start).days


def range_days(start: Timestamp, end: Timestamp) -> int:
    """区间天数（四舍五入），用于页面标题，如 00:00 到 23:59:59 的 7 天区间返回 7"""
    start, end = _align(start, end)
    if end < start:
        raise InvalidRangeError(start, end)
    # 0.5 天向上进位
    return math.floor((end - start).total_seconds() / SECONDS_PER_DAY + 0.5)


def select_granularity(start: Timestamp, end: Timestamp) -> Granularity:
    """
    选择主图粒度

    - span <= 45 天: daily
    - 45 < span <= 90: weekly
    - 90 < span <= 366: monthly
    - span > 366: yearly

    Args:
        start: 区间开始
        end: 区间结束

    Returns:
        Granularity: 主图粒度

    Raises:
        InvalidRangeError: end 早于 start
    """
    span = span_days(start, end)
    for max_days, granularity in _THRESHOLDS:
        if span <= max_days:
            return granularity
    return Granularity.YEARLY
