"""
时间工具函数

日期边界取整和本地时区处理
"""

from datetime import datetime, time
from typing import Optional

import pytz

from focusboard.config.settings import LOCAL_TIMEZONE


def round_to_start(dt: datetime) -> datetime:
    """重置到当天 00:00:00，保留时区"""
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def round_to_end(dt: datetime) -> datetime:
    """重置到当天 23:59:59，保留时区"""
    return dt.replace(hour=23, minute=59, second=59, microsecond=0)


def localize(value, tz_name: Optional[str] = None) -> datetime:
    """
    把 naive 的 date/datetime 转为本地时区的 aware datetime

    Args:
        value: date 或 datetime；已带时区的 datetime 会被转换到目标时区
        tz_name: 时区名称，默认使用 LOCAL_TIMEZONE

    Returns:
        datetime: aware datetime
    """
    tz = pytz.timezone(tz_name or LOCAL_TIMEZONE)
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        return tz.localize(value)
    return value.astimezone(tz)
