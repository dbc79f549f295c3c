"""
日期范围服务 - 纯函数模块

日期选择器的预设、查询参数解析和页面跳转地址
"""

from datetime import date, datetime, timezone
from typing import Optional

from focusboard.config.settings_manager import settings
from focusboard.server.schemas.range_schemas import (
    NavigationResponse,
    PresetRange,
    PresetRangesResponse,
    RangeQueryParams,
    ResolvedRangeResponse,
)
from focusboard.server.services.date_presets import (
    build_range_url,
    format_date,
    parse_range_query,
    preset_ranges,
    range_query_params,
)
from focusboard.server.services.granularity_selector import range_days, select_granularity, span_days
from focusboard.utils import localize


def get_presets(today: Optional[date] = None) -> PresetRangesResponse:
    """
    获取日期选择器预设

    Args:
        today: 当天日期，默认为配置时区的今天
    """
    if today is None:
        today = localize(datetime.now(timezone.utc), settings.timezone).date()

    presets = [
        PresetRange(name=name, start=format_date(start), end=format_date(end))
        for name, (start, end) in preset_ranges(today).items()
    ]
    return PresetRangesResponse(today=format_date(today), presets=presets)


def resolve_range(
    start: Optional[str],
    end: Optional[str],
    now: Optional[datetime] = None,
) -> ResolvedRangeResponse:
    """
    解析页面查询参数，返回实际使用的区间及其主图粒度

    Raises:
        InvalidRangeError: 开始日期晚于结束日期
    """
    start_time, end_time = parse_range_query(
        start, end, now=now, tz_name=settings.timezone, history_days=settings.history_days
    )
    return ResolvedRangeResponse(
        start_time=start_time,
        end_time=end_time,
        days=range_days(start_time, end_time),
        span_days=span_days(start_time, end_time),
        granularity=select_granularity(start_time, end_time).value,
        query=RangeQueryParams(**range_query_params(start_time, end_time)),
    )


def navigate(path: str, start: date, end: date) -> NavigationResponse:
    """
    选择日期范围后的跳转地址

    Raises:
        InvalidRangeError: end 早于 start
    """
    return NavigationResponse(
        url=build_range_url(path, start, end),
        query=RangeQueryParams(**range_query_params(start, end)),
    )
