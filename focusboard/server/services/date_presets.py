"""
日期范围预设与导航 - 纯函数模块

- preset_ranges: 日期选择器的预设范围（Today / Last 7 days / This month ...）
- range_query_params / build_range_url: 选择范围后页面跳转需要的查询参数
- parse_range_query: 解析页面传入的 start_time / end_time 查询参数
"""

import calendar
from datetime import date, datetime, time, timedelta, timezone
from typing import Dict, Optional, Tuple
from urllib.parse import urlencode

from focusboard.config.settings import DATE_FORMAT, DEFAULT_HISTORY_DAYS, EPOCH_FLOOR
from focusboard.server.exceptions import InvalidRangeError
from focusboard.utils import get_logger, localize, round_to_end, round_to_start

logger = get_logger(__name__)

DateRange = Tuple[date, date]

# "Last N days" 预设（含今天）
_LAST_N_DAYS = (7, 14, 30, 90, 180)


def _month_range(year: int, month: int) -> DateRange:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def preset_ranges(now: date) -> Dict[str, DateRange]:
    """
    计算预设日期范围（闭区间），按显示顺序返回

    Args:
        now: 当天日期（datetime 会取其日期部分）

    Returns:
        Dict[str, Tuple[date, date]]: 预设名称 -> (开始日期, 结束日期)
    """
    if isinstance(now, datetime):
        now = now.date()

    presets: Dict[str, DateRange] = {}
    yesterday = now - timedelta(days=1)
    presets["Today"] = (now, now)
    presets["Yesterday"] = (yesterday, yesterday)

    for n in _LAST_N_DAYS:
        presets[f"Last {n} days"] = (now - timedelta(days=n - 1), now)

    presets["This month"] = _month_range(now.year, now.month)
    if now.month == 1:
        presets["Last month"] = _month_range(now.year - 1, 12)
    else:
        presets["Last month"] = _month_range(now.year, now.month - 1)

    presets["This year"] = (date(now.year, 1, 1), date(now.year, 12, 31))
    presets["Last year"] = (date(now.year - 1, 1, 1), date(now.year - 1, 12, 31))
    presets["Everything"] = (EPOCH_FLOOR, now)

    return presets


def format_date(value: date) -> str:
    """YYYY-MM-DD"""
    return value.strftime(DATE_FORMAT)


def range_query_params(start: date, end: date) -> Dict[str, str]:
    """
    选择范围后跳转页面的查询参数

    Raises:
        InvalidRangeError: end 早于 start
    """
    if end < start:
        raise InvalidRangeError(start, end)
    return {
        "start_time": format_date(start),
        "end_time": format_date(end),
    }


def build_range_url(path: str, start: date, end: date) -> str:
    """如 /?start_time=2023-09-01&end_time=2023-09-08"""
    return f"{path}?{urlencode(range_query_params(start, end))}"


def _parse_day(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        logger.warning(f"无法解析日期参数 '{value}'，使用默认值")
        return None


def parse_range_query(
    start: Optional[str],
    end: Optional[str],
    now: Optional[datetime] = None,
    tz_name: Optional[str] = None,
    history_days: int = DEFAULT_HISTORY_DAYS,
) -> Tuple[datetime, datetime]:
    """
    解析页面查询参数为本地时区的时间范围

    - start 缺失或无法解析: now 往前 history_days 天的 00:00:00
    - end 缺失或无法解析: now
    - end 统一调整到当天 23:59:59

    Args:
        start: 开始日期字符串（YYYY-MM-DD）
        end: 结束日期字符串（YYYY-MM-DD）
        now: 当前时间，默认为本地时区的当前时间
        tz_name: 时区名称，默认使用 LOCAL_TIMEZONE
        history_days: 默认区间向前回溯的天数

    Returns:
        Tuple[datetime, datetime]: (开始时间, 结束时间)

    Raises:
        InvalidRangeError: 开始日期晚于结束日期
    """
    now = localize(now or datetime.now(timezone.utc), tz_name)
    today = now.replace(tzinfo=None)

    start_day = _parse_day(start)
    if start_day is None:
        start_time = round_to_start(today - timedelta(days=history_days))
    else:
        start_time = datetime.combine(start_day, time.min)

    end_day = _parse_day(end)
    end_time = round_to_end(datetime.combine(end_day, time.min) if end_day else today)

    start_time = localize(start_time, tz_name)
    end_time = localize(end_time, tz_name)
    if end_time < start_time:
        raise InvalidRangeError(format_date(start_time), format_date(end_time))
    return start_time, end_time
