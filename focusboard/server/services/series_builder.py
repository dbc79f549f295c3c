"""
图表序列构建 - 纯函数模块

把快照中的桶集合转换为图表需要的 (labels, values) 平行数组
"""

from datetime import date, datetime
from typing import Callable, List, Optional, Sequence, Union

from focusboard.config.settings import NANOSECONDS_PER_MINUTE, DATE_FORMAT
from focusboard.server.exceptions import EmptyBucketError, MalformedSnapshotError
from focusboard.server.schemas.chart_schemas import ChartSeries, TimelineSeriesItem
from focusboard.server.schemas.snapshot_schemas import Record, Snapshot
from focusboard.server.services.granularity_selector import Granularity

# 日期标签格式化函数：date -> 显示文本（由调用方注入，便于本地化）
DailyLabelFormatter = Callable[[date], str]


def ns_to_minutes(nanoseconds: int) -> int:
    """纳秒转整分钟（向下取整，不足一分钟记为 0）"""
    return nanoseconds // NANOSECONDS_PER_MINUTE


def default_daily_label(day: date) -> str:
    """月份缩写 + 日，如 Sep 8"""
    return f"{day:%b} {day.day}"


def _parse_day(name: str) -> date:
    try:
        return datetime.strptime(name, DATE_FORMAT).date()
    except ValueError as e:
        raise MalformedSnapshotError(f"daily 桶名称不是有效日期: {name}") from e


def extract_series(
    buckets: Sequence[Record],
    label_formatter: Optional[Callable[[str], str]] = None,
    dimension: str = "buckets",
) -> ChartSeries:
    """
    提取图表序列

    Args:
        buckets: 有序的桶集合
        label_formatter: 标签转换函数（桶名称 -> 显示文本），None 时直接使用桶名称
        dimension: 维度名称，仅用于错误信息

    Returns:
        ChartSeries: 与 buckets 等长、同序的 labels 和 values

    Raises:
        EmptyBucketError: buckets 为空
    """
    if not buckets:
        raise EmptyBucketError(dimension)

    labels: List[str] = []
    values: List[int] = []
    for record in buckets:
        labels.append(label_formatter(record.name) if label_formatter else record.name)
        values.append(ns_to_minutes(record.duration))

    return ChartSeries(labels=labels, values=values)


def extract_granularity_series(
    snapshot: Snapshot,
    granularity: Union[Granularity, str],
    daily_formatter: Optional[DailyLabelFormatter] = None,
) -> ChartSeries:
    """
    提取主图序列

    daily 粒度的桶名称是 ISO 日期，经 daily_formatter 转为显示文本；
    其他粒度（周 / 月 / 年）直接使用桶名称
    """
    granularity = Granularity(granularity)
    buckets = snapshot.buckets(granularity.value)

    label_formatter = None
    if granularity is Granularity.DAILY:
        formatter = daily_formatter or default_daily_label
        label_formatter = lambda name: formatter(_parse_day(name))

    return extract_series(buckets, label_formatter, dimension=granularity.value)


def extract_timeline(snapshot: Snapshot) -> List[TimelineSeriesItem]:
    """最后一天的时间线，空时间线返回空列表"""
    return [
        TimelineSeriesItem(
            start_time=entry.start_time,
            tags=list(entry.tags),
            minutes=ns_to_minutes(entry.duration),
        )
        for entry in snapshot.timeline
    ]
