"""
汇总文本格式化 - 纯函数模块

总时长、Top 标签等汇总卡片的显示文本。
时长换算统一向下取整，与单个桶的换算保持一致。
"""

import re

from focusboard.server.exceptions import EmptyBucketError
from focusboard.server.schemas.chart_schemas import SummaryData, TopTag
from focusboard.server.schemas.snapshot_schemas import Snapshot
from focusboard.server.services.series_builder import ns_to_minutes

_WORD_RE = re.compile(r"\S+")


def format_duration(total_minutes: int) -> str:
    """
    分钟数格式化为 "{h}h" 或 "{h}h {m}m"

    Examples:
        0 -> "0h", 60 -> "1h", 90 -> "1h 30m"
    """
    if total_minutes < 0:
        raise ValueError(f"时长不能为负数: {total_minutes}")
    hours, minutes = divmod(total_minutes, 60)
    if minutes == 0:
        return f"{hours}h"
    return f"{hours}h {minutes}m"


def title_case(text: str) -> str:
    """每个单词首字母大写，其余小写，如 MONTHLY -> Monthly"""
    return _WORD_RE.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:].lower(), text)


def top_tag(snapshot: Snapshot) -> TopTag:
    """
    时长最长的标签（tags[0]）

    Raises:
        EmptyBucketError: 快照中没有标签数据
    """
    if not snapshot.tags:
        raise EmptyBucketError("tags")
    first = snapshot.tags[0]
    return TopTag(
        name=first.name,
        formatted_duration=format_duration(ns_to_minutes(first.duration)),
    )


def build_summary(snapshot: Snapshot) -> SummaryData:
    """构建汇总卡片数据，无标签时 top_tag 为 None"""
    try:
        tag = top_tag(snapshot)
    except EmptyBucketError:
        tag = None

    return SummaryData(
        total_time=format_duration(ns_to_minutes(snapshot.totals.duration)),
        top_tag=tag,
        completed=snapshot.totals.completed,
        abandoned=snapshot.totals.abandoned,
        avg_time=format_duration(ns_to_minutes(snapshot.averages.duration)),
        avg_completed=snapshot.averages.completed,
        avg_abandoned=snapshot.averages.abandoned,
    )
