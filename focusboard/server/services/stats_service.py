"""
统计看板服务

快照 -> 粒度选择 -> 序列提取 -> 文本格式化，组装成前端看板所需的全部数据
"""

from typing import Callable, Optional

from focusboard.server.exceptions import EmptyBucketError
from focusboard.server.providers import snapshot_provider
from focusboard.server.schemas.chart_schemas import ChartSeries, DashboardResponse, GranularityResponse
from focusboard.server.schemas.snapshot_schemas import Snapshot
from focusboard.server.services.granularity_selector import (
    Granularity,
    range_days,
    select_granularity,
    span_days,
)
from focusboard.server.services.series_builder import (
    DailyLabelFormatter,
    extract_granularity_series,
    extract_series,
    extract_timeline,
)
from focusboard.server.services.summary_formatter import build_summary, title_case
from focusboard.utils import get_logger

logger = get_logger(__name__)


def main_chart_title(granularity: Granularity) -> str:
    """如 Weekly totals"""
    return f"{title_case(Granularity(granularity).value)} totals"


class StatsService:
    """
    看板数据服务

    Args:
        daily_formatter: 日期标签格式化函数，None 时使用默认的 "Sep 8" 格式
    """

    def __init__(self, daily_formatter: Optional[DailyLabelFormatter] = None):
        self.daily_formatter = daily_formatter
        self.snapshot_provider = snapshot_provider

    def _optional_chart(self, dimension: str, build: Callable[[], ChartSeries]) -> Optional[ChartSeries]:
        """没有数据的维度返回 None，由前端隐藏对应图表"""
        try:
            return build()
        except EmptyBucketError:
            logger.info(f"{dimension} 无数据，跳过该图表")
            return None

    def build_dashboard(self, snapshot: Snapshot) -> DashboardResponse:
        """
        根据快照构建看板数据

        Raises:
            InvalidRangeError: 快照的 end_time 早于 start_time
        """
        granularity = select_granularity(snapshot.start_time, snapshot.end_time)
        logger.debug(
            f"统计区间 {snapshot.start_time} ~ {snapshot.end_time}，主图粒度: {granularity.value}"
        )

        main_chart = self._optional_chart(
            granularity.value,
            lambda: extract_granularity_series(snapshot, granularity, self.daily_formatter),
        )
        hourly_chart = self._optional_chart(
            "hourly", lambda: extract_series(snapshot.hourly, dimension="hourly")
        )
        weekday_chart = self._optional_chart(
            "weekday", lambda: extract_series(snapshot.weekday, dimension="weekday")
        )
        tags_chart = self._optional_chart(
            "tags", lambda: extract_series(snapshot.tags, dimension="tags")
        )

        return DashboardResponse(
            start_time=snapshot.start_time,
            end_time=snapshot.end_time,
            days=range_days(snapshot.start_time, snapshot.end_time),
            granularity=granularity.value,
            main_title=main_chart_title(granularity),
            main_chart=main_chart,
            hourly_chart=hourly_chart,
            weekday_chart=weekday_chart,
            tags_chart=tags_chart,
            summary=build_summary(snapshot),
            timeline=extract_timeline(snapshot),
        )

    def get_dashboard(self) -> DashboardResponse:
        """
        读取配置的快照文件并构建看板数据

        Raises:
            MalformedSnapshotError: 快照文件缺失或格式错误
            InvalidRangeError: 快照区间无效
        """
        snapshot = self.snapshot_provider.load_snapshot()
        return self.build_dashboard(snapshot)

    def get_dashboard_from_raw(self, raw: dict) -> DashboardResponse:
        """根据请求体中的快照对象构建看板数据"""
        snapshot = self.snapshot_provider.parse_snapshot(raw)
        return self.build_dashboard(snapshot)

    def get_granularity(self, start_time, end_time) -> GranularityResponse:
        granularity = select_granularity(start_time, end_time)
        return GranularityResponse(
            start_time=start_time,
            end_time=end_time,
            span_days=span_days(start_time, end_time),
            granularity=granularity.value,
            title=main_chart_title(granularity),
        )
