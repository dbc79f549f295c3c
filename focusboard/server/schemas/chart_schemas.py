"""
图表数据模型

前端图表库只需要 labels / values 两个平行数组，渲染细节由页面负责
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

GranularityName = Literal["daily", "weekly", "monthly", "yearly"]


# ============================================================================
# 图表序列
# ============================================================================

class ChartSeries(BaseModel):
    """一个维度的图表序列（labels 与 values 一一对应）"""
    model_config = ConfigDict(json_schema_extra={"example": {
        "labels": ["Sep 7", "Sep 8"], "values": [245, 120]
    }})

    labels: List[str] = Field(..., description="横轴标签，保持原始顺序")
    values: List[int] = Field(..., description="时长（分钟，向下取整）")


class TimelineSeriesItem(BaseModel):
    """最后一天时间线中的一个片段"""
    start_time: datetime = Field(..., description="片段开始时间")
    tags: List[str] = Field(default=[], description="会话标签")
    minutes: int = Field(..., description="片段时长（分钟）")


# ============================================================================
# 汇总
# ============================================================================

class TopTag(BaseModel):
    """时长最长的标签"""
    name: str
    formatted_duration: str = Field(..., description="如 12h 5m")


class SummaryData(BaseModel):
    """顶部汇总卡片"""
    total_time: str = Field(..., description="总专注时长，如 679h 53m")
    top_tag: Optional[TopTag] = Field(None, description="Top 标签，无标签数据时为空")
    completed: int = Field(..., description="完成的会话数")
    abandoned: int = Field(..., description="放弃的会话数")
    avg_time: str = Field(..., description="日均专注时长")
    avg_completed: int = Field(..., description="日均完成会话数")
    avg_abandoned: int = Field(..., description="日均放弃会话数")


# ============================================================================
# 看板完整响应
# ============================================================================

class DashboardResponse(BaseModel):
    """
    看板数据

    某个维度没有数据时对应图表为 None，前端隐藏该图表
    """
    start_time: datetime
    end_time: datetime
    days: int = Field(..., description="区间天数（四舍五入）")
    granularity: GranularityName = Field(..., description="主图粒度")
    main_title: str = Field(..., description="主图标题，如 Weekly totals")
    main_chart: Optional[ChartSeries] = None
    hourly_chart: Optional[ChartSeries] = None
    weekday_chart: Optional[ChartSeries] = None
    tags_chart: Optional[ChartSeries] = None
    summary: SummaryData
    timeline: List[TimelineSeriesItem] = Field(default=[], description="最后一天的时间线")


class GranularityResponse(BaseModel):
    """日期范围对应的主图粒度"""
    start_time: datetime
    end_time: datetime
    span_days: int = Field(..., description="区间跨度（整天，截断）")
    granularity: GranularityName
    title: str = Field(..., description="主图标题")
