from pydantic import BaseModel, Field
from typing import List
from datetime import datetime

from focusboard.server.schemas.chart_schemas import GranularityName


class RangeQueryParams(BaseModel):
    """页面跳转用的查询参数"""
    start_time: str = Field(..., description="开始日期（YYYY-MM-DD）")
    end_time: str = Field(..., description="结束日期（YYYY-MM-DD）")


class PresetRange(BaseModel):
    """日期选择器的预设范围"""
    name: str = Field(..., description="预设名称，如 Last 7 days")
    start: str = Field(..., description="开始日期（YYYY-MM-DD）")
    end: str = Field(..., description="结束日期（YYYY-MM-DD）")


class PresetRangesResponse(BaseModel):
    today: str = Field(..., description="计算预设时使用的当天日期")
    presets: List[PresetRange] = Field(default=[], description="按显示顺序排列")


class ResolvedRangeResponse(BaseModel):
    """解析后的查询范围"""
    start_time: datetime = Field(..., description="开始时间（当天 00:00:00）")
    end_time: datetime = Field(..., description="结束时间（当天 23:59:59）")
    days: int = Field(..., description="区间天数（四舍五入）")
    span_days: int = Field(..., description="区间跨度（整天，截断）")
    granularity: GranularityName
    query: RangeQueryParams


class NavigationResponse(BaseModel):
    """选择日期范围后的跳转地址"""
    url: str
    query: RangeQueryParams
