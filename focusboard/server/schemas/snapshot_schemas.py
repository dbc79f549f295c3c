"""
统计快照数据模型 - Pydantic V2

快照由外部统计程序生成（JSON），本模块只负责校验和只读访问。
所有时长字段单位为纳秒。
"""

import re
from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from typing import List

# 快照中的桶集合字段
BUCKET_FIELDS = ("tags", "hourly", "daily", "weekly", "monthly", "yearly", "weekday")

# 快照必需的顶层字段
REQUIRED_FIELDS = ("start_time", "end_time", "totals", "averages")

# 统计程序输出纳秒精度的时间戳，datetime 只保留到微秒
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


def _trim_fraction(value):
    if isinstance(value, str):
        return _FRACTION_RE.sub(r"\1", value, count=1)
    return value


class Record(BaseModel):
    """单个桶：名称 + 累计时长"""
    model_config = ConfigDict(frozen=True, json_schema_extra={"example": {
        "name": "writing", "duration": 173389611403300
    }})

    name: str = Field(..., description="桶名称（标签 / 小时 / 日期 / 周 / 月 / 年 / 星期）")
    duration: int = Field(..., ge=0, description="累计时长（纳秒）")


class Totals(BaseModel):
    """统计区间内的合计"""
    model_config = ConfigDict(frozen=True)

    completed: int = Field(..., ge=0, description="完成的会话数")
    abandoned: int = Field(..., ge=0, description="放弃的会话数")
    duration: int = Field(..., ge=0, description="总专注时长（纳秒）")


class Averages(BaseModel):
    """按天平均"""
    model_config = ConfigDict(frozen=True)

    completed: int = Field(..., ge=0, description="日均完成会话数")
    abandoned: int = Field(..., ge=0, description="日均放弃会话数")
    duration: int = Field(..., ge=0, description="日均专注时长（纳秒）")


class TimelineEntry(BaseModel):
    """最后一天的时间线片段"""
    model_config = ConfigDict(frozen=True)

    start_time: AwareDatetime = Field(..., description="片段开始时间")
    tags: List[str] = Field(default_factory=list, description="会话标签")
    duration: int = Field(..., ge=0, description="片段时长（纳秒）")

    @field_validator("start_time", mode="before")
    @classmethod
    def trim_start_fraction(cls, value):
        return _trim_fraction(value)

    @field_validator("tags", mode="before")
    @classmethod
    def null_tags_to_empty(cls, value):
        return [] if value is None else value


class Snapshot(BaseModel):
    """
    完整的统计快照

    - tags 按时长降序排列（tags[0] 即 Top 标签，这里不重新排序）
    - daily 覆盖 [start_time, end_time] 的每一天，无数据的日期为 0
    - 各集合内的桶名称唯一
    """
    model_config = ConfigDict(frozen=True)

    start_time: AwareDatetime = Field(..., description="统计区间开始")
    end_time: AwareDatetime = Field(..., description="统计区间结束")
    totals: Totals
    averages: Averages
    tags: List[Record] = Field(default_factory=list)
    hourly: List[Record] = Field(default_factory=list)
    daily: List[Record] = Field(default_factory=list)
    weekly: List[Record] = Field(default_factory=list)
    monthly: List[Record] = Field(default_factory=list)
    yearly: List[Record] = Field(default_factory=list)
    weekday: List[Record] = Field(default_factory=list)
    timeline: List[TimelineEntry] = Field(default_factory=list)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def trim_time_fraction(cls, value):
        return _trim_fraction(value)

    @field_validator(*BUCKET_FIELDS, "timeline", mode="before")
    @classmethod
    def null_collection_to_empty(cls, value):
        # 统计程序对空集合输出 null
        return [] if value is None else value

    @field_validator(*BUCKET_FIELDS)
    @classmethod
    def check_unique_names(cls, value: List[Record], info: ValidationInfo) -> List[Record]:
        seen = set()
        for record in value:
            if record.name in seen:
                raise ValueError(f"{info.field_name} 中存在重复的名称: {record.name}")
            seen.add(record.name)
        return value

    def buckets(self, dimension: str) -> List[Record]:
        """按名称获取桶集合（tags / hourly / daily / ...）"""
        if dimension not in BUCKET_FIELDS:
            raise KeyError(f"未知的统计维度: {dimension}")
        return getattr(self, dimension)
