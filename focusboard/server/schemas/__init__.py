"""
Pydantic schemas for snapshot input and response models
"""

from .snapshot_schemas import (
    Snapshot,
    Record,
    Totals,
    Averages,
    TimelineEntry,
    BUCKET_FIELDS,
    REQUIRED_FIELDS,
)
from .chart_schemas import (
    ChartSeries,
    TimelineSeriesItem,
    TopTag,
    SummaryData,
    DashboardResponse,
    GranularityResponse,
)
from .range_schemas import (
    RangeQueryParams,
    PresetRange,
    PresetRangesResponse,
    ResolvedRangeResponse,
    NavigationResponse,
)


__all__ = [
    "Snapshot",
    "Record",
    "Totals",
    "Averages",
    "TimelineEntry",
    "BUCKET_FIELDS",
    "REQUIRED_FIELDS",
    "ChartSeries",
    "TimelineSeriesItem",
    "TopTag",
    "SummaryData",
    "DashboardResponse",
    "GranularityResponse",
    "RangeQueryParams",
    "PresetRange",
    "PresetRangesResponse",
    "ResolvedRangeResponse",
    "NavigationResponse",
]
