"""
Range API 路由

日期选择器相关：
- /range/presets  - 预设日期范围
- /range/resolve  - 解析页面查询参数
- /range/navigate - 选择范围后的跳转地址
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from focusboard.server.exceptions import InvalidRangeError
from focusboard.server.schemas.range_schemas import (
    NavigationResponse,
    PresetRangesResponse,
    ResolvedRangeResponse,
)
from focusboard.server.services import range_service
from focusboard.utils import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/range", tags=["Range"])


@router.get("/presets", summary="获取预设日期范围", response_model=PresetRangesResponse)
async def get_presets(
    today: Optional[date] = Query(None, description="当天日期 (YYYY-MM-DD)，默认今天")
) -> PresetRangesResponse:
    """
    Today、Yesterday、Last 7/14/30/90/180 days、This/Last month、This/Last year、Everything
    """
    return range_service.get_presets(today)


@router.get("/resolve", summary="解析日期范围", response_model=ResolvedRangeResponse)
async def resolve_range(
    start_time: Optional[str] = Query(None, description="开始日期 (YYYY-MM-DD)"),
    end_time: Optional[str] = Query(None, description="结束日期 (YYYY-MM-DD)"),
) -> ResolvedRangeResponse:
    """
    解析页面查询参数

    参数缺失或格式错误时使用默认值（最近 7 天），结束时间调整到当天 23:59:59
    """
    try:
        return range_service.resolve_range(start_time, end_time)
    except InvalidRangeError as e:
        logger.error(f"参数错误: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/navigate", summary="获取跳转地址", response_model=NavigationResponse)
async def navigate(
    start: date = Query(..., description="开始日期 (YYYY-MM-DD)"),
    end: date = Query(..., description="结束日期 (YYYY-MM-DD)"),
    path: str = Query("/", description="页面路径"),
) -> NavigationResponse:
    """
    **示例：**
    - `/api/v2/range/navigate?start=2023-09-01&end=2023-09-08`
    - 返回 `/?start_time=2023-09-01&end_time=2023-09-08`
    """
    try:
        return range_service.navigate(path, start, end)
    except InvalidRangeError as e:
        logger.error(f"参数错误: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))
