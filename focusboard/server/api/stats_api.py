"""
Stats API 路由

统计看板数据：
- GET  /stats/dashboard   - 读取配置的快照文件，返回看板数据
- POST /stats/dashboard   - 使用请求体中的快照，返回看板数据
- GET  /stats/granularity - 日期范围对应的主图粒度
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, HTTPException, Query

from focusboard.server.exceptions import InvalidRangeError, MalformedSnapshotError
from focusboard.server.schemas.chart_schemas import DashboardResponse, GranularityResponse
from focusboard.server.services import range_service, stats_service
from focusboard.utils import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get("/dashboard", summary="获取看板数据", response_model=DashboardResponse)
async def get_dashboard() -> DashboardResponse:
    """
    读取配置的快照文件（snapshot_path）并返回看板数据

    **返回数据包含：**
    - `granularity` / `main_title`: 主图粒度及标题
    - `main_chart` / `hourly_chart` / `weekday_chart` / `tags_chart`: 图表序列（无数据时为 null）
    - `summary`: 总时长、Top 标签、完成 / 放弃会话数及日均值
    - `timeline`: 最后一天的时间线
    """
    try:
        return stats_service.get_dashboard()
    except MalformedSnapshotError as e:
        logger.error(f"快照错误: {str(e)}")
        raise HTTPException(status_code=422, detail=str(e))
    except InvalidRangeError as e:
        logger.error(f"快照区间无效: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"获取看板数据失败: {str(e)}")
        raise HTTPException(status_code=500, detail=f"获取看板数据失败: {str(e)}")


@router.post("/dashboard", summary="根据快照计算看板数据", response_model=DashboardResponse)
async def post_dashboard(
    snapshot: Dict[str, Any] = Body(..., description="统计快照 JSON 对象")
) -> DashboardResponse:
    """
    使用请求体中的快照计算看板数据，返回结构与 GET 相同
    """
    try:
        return stats_service.get_dashboard_from_raw(snapshot)
    except MalformedSnapshotError as e:
        logger.error(f"快照错误: {str(e)}")
        raise HTTPException(status_code=422, detail=str(e))
    except InvalidRangeError as e:
        logger.error(f"快照区间无效: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"计算看板数据失败: {str(e)}")
        raise HTTPException(status_code=500, detail=f"计算看板数据失败: {str(e)}")


@router.get("/granularity", summary="获取主图粒度", response_model=GranularityResponse)
async def get_granularity(
    start_time: Optional[str] = Query(None, description="开始日期 (YYYY-MM-DD)，默认 7 天前"),
    end_time: Optional[str] = Query(None, description="结束日期 (YYYY-MM-DD)，默认今天"),
) -> GranularityResponse:
    """
    根据日期范围跨度选择主图粒度

    - 45 天以内: daily
    - 90 天以内: weekly
    - 366 天以内: monthly
    - 其余: yearly

    **示例：**
    - `/api/v2/stats/granularity?start_time=2023-07-01&end_time=2023-08-29`
    """
    try:
        resolved = range_service.resolve_range(start_time, end_time)
        return stats_service.get_granularity(resolved.start_time, resolved.end_time)
    except InvalidRangeError as e:
        logger.error(f"参数错误: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"获取主图粒度失败: {str(e)}")
        raise HTTPException(status_code=500, detail=f"获取主图粒度失败: {str(e)}")
