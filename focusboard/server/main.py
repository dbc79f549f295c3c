"""
focusboard Server - FastAPI 主应用程序
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from focusboard import __version__
from focusboard.config.settings_manager import settings
from focusboard.server.api import stats_router, range_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    应用生命周期管理

    启动时检查快照文件；文件缺失不阻止启动（可通过 POST 接口传入快照）
    """
    snapshot_path = settings.snapshot_path
    if snapshot_path.exists():
        logger.info(f"使用统计快照: {snapshot_path}")
    else:
        logger.warning(f"统计快照不存在: {snapshot_path}，GET /api/v2/stats/dashboard 将返回 422")

    yield


app = FastAPI(
    lifespan=lifespan,
    title="focusboard API",
    description="""
    ## focusboard 后端 API 服务

    读取外部生成的专注统计快照，为浏览器看板提供图表数据。

    ### 功能模块

    - **Stats**: 看板数据（主图、按小时、按星期、标签分布、汇总）
    - **Range**: 日期选择器预设、查询参数解析、跳转地址
    """,
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(stats_router, prefix="/api/v2")
app.include_router(range_router, prefix="/api/v2")


@app.get("/", tags=["Root"])
async def root():
    """
    API 根路径

    返回服务基本信息和可用端点导航
    """
    return {
        "service": "focusboard API",
        "version": __version__,
        "status": "running",
        "documentation": {
            "swagger_ui": "/docs",
            "redoc": "/redoc",
            "openapi_spec": "/openapi.json"
        },
        "endpoints": {
            "dashboard": "/api/v2/stats/dashboard",
            "granularity": "/api/v2/stats/granularity",
            "presets": "/api/v2/range/presets",
            "resolve": "/api/v2/range/resolve",
            "navigate": "/api/v2/range/navigate"
        }
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """健康检查端点"""
    return {
        "status": "healthy",
        "service": "focusboard-api",
        "version": __version__
    }


def run() -> None:
    """命令行入口"""
    import uvicorn

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="info"
    )


if __name__ == "__main__":
    run()
