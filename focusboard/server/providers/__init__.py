"""
Server Providers 模块

统一导出数据提供者的懒加载单例
"""
from focusboard.utils import LazySingleton

from .snapshot_provider import SnapshotProvider

# 创建懒加载单例
snapshot_provider = LazySingleton(SnapshotProvider)

__all__ = [
    "SnapshotProvider",
    "snapshot_provider",
]
