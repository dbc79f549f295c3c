"""
统计快照数据提供者

从外部统计程序输出的 JSON 文件（或已解析的 dict）读取快照并校验
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from focusboard.config.settings_manager import settings
from focusboard.server.exceptions import MalformedSnapshotError
from focusboard.server.schemas.snapshot_schemas import REQUIRED_FIELDS, Snapshot
from focusboard.utils import get_logger

logger = get_logger(__name__)


class SnapshotProvider:
    """
    快照提供者

    内部只做读取和校验，不做任何统计计算
    """

    def __init__(self, snapshot_path: Optional[Union[str, Path]] = None):
        self._snapshot_path = Path(snapshot_path) if snapshot_path else None

    @property
    def snapshot_path(self) -> Path:
        # 未显式指定时每次从配置读取，配置修改后无需重建实例
        return self._snapshot_path or settings.snapshot_path

    def parse_snapshot(self, raw: Dict[str, Any]) -> Snapshot:
        """
        校验并构建快照

        Args:
            raw: JSON 解析后的快照对象

        Raises:
            MalformedSnapshotError: 缺少必需字段或字段不满足约束
        """
        if not isinstance(raw, dict):
            raise MalformedSnapshotError(f"快照应为 JSON 对象，实际为 {type(raw).__name__}")

        missing = [field for field in REQUIRED_FIELDS if raw.get(field) is None]
        if missing:
            raise MalformedSnapshotError(
                f"快照缺少必需字段: {', '.join(missing)}", missing_fields=missing
            )

        try:
            return Snapshot.model_validate(raw)
        except ValidationError as e:
            raise MalformedSnapshotError(f"快照格式错误: {e}") from e

    def load_snapshot(self, path: Optional[Union[str, Path]] = None) -> Snapshot:
        """
        从文件读取快照

        Args:
            path: 快照文件路径，默认使用配置中的 snapshot_path

        Raises:
            MalformedSnapshotError: 文件不存在、不是合法 JSON 或格式错误
        """
        path = Path(path) if path else self.snapshot_path
        logger.debug(f"读取统计快照: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except FileNotFoundError as e:
            raise MalformedSnapshotError(f"快照文件不存在: {path}") from e
        except json.JSONDecodeError as e:
            raise MalformedSnapshotError(f"快照文件不是合法的 JSON: {path} ({e})") from e

        return self.parse_snapshot(raw)
