"""
配置管理器 - 负责读取 settings.yaml 配置（只读）

读取优先级:
1. 环境变量 (FOCUSBOARD_*)
2. settings.yaml 配置文件
3. DEFAULTS 默认值
"""

import os
import yaml
from pathlib import Path
from typing import Any, Optional, List, Dict


class SettingsManager:
    """配置管理器单例"""

    _instance: Optional['SettingsManager'] = None
    _config: Dict[str, Any] = {}
    _config_path: Path

    # 环境变量映射 (yaml_key -> env_var_name)
    ENV_VAR_MAPPING = {
        'snapshot_path': 'FOCUSBOARD_SNAPSHOT_PATH',
        'host': 'FOCUSBOARD_HOST',
        'port': 'FOCUSBOARD_PORT',
        'timezone': 'FOCUSBOARD_TIMEZONE',
    }

    # 默认配置值
    DEFAULTS = {
        'snapshot_path': str(Path.home() / '.focusboard' / 'stats.json'),
        'host': '127.0.0.1',
        'port': 1111,
        'timezone': '',
        'history_days': 6,
        'cors_origins': [
            "http://localhost:1111",
            "http://127.0.0.1:1111",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ],
    }

    def __new__(cls) -> 'SettingsManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self) -> None:
        self._config_path = Path(
            os.getenv('FOCUSBOARD_SETTINGS', Path(__file__).parent / 'settings.yaml')
        )
        self._load_config()

    def _load_config(self) -> None:
        """从 YAML 文件加载配置，文件不存在时只使用默认值"""
        if self._config_path.exists():
            with open(self._config_path, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}
        else:
            self._config = {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        获取配置值

        优先级: 环境变量 > yaml配置 > 默认值

        Args:
            key: 配置键名
            default: 默认值 (如果未提供，使用 DEFAULTS 中的值)
        """
        if key in self.ENV_VAR_MAPPING:
            env_value = os.getenv(self.ENV_VAR_MAPPING[key])
            if env_value:
                return env_value

        if key in self._config and self._config[key] is not None:
            return self._config[key]

        if default is not None:
            return default
        return self.DEFAULTS.get(key)

    # ===================== 便捷属性访问 =====================

    @property
    def snapshot_path(self) -> Path:
        return Path(self.get('snapshot_path')).expanduser()

    @property
    def host(self) -> str:
        return self.get('host')

    @property
    def port(self) -> int:
        return int(self.get('port'))

    @property
    def timezone(self) -> Optional[str]:
        # 空字符串表示使用系统时区
        return self.get('timezone') or None

    @property
    def history_days(self) -> int:
        return int(self.get('history_days'))

    @property
    def cors_origins(self) -> List[str]:
        return self.get('cors_origins')


# 全局单例实例
settings = SettingsManager()
