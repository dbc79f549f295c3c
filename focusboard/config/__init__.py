"""
配置模块

- settings: 固定常量
- settings_manager: 可修改的运行配置（settings.yaml / 环境变量）
"""
from .settings import *
