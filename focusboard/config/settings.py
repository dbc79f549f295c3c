"""
=========================统计看板常量==========================
"""
from datetime import date

from tzlocal import get_localzone

# 本地时区（自动获取系统时区）
LOCAL_TIMEZONE = str(get_localzone())

# 快照中的时长单位为纳秒
NANOSECONDS_PER_MINUTE = 60_000_000_000
SECONDS_PER_DAY = 86400

# 主图粒度阈值（天数，含边界，命中第一个即返回）
DAILY_MAX_DAYS = 45
WEEKLY_MAX_DAYS = 90
MONTHLY_MAX_DAYS = 366

# "Everything" 预设的起始日期
EPOCH_FLOOR = date(1971, 1, 1)

# 未指定开始日期时，向前回溯的天数（含今天共 7 天）
DEFAULT_HISTORY_DAYS = 6

# 日期查询参数格式
DATE_FORMAT = "%Y-%m-%d"
