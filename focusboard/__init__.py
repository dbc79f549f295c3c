"""
focusboard - 专注统计看板

读取外部生成的统计快照，为浏览器图表页面提供图表数据
"""

__version__ = "0.1.0"
