"""
统计看板错误类型

全部继承 ValueError，API 层沿用 `except ValueError` 的处理方式，
按具体类型映射为不同的 HTTP 状态码。
"""


class FocusboardError(ValueError):
    """看板核心逻辑错误基类"""


class InvalidRangeError(FocusboardError):
    """
    日期范围无效：结束时间早于开始时间

    Attributes:
        start: 范围开始
        end: 范围结束
    """
    def __init__(self, start, end):
        super().__init__(f"结束时间 {end} 早于开始时间 {start}")
        self.start = start
        self.end = end


class EmptyBucketError(FocusboardError):
    """
    对空的桶集合提取序列

    调用方应当视为"无数据"，隐藏对应的图表，而不是报错
    """
    def __init__(self, dimension: str = "buckets"):
        super().__init__(f"{dimension} 没有数据")
        self.dimension = dimension


class MalformedSnapshotError(FocusboardError):
    """
    快照格式错误：缺少必需字段、JSON 无法解析或不满足数据约束

    Attributes:
        missing_fields: 缺少的顶层字段（如果是因缺字段而失败）
    """
    def __init__(self, message: str, missing_fields=None):
        super().__init__(message)
        self.missing_fields = list(missing_fields or [])
