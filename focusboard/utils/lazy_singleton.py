"""
懒加载单例代理

Provider 在模块导入时只创建代理对象，首次访问属性时才真正实例化，
避免导入 server 包时就去读取配置和快照文件。
"""

import threading
from typing import TypeVar, Generic, Type, Any

T = TypeVar('T')


class LazySingleton(Generic[T]):
    """
    懒加载单例代理类

    用法：
        snapshot_provider = LazySingleton(SnapshotProvider)
        snapshot_provider.load_snapshot()  # 首次访问时才创建 SnapshotProvider

    线程安全（双重检查锁定），属性访问和调用都透明转发到真实实例。
    """

    _OWN_ATTRS = ('_cls', '_args', '_kwargs', '_instance', '_lock')

    def __init__(self, cls: Type[T], *args, **kwargs):
        """
        Args:
            cls: 要懒加载的类
            *args: 传递给 cls.__init__ 的位置参数
            **kwargs: 传递给 cls.__init__ 的关键字参数
        """
        # 使用 object.__setattr__ 避免触发代理逻辑
        object.__setattr__(self, '_cls', cls)
        object.__setattr__(self, '_args', args)
        object.__setattr__(self, '_kwargs', kwargs)
        object.__setattr__(self, '_instance', None)
        object.__setattr__(self, '_lock', threading.Lock())

    def _ensure_initialized(self) -> T:
        if self._instance is None:
            with self._lock:
                if self._instance is None:
                    instance = self._cls(*self._args, **self._kwargs)
                    object.__setattr__(self, '_instance', instance)
        return self._instance

    def __getattr__(self, name: str) -> Any:
        return getattr(self._ensure_initialized(), name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._OWN_ATTRS:
            object.__setattr__(self, name, value)
        else:
            setattr(self._ensure_initialized(), name, value)

    def __delattr__(self, name: str) -> None:
        delattr(self._ensure_initialized(), name)

    def __repr__(self) -> str:
        if self._instance is None:
            return f"<LazySingleton({self._cls.__name__}) - not initialized>"
        return repr(self._instance)
