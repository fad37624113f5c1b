"""模型资源(数据访问/领域服务协作对象)的约定."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ResourceInterface(Protocol):
    """资源协作对象需实现的接口."""

    def init(self) -> None:
        """构造完成后的初始化钩子."""
        ...


class BaseResource:
    """资源基类,以无参方式构造,子类可覆写 ``init``."""

    def __init__(self) -> None:
        self.init()

    def init(self) -> None:
        """构造完成后的初始化钩子,默认无操作."""


__all__ = ["BaseResource", "ResourceInterface"]
