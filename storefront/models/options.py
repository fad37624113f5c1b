"""模型配置项到 setter 的静态映射.

每个具体模型类在创建时(``__init_subclass__``)收集一次 setter,生成只读映射表,
``configure`` 时按映射表分发,不再逐次反射.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from storefront.utils.inflection import camel_to_snake

SETTER_PREFIX = "set_"
OPTION_NAME_ATTR = "__option_name__"

SetterT = TypeVar("SetterT", bound=Callable[..., Any])
OptionSetterTable = Mapping[str, Callable[..., Any]]


def option_setter(name: str) -> Callable[[SetterT], SetterT]:
    """为 setter 声明显式的配置项名称.

    适用于方法名无法由 ``set_<option>`` 约定推导的场景.

    Example:
        >>> class Catalog(AbstractModel):
        ...     @option_setter("pageSize")
        ...     def use_page_size(self, value): ...

    """

    def decorator(func: SetterT) -> SetterT:
        setattr(func, OPTION_NAME_ATTR, name)
        return func

    return decorator


def collect_option_setters(cls: type) -> OptionSetterTable:
    """扫描类上的 setter 并生成 配置项名称 -> 函数 的只读映射表.

    Args:
        cls: 具体模型类.

    Returns:
        MappingProxyType: 键为配置项名称(snake_case 或显式声明的名称),值为未绑定函数.

    """
    setters: dict[str, Callable[..., Any]] = {}
    for attr_name in dir(cls):
        if attr_name.startswith("__"):
            continue
        member = getattr(cls, attr_name, None)
        if not callable(member) or isinstance(member, type):
            continue
        explicit_name = getattr(member, OPTION_NAME_ATTR, None)
        if explicit_name:
            setters[explicit_name] = member
            continue
        if attr_name.startswith(SETTER_PREFIX) and len(attr_name) > len(SETTER_PREFIX):
            setters.setdefault(attr_name[len(SETTER_PREFIX) :], member)
    return MappingProxyType(setters)


def resolve_setter(table: OptionSetterTable, key: str) -> Callable[..., Any] | None:
    """按原始键名或其 snake_case 形式查找 setter,找不到返回 None."""
    setter = table.get(key)
    if setter is None:
        setter = table.get(camel_to_snake(key))
    return setter


__all__ = [
    "OPTION_NAME_ATTR",
    "SETTER_PREFIX",
    "OptionSetterTable",
    "collect_option_setters",
    "option_setter",
    "resolve_setter",
]
