"""通用结构化数据类型别名.

统一 JSON/Mapping 风格的类型,方便在模型、日志等模块中共享定义,避免重复声明.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any, TypeAlias

ScalarValue: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = ScalarValue | Sequence["JsonValue"] | Mapping[str, "JsonValue"]
StructlogEventDict: TypeAlias = MutableMapping[str, JsonValue]
LoggerExtra: TypeAlias = Mapping[str, JsonValue]

# 模型配置项的值不做约束,由各 setter 自行校验
OptionsMapping: TypeAlias = Mapping[str, Any]

__all__ = [
    "JsonValue",
    "LoggerExtra",
    "OptionsMapping",
    "StructlogEventDict",
]
