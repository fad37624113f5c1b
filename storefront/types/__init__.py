"""类型别名与协议集合."""

from storefront.types.structures import (
    JsonValue,
    LoggerExtra,
    OptionsMapping,
    StructlogEventDict,
)

__all__ = [
    "JsonValue",
    "LoggerExtra",
    "OptionsMapping",
    "StructlogEventDict",
]
