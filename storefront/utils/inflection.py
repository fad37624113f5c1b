"""协作对象命名约定相关的字符串工具.

逻辑名使用 camelCase(如 ``userProfile``),协作对象标识使用
``<Namespace>_<Category>_<Inflected>`` 形式(如 ``Shop_Resource_User_Profile``).
只在大小写边界插入下划线,逻辑名中已有的下划线原样保留.
"""

from __future__ import annotations

import re

IDENTIFIER_SEPARATOR = "_"

# "HTMLParser" -> "HTML_Parser";"ABc" 不拆分
_ACRONYM_BOUNDARY = re.compile(r"(?<=[A-Z])([A-Z]+)([A-Z][a-z])")
# "userProfile" -> "user_Profile", "page2Size" -> "page2_Size"
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def mark_case_boundaries(name: str) -> str:
    """在 camelCase 的大写边界前插入下划线,其余字符不变."""
    marked = _ACRONYM_BOUNDARY.sub(rf"\1{IDENTIFIER_SEPARATOR}\2", name)
    return _CAMEL_BOUNDARY.sub(rf"{IDENTIFIER_SEPARATOR}\1", marked)


def inflect_name(name: str) -> str:
    """将逻辑名转换为协作对象标识的最后一段.

    Args:
        name: camelCase 逻辑名.

    Returns:
        str: 插入边界下划线后首字母大写,例如 ``userProfile`` -> ``User_Profile``.

    Example:
        >>> inflect_name("userProfile")
        'User_Profile'
        >>> inflect_name("HTMLParser")
        'HTML_Parser'
        >>> inflect_name("user_profile")
        'User_profile'

    """
    marked = mark_case_boundaries(name)
    return marked[:1].upper() + marked[1:]


def camel_to_snake(name: str) -> str:
    """将 camelCase 名称转换为 snake_case,用于匹配 ``set_<option>`` 方法名."""
    return mark_case_boundaries(name).lower()


def build_identifier(namespace: str, category: str, name: str) -> str:
    """拼接协作对象标识.

    Example:
        >>> build_identifier("Shop", "Resource", "userProfile")
        'Shop_Resource_User_Profile'

    """
    return IDENTIFIER_SEPARATOR.join((namespace, category, inflect_name(name)))


__all__ = [
    "IDENTIFIER_SEPARATOR",
    "build_identifier",
    "camel_to_snake",
    "inflect_name",
    "mark_case_boundaries",
]
