"""身份与角色.

- ``RoleInterface``/``Role``: 访问控制使用的角色对象.
- ``IdentityProvider``: 当前请求身份的来源,由模型通过构造参数注入.
- ``coerce_identity``: 将映射、标量、None 或角色对象统一转换为角色.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from flask import current_app, has_request_context
from flask_login import current_user

from storefront.constants import UserRole
from storefront.errors import InvalidIdentityError


@runtime_checkable
class RoleInterface(Protocol):
    """角色协议,只要求提供 ``role_id``."""

    @property
    def role_id(self) -> str:
        """角色标识."""
        ...


@dataclass(frozen=True, slots=True, eq=False)
class Role:
    """不可变的角色值对象.

    与同名字符串相等,``Role("Guest") == "Guest"``,哈希同样按 ``role_id`` 计算.
    """

    role_id: str

    def __str__(self) -> str:
        return self.role_id

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Role):
            return self.role_id == other.role_id
        if isinstance(other, str):
            return self.role_id == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.role_id)


class IdentityProvider(Protocol):
    """当前请求身份的提供方."""

    def has_identity(self) -> bool:
        """是否存在已认证的身份."""
        ...

    def get_identity(self) -> object:
        """返回当前身份,形态需能被 ``coerce_identity`` 接受."""
        ...


class FlaskLoginIdentityProvider:
    """基于 Flask-Login ``current_user`` 的身份提供方.

    请求上下文之外或应用未初始化 ``LoginManager`` 时视为未登录.
    已认证用户若实现 ``RoleInterface`` 则原样返回,否则读取其 ``role`` 属性包装为 ``{"role": ...}``.
    """

    def has_identity(self) -> bool:
        # 未注册 LoginManager 的应用没有登录会话,同样视为未登录
        if not has_request_context() or not hasattr(current_app, "login_manager"):
            return False
        return bool(current_user) and bool(getattr(current_user, "is_authenticated", False))

    def get_identity(self) -> object:
        if not self.has_identity():
            return None
        user = current_user._get_current_object()  # type: ignore[attr-defined]
        if isinstance(user, RoleInterface):
            return user
        return {UserRole.IDENTITY_ROLE_KEY: getattr(user, "role", None)}


def coerce_identity(identity: object) -> RoleInterface:
    """将支持的身份形态统一转换为角色.

    Args:
        identity: 包含 ``role`` 键的映射、非布尔标量、None 或角色对象.

    Returns:
        RoleInterface: 解析后的角色,缺省为 ``Guest``.

    Raises:
        InvalidIdentityError: 布尔值或其他无法识别的对象.

    """
    if isinstance(identity, Mapping):
        role = identity.get(UserRole.IDENTITY_ROLE_KEY)
        return Role(UserRole.GUEST if role is None else str(role))
    if isinstance(identity, bool):
        raise InvalidIdentityError(extra={"identity_type": type(identity).__name__})
    if isinstance(identity, (str, int, float)):
        return Role(str(identity))
    if identity is None:
        return Role(UserRole.GUEST)
    if isinstance(identity, RoleInterface):
        return identity
    raise InvalidIdentityError(extra={"identity_type": type(identity).__name__})


__all__ = [
    "FlaskLoginIdentityProvider",
    "IdentityProvider",
    "Role",
    "RoleInterface",
    "coerce_identity",
]
