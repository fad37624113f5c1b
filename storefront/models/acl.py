"""访问控制策略协议.

策略实现(角色继承、规则存储等)不在本包内,模型只依赖 ``is_allowed`` 调用约定.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from storefront.models.identity import RoleInterface


@runtime_checkable
class AclResourceInterface(Protocol):
    """可作为 ACL 判断对象的资源."""

    @property
    def acl_resource_id(self) -> str:
        """ACL 中的资源标识."""
        ...


class AclPolicy(Protocol):
    """访问控制策略."""

    def is_allowed(
        self,
        role: RoleInterface | str | None,
        resource: AclResourceInterface | str | None,
        privilege: str | None,
    ) -> bool:
        """判断 ``role`` 能否对 ``resource`` 执行 ``privilege``."""
        ...


__all__ = ["AclPolicy", "AclResourceInterface"]
