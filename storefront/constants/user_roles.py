"""用户角色常量.

定义访问控制使用的角色名称,避免魔法字符串.
"""

from typing import ClassVar


class UserRole:
    """用户角色常量.

    定义未登录时的默认角色及身份映射使用的键名.
    """

    # 未登录访客
    GUEST: ClassVar[str] = "Guest"

    # 身份映射中承载角色名称的键
    IDENTITY_ROLE_KEY: ClassVar[str] = "role"
