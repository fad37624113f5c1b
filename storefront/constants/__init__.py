"""常量模块。

集中管理系统常量，包括错误消息、HTTP 状态码、用户角色等。

主要常量：
- ErrorMessages: 错误消息常量
- HttpStatus: HTTP 状态码常量
- UserRole: 用户角色常量
"""

# 导入HTTP状态码常量（使用Python标准库）
from http import HTTPStatus as HttpStatus

from .system_constants import (
    ErrorCategory,
    ErrorMessages,
    ErrorSeverity,
)
from .user_roles import UserRole

__all__ = [
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "HttpStatus",
    "UserRole",
]
