"""Storefront - 统一异常定义.

集中维护模型层异常类型、严重度与 HTTP 状态码映射.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from werkzeug.exceptions import HTTPException

from storefront.constants import HttpStatus
from storefront.constants.system_constants import ErrorCategory, ErrorMessages, ErrorSeverity

if TYPE_CHECKING:
    from storefront.types.structures import LoggerExtra


@dataclass(frozen=True, slots=True)
class ExceptionMetadata:
    """异常的元信息."""

    status_code: int
    category: ErrorCategory
    severity: ErrorSeverity
    default_message_key: str

    @property
    def default_message(self) -> str:
        """根据 message key 获取默认文案."""
        return getattr(ErrorMessages, self.default_message_key, ErrorMessages.INTERNAL_ERROR)


class AppError(Exception):
    """统一的基础业务异常.

    Args:
        message: 自定义错误文案,若为空则根据 ``message_key`` 推导.
        message_key: 自定义消息键.
        extra: 结构化日志附加字段.
        severity: 错误严重度.
        category: 错误分类.
        status_code: 覆盖默认的 HTTP 状态码.

    """

    metadata = ExceptionMetadata(
        status_code=HttpStatus.INTERNAL_SERVER_ERROR,
        category=ErrorCategory.SYSTEM,
        severity=ErrorSeverity.HIGH,
        default_message_key="INTERNAL_ERROR",
    )

    def __init__(
        self,
        message: str | None = None,
        *,
        message_key: str | None = None,
        extra: LoggerExtra | None = None,
        severity: ErrorSeverity | None = None,
        category: ErrorCategory | None = None,
        status_code: int | None = None,
    ) -> None:
        self.message_key = message_key or self.metadata.default_message_key
        self.message = message or getattr(ErrorMessages, self.message_key, ErrorMessages.INTERNAL_ERROR)
        self.extra = dict(extra or {})
        self.severity = severity or self.metadata.severity
        self.category = category or self.metadata.category
        self.status_code = int(status_code or self.metadata.status_code)
        super().__init__(self.message)

    @property
    def recoverable(self) -> bool:
        """表示该异常是否可恢复.

        Returns:
            bool: 严重度为 LOW 或 MEDIUM 时为 True.

        """
        return self.severity in (ErrorSeverity.LOW, ErrorSeverity.MEDIUM)


class ValidationError(AppError):
    """表示输入参数或配置验证失败.

    常用于模型配置、身份信息等入参校验,默认返回 400.
    """

    metadata = ExceptionMetadata(
        status_code=HttpStatus.BAD_REQUEST,
        category=ErrorCategory.VALIDATION,
        severity=ErrorSeverity.LOW,
        default_message_key="VALIDATION_ERROR",
    )


class ConflictError(AppError):
    """表示注册表等状态冲突,默认返回 409."""

    metadata = ExceptionMetadata(
        status_code=HttpStatus.CONFLICT,
        category=ErrorCategory.BUSINESS,
        severity=ErrorSeverity.MEDIUM,
        default_message_key="CONSTRAINT_VIOLATION",
    )


class InvalidIdentityError(ValidationError):
    """表示传入的身份既不是角色映射、标量、None,也不是角色对象."""

    metadata = ExceptionMetadata(
        status_code=HttpStatus.BAD_REQUEST,
        category=ErrorCategory.VALIDATION,
        severity=ErrorSeverity.LOW,
        default_message_key="INVALID_IDENTITY",
    )


class CollaboratorNotFoundError(AppError):
    """表示按命名约定推导出的资源/表单标识没有对应的可构造类型.

    属于装配错误,不在本地恢复,直接向调用方传播.
    """

    metadata = ExceptionMetadata(
        status_code=HttpStatus.INTERNAL_SERVER_ERROR,
        category=ErrorCategory.CONFIGURATION,
        severity=ErrorSeverity.HIGH,
        default_message_key="COLLABORATOR_NOT_FOUND",
    )


class AclNotConfiguredError(AppError):
    """表示模型在未配置访问控制策略时执行了权限检查."""

    metadata = ExceptionMetadata(
        status_code=HttpStatus.INTERNAL_SERVER_ERROR,
        category=ErrorCategory.CONFIGURATION,
        severity=ErrorSeverity.HIGH,
        default_message_key="ACL_NOT_CONFIGURED",
    )


def map_exception_to_status(error: Exception, default: int = HttpStatus.INTERNAL_SERVER_ERROR) -> int:
    """根据异常类型推导 HTTP 状态码.

    Args:
        error: 捕获到的异常对象.
        default: 无法匹配时的默认状态码.

    Returns:
        int: 与异常对应的 HTTP 状态码.

    """
    if isinstance(error, AppError):
        return error.status_code

    if isinstance(error, HTTPException):
        code = getattr(error, "code", None)
        if code is not None:
            return int(code)

    return int(default)


__all__ = [
    "AclNotConfiguredError",
    "AppError",
    "CollaboratorNotFoundError",
    "ConflictError",
    "ExceptionMetadata",
    "InvalidIdentityError",
    "ValidationError",
    "map_exception_to_status",
]
