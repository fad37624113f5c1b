"""Storefront - 常量定义模块

统一管理错误分类、严重度与错误消息,避免魔法字符串.
"""

from enum import Enum


class ErrorCategory(Enum):
    """错误分类枚举."""

    VALIDATION = "validation"
    BUSINESS = "business"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    CONFIGURATION = "configuration"
    SYSTEM = "system"


class ErrorSeverity(Enum):
    """错误严重程度枚举."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# 错误消息常量
class ErrorMessages:
    """错误消息常量."""

    # 通用错误
    INTERNAL_ERROR = "服务器内部错误"
    VALIDATION_ERROR = "数据验证失败"
    INVALID_REQUEST = "无效的请求"
    AUTHENTICATION_REQUIRED = "请先登录"
    CONSTRAINT_VIOLATION = "数据约束错误"

    # 模型配置错误
    INVALID_OPTIONS = "模型配置必须为映射或 pydantic 模型"
    INVALID_IDENTITY = "无效的身份信息"
    ACL_NOT_CONFIGURED = "模型未配置访问控制策略"

    # 协作对象错误
    COLLABORATOR_NOT_FOUND = "未找到协作对象"
    COLLABORATOR_CONTRACT_MISMATCH = "协作对象未实现约定接口"
    COLLABORATOR_ALREADY_REGISTERED = "协作对象已注册"
