"""Storefront 的结构化日志.

- 应用工厂: ``configure_structlog(app)`` 根据 ``ENABLE_DEBUG_LOG`` 打开调试日志,
  ``enhanced_error_handler`` 把异常转换为统一的 JSON 错误载荷并记录日志.
- 模型层: ``get_model_logger`` 返回绑定了模型名与命名空间的 logger,
  调用方只需补充 ``identifier``/``role`` 等事件字段.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import structlog
from flask import Flask, current_app, has_app_context

from storefront.constants.system_constants import ErrorSeverity
from storefront.settings import APP_VERSION, DEFAULT_APP_NAME
from storefront.types import JsonValue, LoggerExtra, StructlogEventDict
from storefront.utils.logging.context_vars import request_id_var, user_id_var
from storefront.utils.logging.error_adapter import (
    ErrorContext,
    ErrorMetadata,
    build_public_context,
    derive_error_metadata,
    get_error_suggestions,
)
from storefront.utils.logging.handlers import DebugFilter

if TYPE_CHECKING:
    from structlog.typing import Processor, WrappedLogger

ErrorPayload = dict[str, JsonValue | LoggerExtra]

MODEL_LOGGER_NAME = "storefront.models"
ERROR_LOGGER_NAME = "storefront.errors"


def add_request_context(
    _logger: WrappedLogger,
    _method_name: str,
    event_dict: StructlogEventDict,
) -> StructlogEventDict:
    """写入当前请求绑定的 request_id/user_id,未绑定的字段不输出."""
    request_id = request_id_var.get()
    if request_id is not None:
        event_dict.setdefault("request_id", request_id)
    user_id = user_id_var.get()
    if user_id is not None:
        event_dict.setdefault("user_id", user_id)
    return event_dict


def add_app_context(
    _logger: WrappedLogger,
    _method_name: str,
    event_dict: StructlogEventDict,
) -> StructlogEventDict:
    """写入应用名与版本,无应用上下文时使用包内默认值."""
    if has_app_context():
        event_dict["app"] = current_app.config.get("APP_NAME", DEFAULT_APP_NAME)
        event_dict["version"] = current_app.config.get("APP_VERSION", APP_VERSION)
    else:
        event_dict["app"] = DEFAULT_APP_NAME
        event_dict["version"] = APP_VERSION
    return event_dict


class StructlogConfig:
    """structlog 全局配置.

    处理器链只配置一次;调试开关保存在 ``debug_filter`` 上,可随应用配置切换.

    Attributes:
        debug_filter: 丢弃 DEBUG 事件的处理器.
        configured: structlog 是否已完成配置.

    """

    def __init__(self) -> None:
        self.debug_filter = DebugFilter(enabled=False)
        self.configured = False

    def build_processors(self, *, interactive: bool) -> list[Processor]:
        processors: list[Processor] = [
            self.debug_filter,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            add_request_context,
            add_app_context,
        ]
        if interactive:
            processors.append(
                structlog.dev.ConsoleRenderer(
                    colors=True,
                    exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=10),
                )
            )
        else:
            processors.extend(
                [
                    structlog.processors.format_exc_info,
                    structlog.processors.JSONRenderer(ensure_ascii=False),
                ]
            )
        return processors

    def configure(self, *, enable_debug: bool | None = None) -> None:
        """配置 structlog(幂等),并按需切换调试日志.

        Args:
            enable_debug: 为 None 时保持当前调试开关.

        """
        if not self.configured:
            structlog.configure(
                processors=self.build_processors(interactive=sys.stdout.isatty()),
                context_class=dict,
                logger_factory=structlog.stdlib.LoggerFactory(),
                wrapper_class=structlog.stdlib.BoundLogger,
                cache_logger_on_first_use=True,
            )
            self.configured = True

        if enable_debug is not None:
            self.debug_filter.set_enabled(enabled=enable_debug)


structlog_config = StructlogConfig()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """获取结构化日志记录器,首次调用时完成 structlog 配置."""
    structlog_config.configure()
    return structlog.get_logger(name)


def get_model_logger(model_name: str, namespace: str) -> structlog.stdlib.BoundLogger:
    """返回绑定了 ``model``/``namespace`` 的模型 logger.

    Args:
        model_name: 模型类名.
        namespace: 协作对象命名空间.

    """
    return get_logger(MODEL_LOGGER_NAME).bind(model=model_name, namespace=namespace)


def configure_structlog(app: Flask) -> None:
    """按应用配置初始化 structlog."""
    structlog_config.configure(enable_debug=bool(app.config.get("ENABLE_DEBUG_LOG", False)))


def enhanced_error_handler(
    error: Exception,
    context: ErrorContext | None = None,
    *,
    extra: LoggerExtra | None = None,
) -> ErrorPayload:
    """将异常转换为结构化错误载荷并记录日志.

    Args:
        error: 异常对象.
        context: 错误上下文,未提供时按当前请求自动创建.
        extra: 附加到载荷 ``extra`` 字段的信息.

    Returns:
        包含 error_id、category、severity、message_code、suggestions 与 context 的字典.

    """
    context = context or ErrorContext(error)
    context.ensure_request()
    metadata = derive_error_metadata(error)

    payload: ErrorPayload = {
        "error": True,
        "error_id": context.error_id,
        "category": metadata.category.value,
        "severity": metadata.severity.value,
        "message_code": metadata.message_key,
        "message": metadata.message,
        "timestamp": context.timestamp.isoformat(),
        "recoverable": metadata.recoverable,
        "suggestions": get_error_suggestions(metadata.category),
        "context": build_public_context(context),
    }
    if extra:
        payload["extra"] = dict(extra)

    _log_error_payload(error, metadata, context)
    return payload


def _log_error_payload(error: Exception, metadata: ErrorMetadata, context: ErrorContext) -> None:
    logger = get_logger(ERROR_LOGGER_NAME).bind(
        error_id=context.error_id,
        category=metadata.category.value,
        message_code=metadata.message_key,
        error_type=type(error).__name__,
    )
    if metadata.severity in (ErrorSeverity.HIGH, ErrorSeverity.CRITICAL):
        logger.error(metadata.message, exc_info=error)
    else:
        logger.warning(metadata.message, detail=str(error))


__all__ = [
    "ErrorContext",
    "add_app_context",
    "add_request_context",
    "configure_structlog",
    "enhanced_error_handler",
    "get_logger",
    "get_model_logger",
    "structlog_config",
]
