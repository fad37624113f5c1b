"""Storefront - Flask 应用初始化.

提供领域模型基类运行所需的应用骨架: 配置、登录管理、CSRF、结构化日志与统一错误响应.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import timedelta

from flask import Flask, jsonify, request
from flask.typing import ResponseReturnValue
from flask_login import UserMixin
from flask_wtf.csrf import CSRFProtect

from storefront.constants import ErrorMessages
from storefront.errors import map_exception_to_status
from storefront.settings import Settings
from storefront.types.extensions import StorefrontFlask, StorefrontLoginManager
from storefront.utils.logging.request_context import register_request_logging
from storefront.utils.structlog_config import (
    ErrorContext,
    configure_structlog,
    enhanced_error_handler,
    get_logger,
)

# 初始化扩展
login_manager: StorefrontLoginManager = StorefrontLoginManager()
csrf = CSRFProtect()

UserLoader = Callable[[str], UserMixin | None]


def create_app(
    *,
    settings: Settings | None = None,
    user_loader: UserLoader | None = None,
) -> StorefrontFlask:
    """创建Flask应用实例.

    Args:
        settings: 可选的配置对象,用于测试或多环境启动.
        user_loader: Flask-Login 用户加载函数,缺省时所有请求均为匿名访客.

    Returns:
        StorefrontFlask: Flask应用实例

    """
    resolved_settings = settings or Settings.load()
    app = StorefrontFlask(__name__)

    # 配置应用
    app.config.from_mapping(resolved_settings.to_flask_config())

    # 初始化扩展
    initialize_extensions(app, resolved_settings, user_loader)

    # 配置统一日志系统
    configure_structlog(app)
    register_request_logging(app)

    # 设置全局日志级别
    log_level_name = str(app.config.get("LOG_LEVEL", "INFO"))
    logging.getLogger().setLevel(getattr(logging, log_level_name, logging.INFO))

    app.enhanced_error_handler = enhanced_error_handler

    # 注册全局错误处理器
    @app.errorhandler(Exception)
    def handle_global_exception(error: Exception) -> ResponseReturnValue:
        """全局错误处理."""
        payload = enhanced_error_handler(error, ErrorContext(error, request))
        return jsonify(payload), map_exception_to_status(error)

    get_logger("storefront").info(
        "应用初始化完成",
        environment=resolved_settings.environment,
        app_version=resolved_settings.app_version,
    )
    return app


def initialize_extensions(app: Flask, settings: Settings, user_loader: UserLoader | None) -> None:
    """初始化 Flask-Login 与 CSRF 扩展.

    Args:
        app: Flask 应用实例.
        settings: 统一配置对象.
        user_loader: Flask-Login 用户加载函数,可为空.

    """
    login_manager.init_app(app)
    login_manager.login_view = settings.login_view
    login_manager.login_message = ErrorMessages.AUTHENTICATION_REQUIRED
    login_manager.session_protection = "basic"
    login_manager.remember_cookie_duration = timedelta(seconds=settings.remember_cookie_duration_seconds)
    login_manager.user_loader(user_loader or _load_anonymous_user)

    csrf.init_app(app)


def _load_anonymous_user(_user_id: str) -> UserMixin | None:
    return None


__all__ = ["create_app", "csrf", "login_manager"]
