"""Storefront - 统一配置读取与校验.

目标:
- 将环境变量读取、默认值、校验集中到单一入口,避免散落在各模块中重复解析.
- `create_app(settings=...)` 只消费 Settings,不再直接读取环境变量.

说明:
- Settings 使用 `pydantic-settings` 的 `BaseSettings` 从环境变量与本地 `.env`(可选)读取配置.
- 生产环境缺失 SECRET_KEY 会直接抛出 ValueError.
"""

from __future__ import annotations

import logging
import secrets
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DOTENV_PATH = PROJECT_ROOT / ".env"

DEFAULT_ENVIRONMENT = "development"
DEFAULT_APP_NAME = "Storefront"
APP_VERSION = "0.1.0"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOGIN_VIEW = "auth.login"

DEFAULT_SESSION_LIFETIME_SECONDS = 3600
DEFAULT_REMEMBER_COOKIE_DURATION_SECONDS = 7 * 24 * 3600

_VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """应用运行时设置集合."""

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
    )

    environment: str = Field(default=DEFAULT_ENVIRONMENT, validation_alias="FLASK_ENV")
    debug: bool = Field(default=False, validation_alias="FLASK_DEBUG")

    app_name: str = Field(default=DEFAULT_APP_NAME, validation_alias="APP_NAME")
    app_version: str = APP_VERSION

    secret_key: str = Field(default="", validation_alias="SECRET_KEY")

    log_level: str = Field(default=DEFAULT_LOG_LEVEL, validation_alias="LOG_LEVEL")
    enable_debug_log: bool = Field(default=False, validation_alias="ENABLE_DEBUG_LOG")

    session_lifetime_seconds: int = Field(
        default=DEFAULT_SESSION_LIFETIME_SECONDS,
        validation_alias="PERMANENT_SESSION_LIFETIME",
    )
    remember_cookie_duration_seconds: int = Field(
        default=DEFAULT_REMEMBER_COOKIE_DURATION_SECONDS,
        validation_alias="REMEMBER_COOKIE_DURATION",
    )
    login_view: str | None = Field(default=DEFAULT_LOGIN_VIEW, validation_alias="LOGIN_VIEW")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("login_view", mode="before")
    @classmethod
    def _strip_blank_to_none(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or None
        return value

    @property
    def is_production(self) -> bool:
        """当前是否为生产环境."""
        return self.environment.strip().lower() == "production"

    def to_flask_config(self) -> dict[str, object]:
        """转换为 Flask app.config 可写入的配置字典."""
        return {
            "ENV": self.environment,
            "DEBUG": self.debug,
            "APP_NAME": self.app_name,
            "APP_VERSION": self.app_version,
            "SECRET_KEY": self.secret_key,
            "LOG_LEVEL": self.log_level,
            "ENABLE_DEBUG_LOG": self.enable_debug_log,
            "PERMANENT_SESSION_LIFETIME": self.session_lifetime_seconds,
            "REMEMBER_COOKIE_DURATION": self.remember_cookie_duration_seconds,
            "LOGIN_VIEW": self.login_view,
        }

    @classmethod
    def load(cls) -> Settings:
        """从环境变量加载 Settings 并执行必要校验."""
        load_dotenv(dotenv_path=DOTENV_PATH if DOTENV_PATH.exists() else None, override=False)
        return cls()

    @model_validator(mode="after")
    def _apply_defaults_and_validate(self) -> Settings:
        environment_normalized = self.environment.strip().lower()

        debug = self._resolve_debug(environment_normalized)
        self._ensure_secret_key(debug)

        self._validate()
        return self

    def _resolve_debug(self, environment_normalized: str) -> bool:
        if "debug" in self.model_fields_set:
            return bool(self.debug)
        debug = environment_normalized != "production"
        object.__setattr__(self, "debug", debug)
        return debug

    def _ensure_secret_key(self, debug: bool) -> None:
        if self.secret_key:
            return
        if not debug:
            raise ValueError("SECRET_KEY environment variable must be set in production")
        object.__setattr__(self, "secret_key", secrets.token_urlsafe(32))
        logger.warning("⚠️  开发环境使用随机生成的SECRET_KEY,生产环境请设置环境变量")

    def _validate(self) -> None:
        """执行跨字段校验,统一抛出可读的 ValueError."""
        checks: list[tuple[str, bool]] = [
            ("LOG_LEVEL 仅支持 DEBUG/INFO/WARNING/ERROR/CRITICAL", self.log_level not in _VALID_LOG_LEVELS),
            ("PERMANENT_SESSION_LIFETIME 必须为正整数(秒)", self.session_lifetime_seconds <= 0),
            ("REMEMBER_COOKIE_DURATION 必须为正整数(秒)", self.remember_cookie_duration_seconds <= 0),
        ]
        errors = [message for message, condition in checks if condition]
        if errors:
            joined = "; ".join(errors)
            raise ValueError(f"配置校验失败: {joined}")
