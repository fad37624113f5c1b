"""请求级别的日志上下文注入.

让 request_id/user_id 通过 contextvars 在整个请求生命周期可用(用于日志关联与错误封套).
"""

from __future__ import annotations

import re
from contextlib import suppress
from typing import TYPE_CHECKING
from uuid import uuid4

from flask import Flask, g, request
from flask_login import current_user

from storefront.utils.logging.context_vars import request_id_var, user_id_var

if TYPE_CHECKING:
    from werkzeug.wrappers.response import Response

REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.:-]{0,127}$")


def _generate_request_id() -> str:
    return f"req_{uuid4().hex}"


def _sanitize_request_id(raw_value: str | None) -> str | None:
    if not raw_value:
        return None
    value = raw_value.strip()
    if not _REQUEST_ID_PATTERN.match(value):
        return None
    return value


def _resolve_user_id() -> str | None:
    with suppress(RuntimeError, AttributeError):
        if current_user and getattr(current_user, "is_authenticated", False):
            return str(current_user.get_id())
    return None


def register_request_logging(app: Flask) -> None:
    """注册 request_id/user_id 的绑定与释放钩子."""

    @app.before_request
    def _bind_request_context() -> None:
        request_id = _sanitize_request_id(request.headers.get(REQUEST_ID_HEADER)) or _generate_request_id()
        # token 在 teardown 时 reset
        g._request_id_token = request_id_var.set(request_id)
        g._user_id_token = user_id_var.set(_resolve_user_id())
        g.request_id = request_id

    @app.after_request
    def _expose_request_id(response: Response) -> Response:
        request_id = getattr(g, "request_id", None)
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @app.teardown_request
    def _reset_request_context(_exception: BaseException | None) -> None:
        request_id_token = g.pop("_request_id_token", None)
        if request_id_token is not None:
            request_id_var.reset(request_id_token)
        user_id_token = g.pop("_user_id_token", None)
        if user_id_token is not None:
            user_id_var.reset(user_id_token)


__all__ = ["REQUEST_ID_HEADER", "register_request_logging"]
