"""结构化日志处理器与模型 logger 的单元测试."""

from __future__ import annotations

import pytest
import structlog

from storefront.errors import CollaboratorNotFoundError, InvalidIdentityError
from storefront.models import AbstractModel
from storefront.settings import APP_VERSION, DEFAULT_APP_NAME
from storefront.utils.logging.context_vars import request_id_var, user_id_var
from storefront.utils.logging.handlers import DebugFilter
from storefront.utils.structlog_config import (
    add_app_context,
    add_request_context,
    enhanced_error_handler,
)


class Shop_Model_Inventory(AbstractModel):
    pass


@pytest.mark.unit
def test_request_context_is_copied_from_context_vars() -> None:
    request_token = request_id_var.set("req_test_1")
    user_token = user_id_var.set("42")
    try:
        event = add_request_context(None, "info", {"event": "loaded"})
    finally:
        request_id_var.reset(request_token)
        user_id_var.reset(user_token)

    assert event["request_id"] == "req_test_1"
    assert event["user_id"] == "42"


@pytest.mark.unit
def test_unbound_request_context_adds_no_fields() -> None:
    event = add_request_context(None, "info", {"event": "loaded"})

    assert event == {"event": "loaded"}


@pytest.mark.unit
def test_app_context_falls_back_to_package_defaults() -> None:
    event = add_app_context(None, "info", {"event": "loaded"})

    assert event["app"] == DEFAULT_APP_NAME
    assert event["version"] == APP_VERSION


@pytest.mark.unit
def test_debug_filter_drops_debug_events_until_enabled() -> None:
    debug_filter = DebugFilter(enabled=False)

    with pytest.raises(structlog.DropEvent):
        debug_filter(None, "debug", {"event": "x"})
    assert debug_filter(None, "warning", {"event": "x"}) == {"event": "x"}

    debug_filter.set_enabled(enabled=True)
    assert debug_filter(None, "debug", {"event": "x"}) == {"event": "x"}


@pytest.mark.unit
def test_model_logger_is_bound_to_model_and_namespace() -> None:
    model = Shop_Model_Inventory()

    context = structlog.get_context(model._logger)

    assert context["model"] == "Shop_Model_Inventory"
    assert context["namespace"] == "Shop"


@pytest.mark.unit
def test_error_payload_outside_request() -> None:
    payload = enhanced_error_handler(InvalidIdentityError(), extra={"source": "unit"})

    assert payload["error"] is True
    assert payload["category"] == "validation"
    assert payload["message_code"] == "INVALID_IDENTITY"
    assert payload["recoverable"] is True
    assert payload["context"] == {"request_id": None, "user_id": None}
    assert payload["extra"] == {"source": "unit"}


@pytest.mark.unit
def test_configuration_errors_are_not_recoverable() -> None:
    payload = enhanced_error_handler(CollaboratorNotFoundError())

    assert payload["category"] == "configuration"
    assert payload["severity"] == "high"
    assert payload["recoverable"] is False
    assert payload["suggestions"]
