import pytest
from flask import Flask
from flask_login import UserMixin, login_user

from storefront import create_app
from storefront.errors import InvalidIdentityError
from storefront.models import AbstractModel, FlaskLoginIdentityProvider, Role
from storefront.settings import Settings
from storefront.utils.model_context import get_request_model


class Shop_Model_Account(AbstractModel):
    def init(self) -> None:
        self.init_calls = getattr(self, "init_calls", 0) + 1


class StoreUser(UserMixin):
    def __init__(self, user_id: str, role: str) -> None:
        self.id = user_id
        self.role = role


class RoleUser(UserMixin):
    def __init__(self, user_id: str, role_id: str) -> None:
        self.id = user_id
        self.role_id = role_id


@pytest.fixture
def app():
    app = create_app(settings=Settings.load())
    app.config["TESTING"] = True
    app.config["WTF_CSRF_ENABLED"] = False

    @app.route("/boom")
    def boom():
        raise InvalidIdentityError()

    return app


@pytest.mark.unit
def test_provider_reports_no_identity_outside_request_context():
    provider = FlaskLoginIdentityProvider()

    assert provider.has_identity() is False
    assert provider.get_identity() is None


@pytest.mark.unit
def test_provider_reports_no_identity_without_login_manager():
    bare_app = Flask(__name__)
    provider = FlaskLoginIdentityProvider()

    with bare_app.test_request_context("/"):
        model = Shop_Model_Account(identity_provider=provider)

        assert provider.has_identity() is False
        assert model.get_identity() == "Guest"


@pytest.mark.unit
def test_anonymous_request_resolves_to_guest(app):
    with app.test_request_context("/"):
        model = Shop_Model_Account()

        assert model.get_identity() == "Guest"
        assert model.identity_resolved is False


@pytest.mark.unit
def test_logged_in_user_role_is_wrapped_as_mapping(app):
    with app.test_request_context("/"):
        login_user(StoreUser("1", "Customer"))
        model = Shop_Model_Account()

        assert model.get_identity() == Role("Customer")
        assert model.identity_resolved is True


@pytest.mark.unit
def test_logged_in_user_implementing_role_passes_through(app):
    user = RoleUser("2", "Admin")
    with app.test_request_context("/"):
        login_user(user)
        model = Shop_Model_Account()

        assert model.get_identity() is user


@pytest.mark.unit
def test_request_model_is_built_once_per_request(app):
    with app.test_request_context("/"):
        first = get_request_model(Shop_Model_Account)
        second = get_request_model(Shop_Model_Account, {"identity": "Admin"})

        assert first is second
        assert first.init_calls == 1
        assert first.identity_resolved is False

    with app.test_request_context("/"):
        assert get_request_model(Shop_Model_Account) is not first


@pytest.mark.unit
def test_app_errors_are_rendered_as_json(app):
    client = app.test_client()

    response = client.get("/boom")

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] is True
    assert payload["message_code"] == "INVALID_IDENTITY"
    assert payload["category"] == "validation"


@pytest.mark.unit
def test_request_id_is_bound_and_echoed(app):
    client = app.test_client()

    response = client.get("/boom", headers={"X-Request-ID": "req-abc.1"})

    assert response.headers["X-Request-ID"] == "req-abc.1"
    assert response.get_json()["context"]["request_id"] == "req-abc.1"


@pytest.mark.unit
def test_invalid_request_id_header_is_replaced(app):
    client = app.test_client()

    response = client.get("/boom", headers={"X-Request-ID": "bad id with spaces"})

    assert response.headers["X-Request-ID"].startswith("req_")
