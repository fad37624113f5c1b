# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供身份提供方、访问控制策略的桩实现与隔离的协作对象注册表。
"""

from dataclasses import dataclass, field

import pytest

from storefront.models.registry import CollaboratorRegistry


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 强制注入隔离环境变量."""
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setenv("SECRET_KEY", "test-secret-key")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("ENABLE_DEBUG_LOG", raising=False)


@dataclass
class StubIdentityProvider:
    """可控的身份提供方,记录被查询的次数."""

    identity: object = None
    logged_in: bool = False
    calls: int = 0

    def has_identity(self) -> bool:
        self.calls += 1
        return self.logged_in

    def get_identity(self) -> object:
        return self.identity

    def login(self, identity: object) -> None:
        self.identity = identity
        self.logged_in = True


@dataclass
class RecordingAcl:
    """记录入参并返回固定结论的访问控制策略."""

    verdict: bool = True
    calls: list = field(default_factory=list)

    def is_allowed(self, role, resource, privilege) -> bool:
        self.calls.append((role, resource, privilege))
        return self.verdict


@pytest.fixture
def identity_provider():
    return StubIdentityProvider()


@pytest.fixture
def acl():
    return RecordingAcl()


@pytest.fixture
def collaborators():
    return CollaboratorRegistry()
