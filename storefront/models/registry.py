"""协作对象(资源/表单)注册表.

各模块在导入时按 ``<Namespace>_<Category>_<Inflected>`` 标识登记工厂,
模型按同样的命名约定查找,不做字符串到类的动态解析.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from storefront.constants import ErrorMessages
from storefront.errors import CollaboratorNotFoundError, ConflictError
from storefront.utils.inflection import build_identifier

RESOURCE_CATEGORY = "Resource"
FORM_CATEGORY = "Form"

CollaboratorFactory = Callable[..., Any]
FactoryT = TypeVar("FactoryT", bound=CollaboratorFactory)


class CollaboratorRegistry:
    """标识 -> 工厂 的运行期注册表.

    Example:
        >>> registry = CollaboratorRegistry()
        >>> registry.register_resource("Shop", "userProfile", UserProfileResource)
        >>> registry.resolve("Shop_Resource_User_Profile")
        <class 'UserProfileResource'>

    """

    def __init__(self) -> None:
        self._factories: dict[str, CollaboratorFactory] = {}

    def register(self, identifier: str, factory: CollaboratorFactory, *, override: bool = False) -> None:
        """登记工厂.

        Raises:
            ConflictError: 标识已存在且未指定 ``override``.

        """
        if not override and identifier in self._factories:
            raise ConflictError(
                f"{ErrorMessages.COLLABORATOR_ALREADY_REGISTERED}: {identifier}",
                message_key="COLLABORATOR_ALREADY_REGISTERED",
                extra={"identifier": identifier},
            )
        self._factories[identifier] = factory

    def register_resource(
        self,
        namespace: str,
        name: str,
        factory: CollaboratorFactory | None = None,
        *,
        override: bool = False,
    ) -> Any:
        """登记资源工厂,未传 ``factory`` 时作为类装饰器使用."""
        return self._register_category(namespace, RESOURCE_CATEGORY, name, factory, override=override)

    def register_form(
        self,
        namespace: str,
        name: str,
        factory: CollaboratorFactory | None = None,
        *,
        override: bool = False,
    ) -> Any:
        """登记表单工厂,未传 ``factory`` 时作为类装饰器使用."""
        return self._register_category(namespace, FORM_CATEGORY, name, factory, override=override)

    def _register_category(
        self,
        namespace: str,
        category: str,
        name: str,
        factory: CollaboratorFactory | None,
        *,
        override: bool,
    ) -> Any:
        identifier = build_identifier(namespace, category, name)
        if factory is not None:
            self.register(identifier, factory, override=override)
            return factory

        def decorator(target: FactoryT) -> FactoryT:
            self.register(identifier, target, override=override)
            return target

        return decorator

    def unregister(self, identifier: str) -> None:
        self._factories.pop(identifier, None)

    def resolve(self, identifier: str) -> CollaboratorFactory:
        """按标识获取工厂.

        Raises:
            CollaboratorNotFoundError: 标识未登记.

        """
        try:
            return self._factories[identifier]
        except KeyError as exc:
            raise CollaboratorNotFoundError(
                f"{ErrorMessages.COLLABORATOR_NOT_FOUND}: {identifier}",
                extra={"identifier": identifier},
            ) from exc

    def identifiers(self) -> tuple[str, ...]:
        return tuple(sorted(self._factories))

    def clear(self) -> None:
        self._factories.clear()

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self.identifiers())

    def __len__(self) -> int:
        return len(self._factories)


registry = CollaboratorRegistry()


def register_resource(namespace: str, name: str, *, override: bool = False) -> Callable[[FactoryT], FactoryT]:
    """在全局注册表上登记资源类的装饰器.

    Example:
        >>> @register_resource("Shop", "userProfile")
        ... class UserProfileResource(BaseResource): ...

    """
    return registry.register_resource(namespace, name, override=override)


def register_form(namespace: str, name: str, *, override: bool = False) -> Callable[[FactoryT], FactoryT]:
    """在全局注册表上登记表单类的装饰器."""
    return registry.register_form(namespace, name, override=override)


__all__ = [
    "FORM_CATEGORY",
    "RESOURCE_CATEGORY",
    "CollaboratorFactory",
    "CollaboratorRegistry",
    "register_form",
    "register_resource",
    "registry",
]
