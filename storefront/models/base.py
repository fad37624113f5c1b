"""Storefront - 模型基类.

所有领域模型继承 ``AbstractModel``,由基类统一处理:

- 配置项分发: ``{"pageSize": 20}`` -> ``set_page_size(20)``,未知配置项静默忽略.
- 资源/表单: 按 ``<Namespace>_Resource_<Inflected>`` / ``<Namespace>_Form_<Inflected>``
  从协作对象注册表懒加载,每个模型实例每个逻辑名只构造一次.
- 身份与 ACL: 解析当前请求身份,再把 (身份, 模型, 动作) 交给访问控制策略判断.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel

from storefront.constants import ErrorMessages, UserRole
from storefront.errors import AclNotConfiguredError, CollaboratorNotFoundError, InvalidIdentityError, ValidationError
from storefront.models.identity import FlaskLoginIdentityProvider, coerce_identity
from storefront.models.options import OptionSetterTable, collect_option_setters, resolve_setter
from storefront.models.registry import FORM_CATEGORY, RESOURCE_CATEGORY, CollaboratorRegistry
from storefront.models.registry import registry as default_registry
from storefront.models.resource import ResourceInterface
from storefront.utils.inflection import IDENTIFIER_SEPARATOR, build_identifier
from storefront.utils.structlog_config import get_model_logger

if TYPE_CHECKING:
    from storefront.models.acl import AclPolicy
    from storefront.models.identity import IdentityProvider, RoleInterface
    from storefront.types import OptionsMapping


class AbstractModel:
    """模型基类.

    Attributes:
        namespace: 协作对象命名空间,未设置时取类名第一个下划线前的片段.
        acl_resource_id_override: ACL 资源标识,未设置时使用类名.

    Example:
        >>> class Shop_Model_Catalog(AbstractModel):
        ...     def set_page_size(self, value: int) -> None:
        ...         self.page_size = value
        >>> catalog = Shop_Model_Catalog({"pageSize": 20, "unknown": 1})
        >>> catalog.page_size
        20

    """

    namespace: ClassVar[str | None] = None
    acl_resource_id_override: ClassVar[str | None] = None

    _option_setters: ClassVar[OptionSetterTable] = MappingProxyType({})

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._option_setters = collect_option_setters(cls)

    def __init__(
        self,
        options: OptionsMapping | BaseModel | None = None,
        *,
        identity_provider: IdentityProvider | None = None,
        registry: CollaboratorRegistry | None = None,
    ) -> None:
        self._resources: dict[str, Any] = {}
        self._forms: dict[str, Any] = {}
        self._identity: RoleInterface | None = None
        self._acl: AclPolicy | None = None
        self._identity_provider: IdentityProvider = (
            identity_provider if identity_provider is not None else FlaskLoginIdentityProvider()
        )
        self._registry = registry if registry is not None else default_registry
        self._logger = get_model_logger(type(self).__name__, self._get_namespace())

        if options is not None:
            self.configure(options)

        self.init()

    def init(self) -> None:
        """配置完成后的子类扩展钩子,默认无操作."""

    # --------------------------------------------------------------------- #
    # 配置
    # --------------------------------------------------------------------- #
    @classmethod
    def option_names(cls) -> tuple[str, ...]:
        """返回该模型类可接受的配置项名称."""
        return tuple(sorted(cls._option_setters))

    def configure(self, options: OptionsMapping | BaseModel) -> AbstractModel:
        """按配置项调用对应的 setter.

        Args:
            options: 配置映射,或 pydantic 模型(按 ``model_dump()`` 展开).

        Returns:
            AbstractModel: 当前实例,便于链式调用.

        Raises:
            ValidationError: ``options`` 既不是映射也不是 pydantic 模型.

        """
        if isinstance(options, BaseModel):
            options = options.model_dump()
        if not isinstance(options, Mapping):
            raise ValidationError(
                ErrorMessages.INVALID_OPTIONS,
                message_key="INVALID_OPTIONS",
                extra={"options_type": type(options).__name__},
            )

        setters = type(self)._option_setters
        for key, value in options.items():
            setter = resolve_setter(setters, str(key))
            if setter is not None:
                setter(self, value)
        return self

    def set_acl(self, acl: AclPolicy) -> AbstractModel:
        self._acl = acl
        return self

    def get_acl(self) -> AclPolicy:
        """返回访问控制策略.

        Raises:
            AclNotConfiguredError: 尚未配置策略.

        """
        if self._acl is None:
            raise AclNotConfiguredError(extra={"model": type(self).__name__})
        return self._acl

    def set_identity_provider(self, provider: IdentityProvider) -> AbstractModel:
        self._identity_provider = provider
        return self

    # --------------------------------------------------------------------- #
    # 资源与表单
    # --------------------------------------------------------------------- #
    def get_resource(self, name: str) -> ResourceInterface:
        """按逻辑名获取资源,首次访问时以无参方式构造并缓存.

        Args:
            name: camelCase 逻辑名,如 ``userProfile``.

        Returns:
            ResourceInterface: 缓存的资源实例.

        Raises:
            CollaboratorNotFoundError: 推导出的标识未登记,或构造结果不满足资源接口.

        """
        if name not in self._resources:
            identifier = self._build_identifier(RESOURCE_CATEGORY, name)
            resource = self._create_collaborator(identifier)
            if not isinstance(resource, ResourceInterface):
                self._logger.warning(
                    "资源未实现约定接口",
                    identifier=identifier,
                    resource_type=type(resource).__name__,
                )
                raise CollaboratorNotFoundError(
                    f"{ErrorMessages.COLLABORATOR_CONTRACT_MISMATCH}: {identifier}",
                    message_key="COLLABORATOR_CONTRACT_MISMATCH",
                    extra={"identifier": identifier},
                )
            self._resources[name] = resource
        return self._resources[name]

    def get_form(self, name: str) -> Any:
        """按逻辑名获取表单,首次访问时以 ``model=self`` 构造并缓存.

        Raises:
            CollaboratorNotFoundError: 推导出的标识未登记.

        """
        if name not in self._forms:
            identifier = self._build_identifier(FORM_CATEGORY, name)
            self._forms[name] = self._create_collaborator(identifier, model=self)
        return self._forms[name]

    def _create_collaborator(self, identifier: str, **kwargs: Any) -> Any:
        try:
            factory = self._registry.resolve(identifier)
        except CollaboratorNotFoundError:
            self._logger.warning("协作对象未登记", identifier=identifier)
            raise
        self._logger.debug("构造协作对象", identifier=identifier)
        return factory(**kwargs)

    def _build_identifier(self, category: str, name: str) -> str:
        return build_identifier(self._get_namespace(), category, name)

    def _get_namespace(self) -> str:
        """模块命名空间: 显式的 ``namespace`` 或类名第一个下划线片段."""
        if self.namespace:
            return self.namespace
        return type(self).__name__.split(IDENTIFIER_SEPARATOR, 1)[0]

    # --------------------------------------------------------------------- #
    # 身份与访问控制
    # --------------------------------------------------------------------- #
    @property
    def identity_resolved(self) -> bool:
        return self._identity is not None

    def set_identity(self, identity: object) -> AbstractModel:
        """设置当前请求的身份.

        Args:
            identity: 含 ``role`` 键的映射(缺省 ``Guest``)、非布尔标量、None 或角色对象.

        Returns:
            AbstractModel: 当前实例.

        Raises:
            InvalidIdentityError: 身份形态无法识别,如布尔值.

        """
        try:
            self._identity = coerce_identity(identity)
        except InvalidIdentityError:
            self._logger.warning("无效的身份信息", identity_type=type(identity).__name__)
            raise
        return self

    def get_identity(self) -> RoleInterface | str:
        """获取当前身份.

        尚未解析时查询身份提供方: 未登录直接返回 ``"Guest"`` 且不缓存,
        之后登录仍会被感知;已登录则解析并缓存,后续不再查询.
        """
        if self._identity is None:
            if not self._identity_provider.has_identity():
                return UserRole.GUEST
            self.set_identity(self._identity_provider.get_identity())
            self._logger.debug("已解析请求身份", role=str(getattr(self._identity, "role_id", self._identity)))
        return self._identity

    def reset_identity(self) -> AbstractModel:
        """清除已解析的身份,下次读取时重新查询身份提供方."""
        self._identity = None
        return self

    @property
    def acl_resource_id(self) -> str:
        """模型在 ACL 中的资源标识."""
        return self.acl_resource_id_override or type(self).__name__

    def check_acl(self, action: str) -> bool:
        """判断当前身份能否对本模型执行 ``action``,直接返回策略结果."""
        return self.get_acl().is_allowed(self.get_identity(), self, action)


AbstractModel._option_setters = collect_option_setters(AbstractModel)

__all__ = ["AbstractModel"]
