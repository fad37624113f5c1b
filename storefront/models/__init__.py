"""Storefront 模型层.

对外暴露模型基类、协作对象注册表与身份/ACL 协议.
"""

from storefront.models.acl import AclPolicy, AclResourceInterface
from storefront.models.base import AbstractModel
from storefront.models.identity import (
    FlaskLoginIdentityProvider,
    IdentityProvider,
    Role,
    RoleInterface,
    coerce_identity,
)
from storefront.models.options import option_setter
from storefront.models.registry import (
    FORM_CATEGORY,
    RESOURCE_CATEGORY,
    CollaboratorRegistry,
    register_form,
    register_resource,
    registry,
)
from storefront.models.resource import BaseResource, ResourceInterface

__all__ = [
    "FORM_CATEGORY",
    "RESOURCE_CATEGORY",
    "AbstractModel",
    "AclPolicy",
    "AclResourceInterface",
    "BaseResource",
    "CollaboratorRegistry",
    "FlaskLoginIdentityProvider",
    "IdentityProvider",
    "ResourceInterface",
    "Role",
    "RoleInterface",
    "coerce_identity",
    "option_setter",
    "register_form",
    "register_resource",
    "registry",
]
