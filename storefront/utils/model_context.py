"""请求级模型实例.

同一请求内对同一模型类只构造一次,实例缓存在 ``flask.g`` 上,随请求结束释放.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from flask import g

from storefront.models.base import AbstractModel

if TYPE_CHECKING:
    from pydantic import BaseModel

    from storefront.types import OptionsMapping

ModelT = TypeVar("ModelT", bound=AbstractModel)

_G_MODELS_KEY = "_storefront_models"


def get_request_model(
    model_cls: type[ModelT],
    options: OptionsMapping | BaseModel | None = None,
    **kwargs: Any,
) -> ModelT:
    """返回当前请求内 ``model_cls`` 的唯一实例.

    ``options`` 与 ``kwargs`` 只在首次构造时生效.

    Raises:
        RuntimeError: 不在 Flask 应用上下文中.

    """
    models: dict[type[AbstractModel], AbstractModel] = g.setdefault(_G_MODELS_KEY, {})
    instance = models.get(model_cls)
    if instance is None:
        instance = model_cls(options, **kwargs)
        models[model_cls] = instance
    return instance  # type: ignore[return-value]


__all__ = ["get_request_model"]
