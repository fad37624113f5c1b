"""模型表单基类.

表单由 ``AbstractModel.get_form`` 以 ``model=<模型实例>`` 构造,
通过弱引用读取模型状态,不延长模型的生命周期.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any

from wtforms import Form

if TYPE_CHECKING:
    from storefront.models.base import AbstractModel


class ModelForm(Form):
    """持有所属模型弱引用的 WTForms 表单.

    Example:
        >>> @register_form("Shop", "productReview")
        ... class ProductReviewForm(ModelForm):
        ...     rating = IntegerField()

    """

    def __init__(
        self,
        formdata: Any = None,
        obj: Any = None,
        prefix: str = "",
        data: Any = None,
        meta: Any = None,
        *,
        model: AbstractModel,
        **kwargs: Any,
    ) -> None:
        self._model_ref: weakref.ReferenceType[AbstractModel] = weakref.ref(model)
        super().__init__(formdata=formdata, obj=obj, prefix=prefix, data=data, meta=meta, **kwargs)

    @property
    def model(self) -> AbstractModel:
        """所属模型.

        Raises:
            ReferenceError: 模型已被回收.

        """
        model = self._model_ref()
        if model is None:
            raise ReferenceError("表单所属模型已被回收")
        return model


__all__ = ["ModelForm"]
