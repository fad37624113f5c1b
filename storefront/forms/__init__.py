"""表单模块."""

from storefront.forms.base import ModelForm

__all__ = ["ModelForm"]
