import pytest

from storefront.errors import CollaboratorNotFoundError, ConflictError
from storefront.models import BaseResource, CollaboratorRegistry


class ProductResource(BaseResource):
    pass


class OtherProductResource(BaseResource):
    pass


@pytest.mark.unit
def test_register_resource_as_decorator_returns_class():
    registry = CollaboratorRegistry()

    decorated = registry.register_resource("Shop", "product")(ProductResource)

    assert decorated is ProductResource
    assert registry.resolve("Shop_Resource_Product") is ProductResource


@pytest.mark.unit
def test_duplicate_registration_raises_conflict():
    registry = CollaboratorRegistry()
    registry.register_resource("Shop", "product", ProductResource)

    with pytest.raises(ConflictError):
        registry.register_resource("Shop", "product", OtherProductResource)


@pytest.mark.unit
def test_override_replaces_existing_factory():
    registry = CollaboratorRegistry()
    registry.register_resource("Shop", "product", ProductResource)

    registry.register_resource("Shop", "product", OtherProductResource, override=True)

    assert registry.resolve("Shop_Resource_Product") is OtherProductResource


@pytest.mark.unit
def test_unregister_and_resolve_missing():
    registry = CollaboratorRegistry()
    registry.register_form("Shop", "checkout", object)

    registry.unregister("Shop_Form_Checkout")

    assert "Shop_Form_Checkout" not in registry
    with pytest.raises(CollaboratorNotFoundError):
        registry.resolve("Shop_Form_Checkout")


@pytest.mark.unit
def test_identifiers_are_sorted():
    registry = CollaboratorRegistry()
    registry.register_resource("Shop", "product", ProductResource)
    registry.register_form("Shop", "address", object)

    assert registry.identifiers() == ("Shop_Form_Address", "Shop_Resource_Product")
    assert len(registry) == 2
