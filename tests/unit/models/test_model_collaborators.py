import gc

import pytest
from wtforms import StringField

from storefront.errors import CollaboratorNotFoundError
from storefront.forms import ModelForm
from storefront.models import AbstractModel, BaseResource


class Shop_Model_Customer(AbstractModel):
    pass


class CatalogModel(AbstractModel):
    namespace = "Shop"


class UserProfileResource(BaseResource):
    def init(self) -> None:
        self.ready = True


class AddressForm(ModelForm):
    street = StringField()


@pytest.fixture
def shop_collaborators(collaborators):
    collaborators.register_resource("Shop", "userProfile", UserProfileResource)
    collaborators.register_form("Shop", "address", AddressForm)
    return collaborators


@pytest.mark.unit
def test_get_resource_derives_identifier_from_namespace_and_inflected_name(collaborators):
    built = []

    @collaborators.register_resource("Shop", "userProfile")
    def build_profile():
        resource = UserProfileResource()
        built.append(resource)
        return resource

    model = Shop_Model_Customer(registry=collaborators)

    resource = model.get_resource("userProfile")

    assert "Shop_Resource_User_Profile" in collaborators
    assert built == [resource]
    assert resource.ready is True


@pytest.mark.unit
def test_get_resource_returns_cached_instance(shop_collaborators):
    model = Shop_Model_Customer(registry=shop_collaborators)

    first = model.get_resource("userProfile")
    second = model.get_resource("userProfile")

    assert first is second


@pytest.mark.unit
def test_resource_caches_are_per_model_instance(shop_collaborators):
    first = Shop_Model_Customer(registry=shop_collaborators)
    second = Shop_Model_Customer(registry=shop_collaborators)

    assert first.get_resource("userProfile") is not second.get_resource("userProfile")


@pytest.mark.unit
def test_namespace_class_attribute_overrides_class_name(shop_collaborators):
    model = CatalogModel(registry=shop_collaborators)

    assert model._get_namespace() == "Shop"
    assert isinstance(model.get_resource("userProfile"), UserProfileResource)


@pytest.mark.unit
def test_get_resource_raises_when_identifier_is_not_registered(collaborators):
    model = Shop_Model_Customer(registry=collaborators)

    with pytest.raises(CollaboratorNotFoundError) as exc_info:
        model.get_resource("missingThing")

    assert exc_info.value.extra["identifier"] == "Shop_Resource_Missing_Thing"
    assert exc_info.value.status_code == 500


@pytest.mark.unit
def test_get_resource_rejects_objects_without_resource_contract(collaborators):
    collaborators.register_resource("Shop", "broken", object)
    model = Shop_Model_Customer(registry=collaborators)

    with pytest.raises(CollaboratorNotFoundError) as exc_info:
        model.get_resource("broken")

    assert exc_info.value.message_key == "COLLABORATOR_CONTRACT_MISMATCH"


@pytest.mark.unit
def test_get_form_passes_model_back_reference(shop_collaborators):
    model = Shop_Model_Customer(registry=shop_collaborators)

    form = model.get_form("address")

    assert isinstance(form, AddressForm)
    assert form.model is model
    assert model.get_form("address") is form


@pytest.mark.unit
def test_get_form_raises_when_identifier_is_not_registered(collaborators):
    model = Shop_Model_Customer(registry=collaborators)

    with pytest.raises(CollaboratorNotFoundError):
        model.get_form("checkout")


@pytest.mark.unit
def test_form_does_not_keep_model_alive(shop_collaborators):
    model = Shop_Model_Customer(registry=shop_collaborators)
    form = model.get_form("address")

    del model
    gc.collect()

    with pytest.raises(ReferenceError):
        _ = form.model
