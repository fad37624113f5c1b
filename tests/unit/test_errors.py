import pytest
from werkzeug.exceptions import NotFound

from storefront.constants import ErrorMessages
from storefront.constants.system_constants import ErrorCategory, ErrorSeverity
from storefront.errors import (
    AclNotConfiguredError,
    AppError,
    CollaboratorNotFoundError,
    InvalidIdentityError,
    ValidationError,
    map_exception_to_status,
)


@pytest.mark.unit
def test_app_error_resolves_message_from_key():
    error = CollaboratorNotFoundError()

    assert error.message == ErrorMessages.COLLABORATOR_NOT_FOUND
    assert error.category is ErrorCategory.CONFIGURATION
    assert error.severity is ErrorSeverity.HIGH
    assert error.recoverable is False


@pytest.mark.unit
def test_invalid_identity_is_validation_error():
    error = InvalidIdentityError()

    assert isinstance(error, ValidationError)
    assert error.message == ErrorMessages.INVALID_IDENTITY
    assert error.recoverable is True


@pytest.mark.unit
@pytest.mark.parametrize(
    ("error", "status"),
    [
        (InvalidIdentityError(), 400),
        (CollaboratorNotFoundError(), 500),
        (AclNotConfiguredError(), 500),
        (AppError("boom", status_code=418), 418),
        (NotFound(), 404),
        (RuntimeError("boom"), 500),
    ],
)
def test_map_exception_to_status(error, status):
    assert map_exception_to_status(error) == status
