import pytest
from pydantic import ValidationError

from training_center.schemas import (
    RegisterTrainingCenterRequest,
    UpdateTrainerRequest,
    collect_field_errors,
)


def test_register_request_normalizes_email() -> None:
    request = RegisterTrainingCenterRequest(
        email='Center@Example.COM',
        password='pw',
        first_name='A',
        last_name='B',
        phone='123',
        tax_identity_number='999',
    )

    assert request.email == 'center@example.com'


def test_collect_field_errors_groups_messages_by_field() -> None:
    with pytest.raises(ValidationError) as exception_info:
        RegisterTrainingCenterRequest.model_validate({'email': 'bad', 'password': 'p'})

    errors = collect_field_errors(exception_info.value)

    assert set(errors) == {'email', 'password', 'first_name', 'last_name', 'phone', 'tax_identity_number'}
    assert all(isinstance(messages, list) and messages for messages in errors.values())


def test_update_request_changes_skip_unset_and_null_fields() -> None:
    request = UpdateTrainerRequest.model_validate({'phone': '555', 'first_name': None})

    assert request.changes() == {'phone': '555'}
