import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from training_center.auth.passwords import hash_password
from training_center.database import database_error, get_db, transaction
from training_center.models.role_assignment import Role
from training_center.repositories import (
    RoleAssignmentRepository,
    TrainingCenterRepository,
    UserRepository,
)
from training_center.schemas import (
    EMAIL_TAKEN_MESSAGE,
    RegisterTrainingCenterRequest,
    RegistrationResponse,
    UserResponse,
    collect_field_errors,
)

router = APIRouter(tags=['sign up'])

logger = logging.getLogger(__name__)

BODY_NOT_OBJECT_MESSAGE = 'The request body must be a JSON object.'


def validate_registration(
    payload: Any,
    users: UserRepository,
) -> tuple[RegisterTrainingCenterRequest | None, dict[str, list[str]]]:
    if not isinstance(payload, dict):
        return None, {'body': [BODY_NOT_OBJECT_MESSAGE]}

    data = None
    errors: dict[str, list[str]] = {}
    try:
        data = RegisterTrainingCenterRequest.model_validate(payload)
    except ValidationError as exc:
        errors = collect_field_errors(exc)

    if 'email' not in errors:
        email = data.email if data is not None else str(payload.get('email', '')).strip().lower()
        if users.get_by_email(email) is not None:
            errors['email'] = [EMAIL_TAKEN_MESSAGE]
            data = None

    return data, errors


@router.post(
    '/register/training-center',
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {'description': 'Field validation errors'}},
)
def register_training_center(payload: Any = Body(default=None), db: Session = Depends(get_db)):
    users = UserRepository(db)

    try:
        data, errors = validate_registration(payload, users)
        if errors:
            return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'errors': errors})

        hashed_password = hash_password(data.password)
        with transaction(db):
            user = users.create(email=data.email, hashed_password=hashed_password)
            TrainingCenterRepository(db).create(
                email=data.email,
                hashed_password=hashed_password,
                first_name=data.first_name,
                last_name=data.last_name,
                phone=data.phone,
                tax_identity_number=data.tax_identity_number,
                user_id=user.id,
            )
            RoleAssignmentRepository(db).assign(user, Role.TRAINING_CENTER)
    except SQLAlchemyError as exc:
        raise database_error(exc) from exc

    logger.info('Registered training center user_id=%s', user.id)
    return RegistrationResponse(
        message='User successfully registered',
        user=UserResponse.model_validate(user),
    )
