import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from training_center.auth.dependencies import get_current_user
from training_center.auth.passwords import hash_password
from training_center.database import database_error, get_db, transaction
from training_center.models.role_assignment import Role
from training_center.models.user import User
from training_center.repositories import RoleAssignmentRepository, TrainerRepository, UserRepository
from training_center.schemas import (
    EMAIL_TAKEN_MESSAGE,
    CreateTrainerRequest,
    SuccessResponse,
    TrainerCreatedResponse,
    TrainerDetailResponse,
    TrainerListResponse,
    TrainerResponse,
    TrainerUserResponse,
    UpdateTrainerRequest,
)

router = APIRouter(tags=['training center actions'])

logger = logging.getLogger(__name__)

TRAINER_PROFILE_FIELDS = ('email', 'first_name', 'last_name', 'phone')


def email_taken(email: str) -> HTTPException:
    # Same shape FastAPI uses for request body validation errors.
    return HTTPException(
        status_code=422,
        detail=[{'type': 'value_error', 'loc': ['body', 'email'], 'msg': EMAIL_TAKEN_MESSAGE, 'input': email}],
    )


def trainer_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Trainer not found.')


@router.post('/create/trainer', response_model=TrainerCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_trainer(
    data: CreateTrainerRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    users = UserRepository(db)

    try:
        if users.get_by_email(data.email) is not None:
            raise email_taken(data.email)

        with transaction(db):
            user = users.create(email=data.email, hashed_password=hash_password(data.password))
            trainer = TrainerRepository(db).create(
                email=data.email,
                first_name=data.first_name,
                last_name=data.last_name,
                phone=data.phone,
                user_id=user.id,
            )
            RoleAssignmentRepository(db).assign(user, Role.TRAINER)
    except SQLAlchemyError as exc:
        raise database_error(exc) from exc

    logger.info('Trainer user_id=%s created by user_id=%s', user.id, current_user.id)
    return TrainerCreatedResponse(
        message='User successfully registered',
        user=TrainerResponse.model_validate(trainer),
    )


@router.delete('/delete/trainer/{trainer_id}', response_model=SuccessResponse)
def delete_trainer(
    trainer_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    users = UserRepository(db)

    try:
        user = users.get_by_id(trainer_id, 'trainer', 'roles')
        if user is None or user.trainer is None:
            raise trainer_not_found()

        # The trainer profile and role assignments go with the user.
        with transaction(db):
            users.delete(user)
    except SQLAlchemyError as exc:
        raise database_error(exc) from exc

    logger.info('Trainer user_id=%s deleted by user_id=%s', trainer_id, current_user.id)
    return SuccessResponse(success='Successfully deleted.')


@router.post('/update/trainer/{trainer_id}', response_model=SuccessResponse)
def update_trainer(
    trainer_id: int,
    data: UpdateTrainerRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    changes = data.changes()
    users = UserRepository(db)
    trainers = TrainerRepository(db)

    try:
        user = users.get_by_id(trainer_id, 'trainer')
        trainer = trainers.get_by_user_id(trainer_id)
        if user is None or trainer is None:
            raise trainer_not_found()

        if 'email' in changes and changes['email'] != user.email:
            if users.get_by_email(changes['email']) is not None:
                raise email_taken(changes['email'])

        user_changes = {}
        if 'email' in changes:
            user_changes['email'] = changes['email']
        if 'password' in changes:
            user_changes['hashed_password'] = hash_password(changes['password'])
        trainer_changes = {field: changes[field] for field in TRAINER_PROFILE_FIELDS if field in changes}

        with transaction(db):
            users.update(user, **user_changes)
            trainers.update(trainer, **trainer_changes)
    except SQLAlchemyError as exc:
        raise database_error(exc) from exc

    logger.info('Trainer user_id=%s updated fields=%s', trainer_id, sorted(changes))
    return SuccessResponse(success='Successfully updated.')


@router.post('/trainers/list', response_model=TrainerListResponse)
def list_trainers(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        trainer_users = UserRepository(db).list_trainers()
    except SQLAlchemyError as exc:
        raise database_error(exc) from exc

    if not trainer_users:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Trainers not found.')

    return TrainerListResponse(
        trainers=[TrainerUserResponse.model_validate(user) for user in trainer_users],
    )


@router.post('/trainer/{trainer_id}', response_model=TrainerDetailResponse)
def get_trainer(
    trainer_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        trainer = TrainerRepository(db).get_by_user_id(trainer_id)
    except SQLAlchemyError as exc:
        raise database_error(exc) from exc

    if trainer is None:
        raise trainer_not_found()

    return TrainerDetailResponse(trainer=TrainerResponse.model_validate(trainer))
