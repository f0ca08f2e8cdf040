import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from training_center.auth import jwt_handler
from training_center.auth.dependencies import get_current_user
from training_center.auth.passwords import verify_password
from training_center.database import database_error, get_db
from training_center.models.user import User
from training_center.repositories import UserRepository
from training_center.schemas import CurrentUserResponse, LoginRequest, TokenResponse

router = APIRouter(tags=['auth'])

logger = logging.getLogger(__name__)


@router.post("/login", response_model=TokenResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    try:
        user = UserRepository(db).get_by_email(data.email.strip().lower())
    except SQLAlchemyError as exc:
        raise database_error(exc) from exc

    if user is None or not verify_password(data.password, user.hashed_password):
        logger.info("Rejected login attempt")
        raise HTTPException(
            status_code=422,
            detail="Sorry, wrong email address or password. Please try again",
        )

    return TokenResponse(access_token=jwt_handler.issue_token_for(user))


@router.get("/me", response_model=CurrentUserResponse)
def me(current_user: User = Depends(get_current_user)):
    return CurrentUserResponse.model_validate(current_user)
