from datetime import datetime, timedelta, timezone

import jwt
import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from training_center.auth import jwt_handler
from training_center.auth.dependencies import get_current_user
from training_center.core import config


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme='Bearer', credentials=token)


def test_get_current_user_resolves_token_subject(db, center_user) -> None:
    token = jwt_handler.create_access_token(subject='center@example.com')

    user = get_current_user(credentials=_credentials(token), db=db)

    assert user.id == center_user.id


@pytest.mark.parametrize(
    ('token_factory', 'detail'),
    [
        (lambda: 'garbage', 'Invalid token'),
        (lambda: jwt_handler.create_access_token(subject='center@example.com', expires_minutes=-5), 'Invalid token'),
        (lambda: jwt_handler.create_access_token(subject=''), 'Invalid token subject'),
        (lambda: jwt_handler.create_access_token(subject='ghost@example.com'), 'User not found'),
    ],
)
def test_get_current_user_rejects_bad_tokens(db, center_user, token_factory, detail: str) -> None:
    with pytest.raises(HTTPException) as exception_info:
        get_current_user(credentials=_credentials(token_factory()), db=db)

    assert exception_info.value.status_code == 401
    assert exception_info.value.detail == detail


def test_get_current_user_rejects_token_of_another_type(db, center_user) -> None:
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {'sub': 'center@example.com', 'typ': 'refresh', 'iat': now, 'exp': now + timedelta(minutes=5)},
        config.JWT_SECRET_KEY,
        algorithm=config.JWT_ALGORITHM,
    )

    with pytest.raises(HTTPException) as exception_info:
        get_current_user(credentials=_credentials(token), db=db)

    assert exception_info.value.detail == 'Invalid token'


def test_get_current_user_rejects_token_without_expiry(db, center_user) -> None:
    token = jwt.encode(
        {'sub': 'center@example.com', 'typ': 'access', 'iat': datetime.now(timezone.utc)},
        config.JWT_SECRET_KEY,
        algorithm=config.JWT_ALGORITHM,
    )

    with pytest.raises(HTTPException) as exception_info:
        get_current_user(credentials=_credentials(token), db=db)

    assert exception_info.value.status_code == 401
