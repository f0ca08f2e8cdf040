import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault('DATABASE_URL', 'sqlite://')
os.environ.setdefault('BCRYPT_ROUNDS', '4')

from training_center.auth import jwt_handler  # noqa: E402
from training_center.auth.passwords import hash_password  # noqa: E402
from training_center.database import Base, get_db  # noqa: E402
from training_center.main import app  # noqa: E402
from training_center.models.role_assignment import Role, RoleAssignment  # noqa: E402
from training_center.models.trainer import Trainer  # noqa: E402
from training_center.models.training_center import TrainingCenter  # noqa: E402
from training_center.models.user import User  # noqa: E402


@pytest.fixture
def db_engine():
    engine = create_engine('sqlite://', connect_args={'check_same_thread': False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def center_user(db) -> User:
    user = User(email='center@example.com', hashed_password=hash_password('center'))
    user.training_center = TrainingCenter(
        email='center@example.com',
        hashed_password=user.hashed_password,
        first_name='Center',
        last_name='Owner',
        phone='+374 98-066-083',
        tax_identity_number='777777',
    )
    user.roles.append(RoleAssignment(role_id=int(Role.TRAINING_CENTER)))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def make_trainer(db):
    def _make_trainer(email: str, first_name: str = 'Ann', last_name: str = 'Lee', phone: str = '555-0100') -> User:
        user = User(email=email, hashed_password=hash_password('trainer'))
        user.trainer = Trainer(email=email, first_name=first_name, last_name=last_name, phone=phone)
        user.roles.append(RoleAssignment(role_id=int(Role.TRAINER)))
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_trainer


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(center_user) -> dict[str, str]:
    token = jwt_handler.create_access_token(subject=center_user.email)
    return {'Authorization': f'Bearer {token}'}
