"""Request and response models for the account endpoints."""

from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator

MAX_EMAIL_LENGTH = 100
MIN_PASSWORD_LENGTH = 2
EMAIL_TAKEN_MESSAGE = 'The email has already been taken.'


def normalize_email(value: str) -> str:
    normalized = value.strip().lower()
    if len(normalized) > MAX_EMAIL_LENGTH:
        raise ValueError(f'Email must be {MAX_EMAIL_LENGTH} characters or fewer.')
    return normalized


def collect_field_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by top-level field name."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = str(error['loc'][0]) if error['loc'] else 'body'
        errors.setdefault(field, []).append(error['msg'])
    return errors


class CreateTrainerRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    phone: str = Field(min_length=1)

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        return normalize_email(value)


class RegisterTrainingCenterRequest(CreateTrainerRequest):
    tax_identity_number: str = Field(min_length=1)


class UpdateTrainerRequest(BaseModel):
    """Partial update; fields left out or sent as null are not touched."""

    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=MIN_PASSWORD_LENGTH)
    first_name: str | None = Field(default=None, min_length=1)
    last_name: str | None = Field(default=None, min_length=1)
    phone: str | None = Field(default=None, min_length=1)

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return normalize_email(value)

    def changes(self) -> dict[str, str]:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = 'bearer'


class UserResponse(BaseModel):
    id: int
    email: str

    class Config:
        from_attributes = True


class CurrentUserResponse(UserResponse):
    role_ids: list[int]


class TrainerResponse(BaseModel):
    id: int
    user_id: int
    email: str
    first_name: str
    last_name: str
    phone: str

    class Config:
        from_attributes = True


class TrainerUserResponse(UserResponse):
    trainer: TrainerResponse


class RegistrationResponse(BaseModel):
    message: str
    user: UserResponse


class TrainerCreatedResponse(BaseModel):
    message: str
    user: TrainerResponse


class TrainerListResponse(BaseModel):
    trainers: list[TrainerUserResponse]


class TrainerDetailResponse(BaseModel):
    trainer: TrainerResponse


class SuccessResponse(BaseModel):
    success: str
