from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.api.utils.jwt import generate_jwt
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    LoginCommand,
    LoginUseCase,
    RegisterCommand,
    RegisterUseCase,
    UserInfo,
)
from src.depends import get_config, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class AuthResponse(BaseModel):
    """Token plus the authenticated user's public profile"""

    token: str
    user: UserInfo


def _required(data, fields, message):
    if not isinstance(data, dict):
        raise ValueError(message)
    for field in fields:
        value = data.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError(message)
    return data


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    email: EmailStr = Field(..., description="User email address")
    name: str = Field(..., max_length=255, description="Display name")
    password: str = Field(..., description="User password")

    @model_validator(mode="before")
    @classmethod
    def all_fields_present(cls, data):
        return _required(
            data, ("email", "name", "password"), "Email, name and password are required"
        )

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        return value.strip()

    @field_validator("password")
    @classmethod
    def password_long_enough(cls, value: str) -> str:
        min_length = ApplicationConfig.MIN_PASSWORD_LENGTH
        if len(value) < min_length:
            raise ValueError(f"Password must be at least {min_length} characters")
        return value


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    Register a new account

    Command/Response Flow:
    1. RegisterRequest validates HTTP input
    2. Map to RegisterCommand (business intent)
    3. Execute RegisterUseCase
    4. Issue a JWT for the new user

    Raises:
        - 400 Bad Request: Missing fields or short password
        - 409 Conflict: Email already exists
    """
    command = RegisterCommand(
        email=request.email, name=request.name, password=request.password
    )

    use_case = RegisterUseCase(uow, bcrypt_rounds=config.BCRYPT_ROUNDS)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    user = result.value
    return AuthResponse(token=generate_jwt(user.id, user.email), user=user)


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")

    @model_validator(mode="before")
    @classmethod
    def all_fields_present(cls, data):
        return _required(data, ("email", "password"), "Email and password are required")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    User Login

    Raises:
        - 400 Bad Request: Missing fields
        - 401 Unauthorized: Invalid credentials
    """
    command = LoginCommand(email=request.email, password=request.password)

    use_case = LoginUseCase(uow, bcrypt_rounds=config.BCRYPT_ROUNDS)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    user = result.value
    return AuthResponse(token=generate_jwt(user.id, user.email), user=user)
