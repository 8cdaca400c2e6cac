"""
Authentication Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- RegisterCommand / LoginCommand: input to use case (validated business intent)
- UserInfo: output from use case (public profile)
"""

from pydantic import BaseModel, field_validator

from src.domain.entities import User


def normalize_email(email: str) -> str:
    """Accounts are keyed by the trimmed, lowercased address"""
    return email.strip().lower()


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    Contains only business-relevant data (no HTTP concerns).
    """

    email: str
    name: str
    password: str

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        return normalize_email(value)


class LoginCommand(BaseModel):
    """Login command"""

    email: str
    password: str

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        return normalize_email(value)


class UserInfo(BaseModel):
    """Public user information returned after register/login"""

    id: str
    email: str
    name: str

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(id=str(user.id), email=user.email, name=user.name)
